"""
Unit tests for validation and sanitising utilities.

These tests avoid HTTP calls and exercise pure functions so they can run in CI.
"""

import pytest

from noteshelf.utils import is_safe_path_segment, sanitize_html


@pytest.mark.parametrize("segment", ["knowledge", "JS.md", "美团二面(4.22).md", "js手写.md"])
def test_is_safe_path_segment_accepts_document_names(segment):
    assert is_safe_path_segment(segment)


@pytest.mark.parametrize(
    "segment", [None, "", "   ", ".", "..", "a..b.md", "a/b.md", "a\\b.md", "x.md?raw", "x#y"]
)
def test_is_safe_path_segment_rejects_paths(segment):
    assert not is_safe_path_segment(segment)


def test_sanitize_html_keeps_highlight_markup():
    html = (
        '<pre><code class="hljs language-js"><span class="kd">const</span></code></pre>'
        '<ul><li class="task-list-item"><input type="checkbox" disabled checked>done</li></ul>'
        "<p><del>old</del></p>"
    )
    cleaned = sanitize_html(html)

    assert 'class="hljs language-js"' in cleaned
    assert '<span class="kd">const</span>' in cleaned
    assert 'type="checkbox"' in cleaned
    assert "<del>old</del>" in cleaned


def test_sanitize_html_strips_scripts_and_handlers():
    cleaned = sanitize_html(
        '<p onclick="steal()">hi</p><script>alert(1)</script>'
        '<a href="javascript:alert(1)">x</a>'
    )

    assert "<script" not in cleaned
    assert "onclick" not in cleaned
    assert "javascript:" not in cleaned
