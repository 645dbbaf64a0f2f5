"""
Utils package for NoteShelf.
Contains rendering, sanitising and validation helpers.
"""

from .titles import extract_title
from .validation import is_safe_path_segment
from .sanitizer import sanitize_html
from .markdown_renderer import (
    CodeHighlighter,
    MarkdownRenderer,
    get_renderer,
    render_markdown,
)

__all__ = [
    'extract_title',
    'is_safe_path_segment',
    'sanitize_html',
    'CodeHighlighter',
    'MarkdownRenderer',
    'get_renderer',
    'render_markdown',
]
