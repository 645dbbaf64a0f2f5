"""
Test configuration for NoteShelf unit tests.

Ensures the project root is on sys.path so the package can be imported
without installing it, and provides fakes for the HTTP layer so no test
touches the network.
"""

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from noteshelf.services.content_service import ContentFetcher  # noqa: E402
from noteshelf.services.directory_index import DirectoryIndex  # noqa: E402


TEST_CONTENT_ROOT = "http://content.test/content"

TEST_DIRECTORIES = {
    "interview": ["前言.md", "美团二面(4.22).md", "淘天hr面(5.7).md"],
    "knowledge": ["前言.md", "JS.md", "CSS.md"],
}


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, content=b"", headers=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}


class FakeSession:
    """Records GET calls and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def directory_index():
    return DirectoryIndex(TEST_DIRECTORIES)


@pytest.fixture
def make_fetcher():
    """Build a ContentFetcher backed by a FakeSession."""

    def _make(status=200, content=b"", headers=None, error=None):
        response = FakeResponse(status, content, headers)
        session = FakeSession(response=response, error=error)
        return ContentFetcher(content_root=TEST_CONTENT_ROOT, session=session), session

    return _make
