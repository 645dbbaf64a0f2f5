"""
Route tests for the JSON API and HTML views.

The content fetcher is swapped for one backed by a fake session, so no
content server needs to be running.
"""

import pytest
from fastapi.testclient import TestClient

from noteshelf import config
from noteshelf.server import app
from noteshelf.services import document_service


JS_MARKDOWN = "# JS\n\n闭包示例：\n\n```js\nconst add = (a, b) => a + b;\n```\n".encode("utf-8")


@pytest.fixture
def client(monkeypatch, directory_index):
    monkeypatch.setattr(document_service, "get_directory_index", lambda: directory_index)
    monkeypatch.setattr(config, "SANITIZE_HTML", False)
    return TestClient(app)


@pytest.fixture
def serve_content(monkeypatch, make_fetcher):
    """Route document fetches through a fake session answering with the given status and body."""

    def _serve(status=200, content=b""):
        fetcher, session = make_fetcher(status, content)
        monkeypatch.setattr(document_service, "get_content_fetcher", lambda: fetcher)
        return session

    return _serve


def test_list_directories(client):
    response = client.get("/api/directories")
    assert response.status_code == 200
    assert response.json() == {"directories": ["interview", "knowledge"]}


def test_list_documents_in_order_with_titles(client):
    response = client.get("/api/directories/knowledge")

    assert response.status_code == 200
    assert response.json() == {
        "directory": "knowledge",
        "files": [
            {"filename": "前言.md", "title": "前言"},
            {"filename": "JS.md", "title": "JS"},
            {"filename": "CSS.md", "title": "CSS"},
        ],
    }


def test_list_documents_unknown_directory_is_empty(client):
    response = client.get("/api/directories/nothing-here")

    assert response.status_code == 200
    assert response.json()["files"] == []


def test_get_document_renders_markdown(client, serve_content):
    session = serve_content(200, JS_MARKDOWN)
    response = client.get("/api/documents/knowledge/JS.md")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "JS"
    assert body["loaded"] is True
    assert "<h1>JS</h1>" in body["html"]
    assert 'class="hljs language-js"' in body["html"]
    assert session.calls[0]["url"].endswith("/knowledge/JS.md")


def test_get_document_failure_renders_placeholder(client, serve_content):
    serve_content(404, b"Not Found")
    response = client.get("/api/documents/knowledge/Missing.md")

    assert response.status_code == 200
    body = response.json()
    assert body["loaded"] is False
    assert "<h1>文件加载失败</h1>" in body["html"]


def test_get_document_sanitizes_when_enabled(client, serve_content, monkeypatch):
    monkeypatch.setattr(config, "SANITIZE_HTML", True)
    serve_content(200, b"hello <script>alert(1)</script>\n\n```js\nlet a;\n```")
    html = client.get("/api/documents/knowledge/JS.md").json()["html"]

    assert "<script>" not in html
    assert 'class="hljs language-js"' in html


def test_get_document_rejects_unsafe_names(client, serve_content):
    session = serve_content(200, b"# secret")
    response = client.get("/api/documents/knowledge/a..b.md")

    assert response.status_code == 404
    assert response.json() == {"detail": "Document not found"}
    assert session.calls == []


def test_highlight_stylesheet(client):
    response = client.get("/api/highlight.css")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert ".hljs" in response.text


def test_home_lists_directories(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "interview" in response.text
    assert "淘天hr面(5.7)" in response.text


def test_document_page_renders_navigation_and_html(client, serve_content):
    serve_content(200, JS_MARKDOWN)
    response = client.get("/docs/knowledge/JS.md")

    assert response.status_code == 200
    assert 'class="hljs language-js"' in response.text
    assert "CSS</a>" in response.text


def test_directory_page_opens_first_document(client, serve_content):
    session = serve_content(200, "# 前言".encode("utf-8"))
    response = client.get("/docs/knowledge")

    assert response.status_code == 200
    assert session.calls[0]["url"].endswith("/knowledge/前言.md")


def test_unknown_directory_page_is_empty(client, serve_content):
    session = serve_content(200, b"")
    response = client.get("/docs/unknown")

    assert response.status_code == 200
    assert "No documents" in response.text
    assert session.calls == []


def test_unknown_route_uses_error_page(client):
    response = client.get("/definitely/not/here")

    assert response.status_code == 404
    assert "404 Not Found" in response.text


def test_security_headers_are_set(client):
    response = client.get("/api/directories")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "script-src 'none'" in response.headers["Content-Security-Policy"]
