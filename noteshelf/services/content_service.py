"""
Content service for NoteShelf.
Retrieves Markdown documents from the content server and decodes them as UTF-8.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Optional

import requests
from loguru import logger

from .. import config
from ..models.document import FetchResult, RawContent


class ContentRetrievalError(Exception):
    """Raised when the content server answers with a non-success status."""

    def __init__(self, path: str, status: int):
        super().__init__(f"HTTP error! status: {status}")
        self.path = path
        self.status = status


class ContentFetcher:
    """Fetches documents by directory and filename.

    Failures never reach the caller: they are logged and replaced by
    config.FALLBACK_CONTENT.
    """

    def __init__(
        self,
        content_root: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.content_root = (content_root or config.CONTENT_ROOT).rstrip("/")
        self._session = session
        self._local = threading.local()
        self._timeout = timeout if timeout is not None else config.FETCH_TIMEOUT

    def _get_session(self) -> requests.Session:
        """Return the injected session, or one owned by the calling thread."""
        if self._session is not None:
            return self._session
        # requests.Session is not thread-safe; executor threads each get one
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def build_resource_path(self, directory_key: str, filename: str) -> str:
        return f"{self.content_root}/{directory_key}/{filename}"

    def retrieve(self, path: str) -> RawContent:
        """
        Perform the blocking GET for a resource path.

        Args:
            path: Full resource URL

        Returns:
            The response body as raw bytes

        Raises:
            ContentRetrievalError: The server answered with a non-2xx status
            requests.RequestException: The transport failed
        """
        response = self._get_session().get(
            path,
            headers={"Accept": config.CONTENT_ACCEPT},
            timeout=self._timeout,
        )
        if not 200 <= response.status_code < 300:
            raise ContentRetrievalError(path, response.status_code)
        return RawContent(path=path, data=response.content, status=response.status_code)

    @staticmethod
    def decode_content(raw: RawContent) -> str:
        # Transport charset headers are ignored on purpose
        return raw.data.decode("utf-8", errors="replace")

    async def fetch(self, directory_key: str, filename: str) -> FetchResult:
        """Fetch and decode a document, recovering from any failure."""
        path = self.build_resource_path(directory_key, filename)
        try:
            loop = asyncio.get_running_loop()
            raw = await loop.run_in_executor(None, self.retrieve, path)
            text = self.decode_content(raw)
        except Exception as e:
            logger.error(f"Failed to load content {path}: {e}")
            return FetchResult(
                path=path, text=config.FALLBACK_CONTENT, ok=False, error=str(e)
            )

        logger.debug(f"Loaded {path} ({len(raw.data)} bytes)")
        return FetchResult(path=path, text=text, ok=True)

    async def fetch_content(self, directory_key: str, filename: str) -> str:
        """Return the decoded document text, or the placeholder on failure."""
        result = await self.fetch(directory_key, filename)
        return result.text


_content_fetcher: Optional[ContentFetcher] = None


def get_content_fetcher() -> ContentFetcher:
    """Return the process-wide content fetcher."""
    global _content_fetcher
    if _content_fetcher is None:
        _content_fetcher = ContentFetcher()
    return _content_fetcher
