"""
Document service layer for NoteShelf.
Ties the directory index, content fetcher and renderer together for the routes.
"""

from typing import List, Optional

from loguru import logger

from .. import config
from ..models.document import DirectoryListing, DocumentEntry, RenderedDocument
from ..utils.markdown_renderer import MarkdownRenderer, get_renderer
from ..utils.sanitizer import sanitize_html
from ..utils.titles import extract_title
from .content_service import ContentFetcher, get_content_fetcher
from .directory_index import DirectoryIndex, get_directory_index


class DocumentService:
    """Service class for navigation listings and rendered documents."""

    @staticmethod
    def list_directories(index: Optional[DirectoryIndex] = None) -> List[str]:
        index = index or get_directory_index()
        return index.directories()

    @staticmethod
    def list_documents(
        directory: str, index: Optional[DirectoryIndex] = None
    ) -> DirectoryListing:
        """
        Build the navigation listing for a directory.

        Args:
            directory: Directory key
            index: Index to read, defaults to the process-wide one

        Returns:
            DirectoryListing in authored order; empty for unknown directories
        """
        index = index or get_directory_index()
        files = [
            DocumentEntry(filename=name, title=extract_title(name))
            for name in index.list_files(directory)
        ]
        return DirectoryListing(directory=directory, files=files)

    @staticmethod
    async def get_document(
        directory: str,
        filename: str,
        fetcher: Optional[ContentFetcher] = None,
        renderer: Optional[MarkdownRenderer] = None,
        sanitize: Optional[bool] = None,
    ) -> RenderedDocument:
        """
        Fetch, decode and render one document.

        Failed fetches still produce a document: the placeholder text rendered
        to HTML, with loaded=False.
        """
        fetcher = fetcher or get_content_fetcher()
        renderer = renderer or get_renderer()
        if sanitize is None:
            sanitize = config.SANITIZE_HTML

        result = await fetcher.fetch(directory, filename)
        html = renderer.render(result.text)
        if sanitize:
            html = sanitize_html(html)

        if not result.ok:
            logger.warning(f"Serving placeholder for {directory}/{filename}")

        return RenderedDocument(
            directory=directory,
            filename=filename,
            title=extract_title(filename),
            html=html,
            loaded=result.ok,
        )
