"""
Services package for NoteShelf.
Contains the content lookup and retrieval layer.
"""

from .directory_index import DirectoryIndex, get_directory_index, load_directory_index
from .content_service import ContentFetcher, ContentRetrievalError, get_content_fetcher
from .document_service import DocumentService

__all__ = [
    "DirectoryIndex",
    "get_directory_index",
    "load_directory_index",
    "ContentFetcher",
    "ContentRetrievalError",
    "get_content_fetcher",
    "DocumentService",
]
