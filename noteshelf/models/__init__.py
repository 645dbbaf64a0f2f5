"""
Models package for NoteShelf.
Contains data models and API schemas.
"""

from .document import (
    RawContent,
    FetchResult,
    CodeBlockResult,
    DocumentEntry,
    DirectoryListing,
    RenderedDocument,
)

__all__ = [
    "RawContent",
    "FetchResult",
    "CodeBlockResult",
    "DocumentEntry",
    "DirectoryListing",
    "RenderedDocument",
]
