"""
Routes package for NoteShelf.
This package contains all the route modules for the application.
"""

from .api import documents as api_documents
from .web import docs

__all__ = [
    "docs",
    "api_documents",
]
