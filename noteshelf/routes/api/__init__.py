"""
API routes package for NoteShelf.
This package contains API route modules that return JSON/data responses.
"""

from . import documents

__all__ = ["documents"]
