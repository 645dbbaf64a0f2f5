"""
Web routes package for NoteShelf.
This package contains web route modules that return HTML template responses.
"""

from . import docs

__all__ = ["docs"]
