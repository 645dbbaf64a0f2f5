"""
NoteShelf: Markdown notes served over HTTP and rendered with highlighted code.
"""

__version__ = "1.0.0"
