"""
Validation utilities for NoteShelf.
Checks path segments taken from URLs before they reach the content server.
"""

from typing import Optional

_FORBIDDEN_SEGMENT_CHARS = ("/", "\\", "\x00", "?", "#")


def is_safe_path_segment(segment: Optional[str]) -> bool:
    """Return True if the value can be used as a single directory or file name."""
    if not segment or not segment.strip():
        return False

    # Disallow traversal and anything that would change the resource path
    if segment in (".", "..") or ".." in segment:
        return False

    return not any(ch in segment for ch in _FORBIDDEN_SEGMENT_CHARS)
