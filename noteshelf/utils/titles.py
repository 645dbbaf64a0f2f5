"""Display titles derived from document filenames."""

from ..config import DOCUMENT_SUFFIX


def extract_title(filename: str) -> str:
    """Strip one trailing document suffix from a filename."""
    if filename.endswith(DOCUMENT_SUFFIX):
        return filename[: -len(DOCUMENT_SUFFIX)]
    return filename
