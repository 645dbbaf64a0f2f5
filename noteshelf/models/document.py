"""
Document data models for NoteShelf.
"""

from dataclasses import dataclass
from typing import List, Optional
from pydantic import BaseModel, Field


@dataclass(frozen=True, slots=True)
class RawContent:
    """Bytes returned by the content server for one resource path."""

    path: str
    data: bytes
    status: int


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of a content fetch; failed fetches carry the placeholder text."""

    path: str
    text: str
    ok: bool
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CodeBlockResult:
    """Outcome of highlighting a single fenced code block.

    ``highlighted`` is True only when the declared language was used. A block
    that fell back to automatic detection keeps the failure in ``error`` when
    the language-scoped attempt raised.
    """

    html: str
    language: Optional[str] = None
    highlighted: bool = False
    error: Optional[str] = None


class DocumentEntry(BaseModel):
    """Model for one navigation entry."""

    filename: str
    title: str


class DirectoryListing(BaseModel):
    """Model for the ordered contents of a directory."""

    directory: str
    files: List[DocumentEntry] = Field(default_factory=list)


class RenderedDocument(BaseModel):
    """Model for a rendered document."""

    directory: str
    filename: str
    title: str
    html: str
    loaded: bool = True
