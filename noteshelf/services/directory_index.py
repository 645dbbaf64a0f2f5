"""
Directory index for NoteShelf.
Holds the authored directory -> filenames mapping that navigation is built from.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from loguru import logger

from .. import config


class DirectoryIndex:
    """Read-only lookup of the documents that exist in each directory."""

    def __init__(self, mapping: Mapping[str, Sequence[str]]):
        self._mapping: Dict[str, tuple] = {
            key: tuple(files) for key, files in mapping.items()
        }

    def list_files(self, directory_key: str) -> List[str]:
        """
        Return the filenames of a directory in authored order.

        Args:
            directory_key: Directory identifier, validated by nobody

        Returns:
            A fresh list of filenames, empty when the directory is unknown
        """
        return list(self._mapping.get(directory_key, ()))

    def directories(self) -> List[str]:
        return list(self._mapping)

    def contains(self, directory_key: str, filename: str) -> bool:
        return filename in self._mapping.get(directory_key, ())


def _clean_mapping(raw: object, source: str) -> Dict[str, List[str]]:
    """Keep only string keys mapping to lists of string filenames."""
    if not isinstance(raw, dict):
        raise ValueError(f"Directory index in {source} must be a JSON object")

    cleaned: Dict[str, List[str]] = {}
    for key, files in raw.items():
        if not isinstance(files, list):
            logger.warning(f"Ignoring directory {key!r} in {source}: expected a list")
            continue
        entries = [name for name in files if isinstance(name, str)]
        if len(entries) != len(files):
            logger.warning(
                f"Dropped {len(files) - len(entries)} non-string entries from {key!r} in {source}"
            )
        cleaned[str(key)] = entries
    return cleaned


def load_directory_index(path: Optional[str | Path] = None) -> DirectoryIndex:
    """
    Build a DirectoryIndex from a JSON file or the built-in mapping.

    Falls back to config.DEFAULT_DIRECTORY_INDEX when no file is configured or
    the file cannot be read.
    """
    source = path or config.DIRECTORY_INDEX_FILE
    if not source:
        return DirectoryIndex(config.DEFAULT_DIRECTORY_INDEX)

    try:
        with open(source, "r", encoding="utf-8") as f:
            raw = json.load(f)
        mapping = _clean_mapping(raw, str(source))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load directory index from {source}: {e}")
        return DirectoryIndex(config.DEFAULT_DIRECTORY_INDEX)

    logger.info(f"Loaded directory index from {source} ({len(mapping)} directories)")
    return DirectoryIndex(mapping)


_directory_index: Optional[DirectoryIndex] = None


def get_directory_index() -> DirectoryIndex:
    """Return the process-wide directory index, loading it on first use."""
    global _directory_index
    if _directory_index is None:
        _directory_index = load_directory_index()
    return _directory_index
