"""Domain datatypes for directory listings and file operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

KIND_DIRECTORY = "directory"
KIND_FILE = "file"
KIND_SYMLINK = "symlink"
KIND_UNKNOWN = "unknown"

ENTRY_KINDS = (KIND_DIRECTORY, KIND_SYMLINK, KIND_FILE, KIND_UNKNOWN)
_KIND_RANK = {kind: rank for rank, kind in enumerate(ENTRY_KINDS)}


@dataclass(frozen=True)
class Entry:
    """One immediate child of a listed directory.

    Equality and hashing only consider ``path``: the same child observed with a
    different kind (for example after being replaced on disk) is still the
    same entry for marking purposes.
    """

    path: Path
    kind: str = field(default=KIND_UNKNOWN, compare=False)

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIRECTORY

    @property
    def name(self) -> str:
        return self.path.name or "unknown"

    @property
    def display_name(self) -> str:
        """Final path component, suffixed with ``/`` for directories."""
        if self.is_dir:
            return f"{self.name}/"
        return self.name


def entry_sort_key(entry: Entry) -> tuple[int, str]:
    """Rank by kind (directories first), then lexicographic path order."""
    return (_KIND_RANK.get(entry.kind, len(ENTRY_KINDS)), str(entry.path))


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=entry_sort_key)


@dataclass(frozen=True)
class CopyOperation:
    """Copy ``items`` into the ``destination`` directory."""

    items: tuple[Entry, ...]
    destination: Path

    verb = "copy"


@dataclass(frozen=True)
class MoveOperation:
    """Move ``items`` into the ``destination`` directory."""

    items: tuple[Entry, ...]
    destination: Path

    verb = "move"


FileOperation = CopyOperation | MoveOperation


__all__ = [
    "KIND_DIRECTORY",
    "KIND_FILE",
    "KIND_SYMLINK",
    "KIND_UNKNOWN",
    "ENTRY_KINDS",
    "Entry",
    "entry_sort_key",
    "sort_entries",
    "CopyOperation",
    "MoveOperation",
    "FileOperation",
]
