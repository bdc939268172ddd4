"""Filesystem-facing domain layer: entries, listings, and copy/move."""

from .listing import kind_for_mode, list_directory
from .operations import copy_entries, move_entries, run_file_operation
from .types import (
    ENTRY_KINDS,
    KIND_DIRECTORY,
    KIND_FILE,
    KIND_SYMLINK,
    KIND_UNKNOWN,
    CopyOperation,
    Entry,
    FileOperation,
    MoveOperation,
    entry_sort_key,
    sort_entries,
)

__all__ = [
    "ENTRY_KINDS",
    "KIND_DIRECTORY",
    "KIND_FILE",
    "KIND_SYMLINK",
    "KIND_UNKNOWN",
    "Entry",
    "CopyOperation",
    "MoveOperation",
    "FileOperation",
    "entry_sort_key",
    "sort_entries",
    "kind_for_mode",
    "list_directory",
    "copy_entries",
    "move_entries",
    "run_file_operation",
]
