"""Directory enumeration for session listings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import KIND_DIRECTORY, KIND_FILE, KIND_SYMLINK, KIND_UNKNOWN, Entry, sort_entries

logger = logging.getLogger(__name__)


def kind_for_mode(mode: int) -> str:
    """Map an ``lstat`` mode to an entry kind."""
    if stat.S_ISDIR(mode):
        return KIND_DIRECTORY
    if stat.S_ISREG(mode):
        return KIND_FILE
    if stat.S_ISLNK(mode):
        return KIND_SYMLINK
    return KIND_UNKNOWN


def list_directory(directory: Path) -> list[Entry]:
    """List immediate children of ``directory`` in display order.

    Kinds are probed without following symlinks, so a link to a directory is
    reported as a symlink. Children whose probe fails (removed mid-scan,
    permission denied) are omitted. Raises ``OSError`` when ``directory``
    itself cannot be scanned.
    """
    logger.debug("reading directory: %s", directory)
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                child_stat = child.stat(follow_symlinks=False)
            except OSError as exc:
                logger.debug("skipping %s: %s", child.path, exc)
                continue
            entries.append(Entry(path=Path(child.path), kind=kind_for_mode(child_stat.st_mode)))

    logger.debug("found %d entries in directory %s", len(entries), directory)
    return sort_entries(entries)


__all__ = ["kind_for_mode", "list_directory"]
