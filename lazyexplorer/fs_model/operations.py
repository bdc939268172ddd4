"""Blocking copy/move of marked entries into a destination directory.

Existing destination entries with the same name are overwritten: files and
symlinks are replaced, directories are merged recursively.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..errors import FileOperationError
from .types import CopyOperation, Entry, FileOperation, MoveOperation

logger = logging.getLogger(__name__)


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


def _remove_existing(target: Path) -> None:
    if _is_real_dir(target):
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()


def _same_location(source: Path, target: Path) -> bool:
    """Whether both paths name the same directory entry.

    Only the parent directories are resolved; a symlink at either path is
    an entry of its own and never followed.
    """
    try:
        return source.parent.resolve() / source.name == target.parent.resolve() / target.name
    except OSError:
        return False


def _check_not_into_itself(source: Path, destination: Path) -> None:
    if not _is_real_dir(source):
        return
    resolved_source = source.resolve()
    resolved_destination = destination.resolve()
    if resolved_destination == resolved_source or resolved_source in resolved_destination.parents:
        raise OSError(errno.EINVAL, "destination is inside the source directory", str(source))


def _copy_one(source: Path, destination: Path) -> None:
    target = destination / source.name
    if _same_location(source, target):
        return
    _check_not_into_itself(source, destination)
    if _is_real_dir(source):
        if target.exists() and not _is_real_dir(target):
            _remove_existing(target)
        shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
        return
    _remove_existing(target)
    shutil.copy2(source, target, follow_symlinks=False)


def _move_one(source: Path, destination: Path) -> None:
    target = destination / source.name
    if _same_location(source, target):
        return
    _check_not_into_itself(source, destination)
    if _is_real_dir(source) and _is_real_dir(target):
        shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
        shutil.rmtree(source)
        return
    _remove_existing(target)
    shutil.move(os.fspath(source), os.fspath(target))


def _apply(action: str, step, entries: Iterable[Entry], destination: Path) -> None:
    paths = [entry.path for entry in entries]
    logger.debug("%s paths %s -> %s", action, paths, destination)
    for path in paths:
        try:
            step(path, destination)
        except OSError as exc:
            logger.error("%s of %s failed: %s", action, path, exc)
            raise FileOperationError(action, path, exc) from exc


def copy_entries(entries: Iterable[Entry], destination: Path) -> None:
    """Copy every entry into ``destination``."""
    _apply("copy", _copy_one, entries, destination)


def move_entries(entries: Iterable[Entry], destination: Path) -> None:
    """Move every entry into ``destination``."""
    _apply("move", _move_one, entries, destination)


def run_file_operation(operation: FileOperation) -> None:
    if isinstance(operation, CopyOperation):
        copy_entries(operation.items, operation.destination)
    elif isinstance(operation, MoveOperation):
        move_entries(operation.items, operation.destination)
    else:
        raise TypeError(f"unsupported file operation: {operation!r}")


__all__ = ["copy_entries", "move_entries", "run_file_operation"]
