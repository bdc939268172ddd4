"""Exception hierarchy shared by the runtime and filesystem layers."""

from __future__ import annotations

from pathlib import Path


class LazyExplorerError(Exception):
    """Base class for errors raised by lazyexplorer."""


class ChannelFull(LazyExplorerError):
    """Raised when a non-blocking send hits a saturated message channel."""


class ChannelClosed(LazyExplorerError):
    """Raised when sending into a channel that was already closed."""


class FileOperationError(LazyExplorerError):
    """A copy or move failed part-way through."""

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"couldn't {action} {path.name or path}: {reason}")


__all__ = [
    "LazyExplorerError",
    "ChannelFull",
    "ChannelClosed",
    "FileOperationError",
]
