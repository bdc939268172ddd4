"""Message vocabulary consumed by ``update``.

User-originated messages come from the key map; the rest are produced by
background commands reporting their results.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..fs_model import Entry
from .model import SessionInfo


# user actions


@dataclass(frozen=True)
class CopyMarkedItems:
    pass


@dataclass(frozen=True)
class MoveMarkedItems:
    pass


@dataclass(frozen=True)
class GoBackOrQuit:
    pass


@dataclass(frozen=True)
class GoToNextSession:
    pass


@dataclass(frozen=True)
class GoToPreviousSession:
    pass


@dataclass(frozen=True)
class GoToSession:
    index: int


@dataclass(frozen=True)
class GoToPane:
    pane: str


@dataclass(frozen=True)
class MarkPath:
    pass


@dataclass(frozen=True)
class NavigateIntoDir:
    pass


@dataclass(frozen=True)
class NavigateOutOfDir:
    pass


@dataclass(frozen=True)
class QuitImmediately:
    pass


@dataclass(frozen=True)
class SelectFirst:
    pass


@dataclass(frozen=True)
class SelectLast:
    pass


@dataclass(frozen=True)
class SelectNext:
    pass


@dataclass(frozen=True)
class SelectPrevious:
    pass


@dataclass(frozen=True)
class TerminalResize:
    width: int
    height: int


# internal


@dataclass(frozen=True)
class DirectoryRead:
    session_info: SessionInfo
    entries: tuple[Entry, ...]
    navigated_to: bool


@dataclass(frozen=True)
class ReadingDirFailed:
    error: str


@dataclass(frozen=True)
class FileOperationFinished:
    """Result of a copy/move; ``error`` is ``None`` on success."""

    verb: str
    count: int
    error: str | None = None


Message = (
    CopyMarkedItems
    | MoveMarkedItems
    | GoBackOrQuit
    | GoToNextSession
    | GoToPreviousSession
    | GoToSession
    | GoToPane
    | MarkPath
    | NavigateIntoDir
    | NavigateOutOfDir
    | QuitImmediately
    | SelectFirst
    | SelectLast
    | SelectNext
    | SelectPrevious
    | TerminalResize
    | DirectoryRead
    | ReadingDirFailed
    | FileOperationFinished
)


__all__ = [
    "CopyMarkedItems",
    "MoveMarkedItems",
    "GoBackOrQuit",
    "GoToNextSession",
    "GoToPreviousSession",
    "GoToSession",
    "GoToPane",
    "MarkPath",
    "NavigateIntoDir",
    "NavigateOutOfDir",
    "QuitImmediately",
    "SelectFirst",
    "SelectLast",
    "SelectNext",
    "SelectPrevious",
    "TerminalResize",
    "DirectoryRead",
    "ReadingDirFailed",
    "FileOperationFinished",
    "Message",
]
