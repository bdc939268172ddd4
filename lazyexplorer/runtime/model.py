"""Application state and the synchronous mutators applied by ``update``.

Only the main loop thread touches a ``Model``; background work reports back
through messages, so no locking happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..fs_model import Entry, sort_entries

logger = logging.getLogger(__name__)

MAX_NUM_SESSIONS = 4
MIN_TERMINAL_WIDTH = 50
MIN_TERMINAL_HEIGHT = 24
USER_MESSAGE_DEFAULT_FRAMES = 4

PANE_EXPLORER = "explorer"
PANE_HELP = "help"

RUNNING = "running"
DONE = "done"

MESSAGE_INFO = "info"
MESSAGE_ERROR = "error"

INTERNAL_ERROR_TEXT = "something went wrong; please report this as a lazyexplorer issue"


@dataclass
class UserMessage:
    """Transient status-line message that expires after a few frames."""

    text: str
    kind: str = MESSAGE_INFO
    frames_left: int = USER_MESSAGE_DEFAULT_FRAMES

    @classmethod
    def info(cls, text: str) -> UserMessage:
        return cls(text=text, kind=MESSAGE_INFO)

    @classmethod
    def error(cls, text: str) -> UserMessage:
        return cls(text=text, kind=MESSAGE_ERROR)

    @classmethod
    def internal_error(cls) -> UserMessage:
        return cls(text=INTERNAL_ERROR_TEXT, kind=MESSAGE_ERROR)


@dataclass
class EntryItem:
    entry: Entry
    marked: bool = False


@dataclass(frozen=True)
class UninitializedSession:
    """Placeholder for a session slot that was never opened or was closed."""


UNINITIALIZED = UninitializedSession()


@dataclass
class Session:
    """One open directory view: listed path, items, and cursor."""

    path: Path
    items: list[EntryItem] = field(default_factory=list)
    selected: int | None = None

    @classmethod
    def from_entries(cls, path: Path, entries: Iterable[Entry]) -> Session:
        items = [EntryItem(entry=entry) for entry in entries]
        return cls(path=path, items=items, selected=0 if items else None)

    def clone(self) -> Session:
        return Session(
            path=self.path,
            items=[EntryItem(entry=item.entry, marked=item.marked) for item in self.items],
            selected=self.selected,
        )

    def selected_item(self) -> EntryItem | None:
        if self.selected is None or not 0 <= self.selected < len(self.items):
            return None
        return self.items[self.selected]

    def select_path(self, path: Path) -> bool:
        """Move the cursor to the item at ``path``; return whether it exists."""
        for index, item in enumerate(self.items):
            if item.entry.path == path:
                self.selected = index
                return True
        return False

    def sync_marks(self, marked: set[Entry]) -> None:
        for item in self.items:
            item.marked = item.entry in marked


SessionSlot = Session | UninitializedSession


@dataclass(frozen=True)
class SessionInfo:
    """Addresses a directory listing to one session slot."""

    index: int
    path: Path


@dataclass
class TerminalDimensions:
    width: int
    height: int

    @property
    def too_small(self) -> bool:
        return self.width < MIN_TERMINAL_WIDTH or self.height < MIN_TERMINAL_HEIGHT


@dataclass
class Model:
    sessions: list[SessionSlot]
    dimensions: TerminalDimensions
    current_index: int = 0
    marked: set[Entry] = field(default_factory=set)
    last_selections: dict[Path, Path] = field(default_factory=dict)
    active_pane: str = PANE_EXPLORER
    last_active_pane: str | None = None
    running_state: str = RUNNING
    user_message: UserMessage | None = None
    terminal_too_small: bool = False
    render_counter: int = 0
    event_counter: int = 0
    debug: bool = False

    @classmethod
    def create(cls, root: Path, dimensions: TerminalDimensions, debug: bool = False) -> Model:
        """Slot 0 opens at ``root`` (not yet listed); the others start empty."""
        sessions: list[SessionSlot] = [Session(path=root)]
        sessions.extend(UNINITIALIZED for _ in range(MAX_NUM_SESSIONS - 1))
        return cls(
            sessions=sessions,
            dimensions=dimensions,
            terminal_too_small=dimensions.too_small,
            debug=debug,
        )

    @property
    def current_session(self) -> SessionSlot:
        return self.sessions[self.current_index]

    def num_initialized_sessions(self) -> int:
        return sum(1 for slot in self.sessions if isinstance(slot, Session))

    # cursor

    def _explorer_session(self) -> Session | None:
        if self.active_pane != PANE_EXPLORER:
            return None
        session = self.current_session
        if not isinstance(session, Session) or not session.items:
            return None
        return session

    def select_next(self) -> None:
        session = self._explorer_session()
        if session is None:
            return
        if session.selected is None:
            session.selected = 0
        elif session.selected < len(session.items) - 1:
            session.selected += 1

    def select_previous(self) -> None:
        session = self._explorer_session()
        if session is None:
            return
        if session.selected is None:
            session.selected = len(session.items) - 1
        elif session.selected > 0:
            session.selected -= 1

    def select_first(self) -> None:
        session = self._explorer_session()
        if session is not None:
            session.selected = 0

    def select_last(self) -> None:
        session = self._explorer_session()
        if session is not None:
            session.selected = len(session.items) - 1

    # marks

    def toggle_mark(self) -> None:
        """Flip the selected entry's mark and advance the cursor by one."""
        session = self.current_session
        if not isinstance(session, Session) or session.selected is None:
            return
        index = session.selected
        if index >= len(session.items):
            # the item list was replaced under a stale cursor
            self.user_message = UserMessage.internal_error()
            return

        item = session.items[index]
        if item.entry in self.marked:
            self.marked.discard(item.entry)
        else:
            self.marked.add(item.entry)
        self._sync_marks_everywhere()

        if index < len(session.items) - 1:
            session.selected = index + 1

    def clear_marks(self) -> None:
        self.marked.clear()
        self._sync_marks_everywhere()

    def _sync_marks_everywhere(self) -> None:
        for slot in self.sessions:
            if isinstance(slot, Session):
                slot.sync_marks(self.marked)

    def _sync_marks_to_current_session(self) -> None:
        session = self.current_session
        if isinstance(session, Session):
            session.sync_marks(self.marked)

    # sessions

    def go_to_next_session(self) -> None:
        if self.num_initialized_sessions() == 1:
            # open a second session on the current location
            target = self._next_slot(self.current_index)
            self.sessions[target] = self._current_clone()
            self.current_index = target
            self._sync_marks_to_current_session()
            return

        index = self._next_slot(self.current_index)
        while not isinstance(self.sessions[index], Session):
            index = self._next_slot(index)
        self.current_index = index
        self._sync_marks_to_current_session()

    def go_to_previous_session(self) -> None:
        if self.num_initialized_sessions() <= 1:
            return
        index = self._previous_slot(self.current_index)
        while not isinstance(self.sessions[index], Session):
            index = self._previous_slot(index)
        self.current_index = index
        self._sync_marks_to_current_session()

    def go_to_session(self, index: int) -> None:
        if not 0 <= index < len(self.sessions) or index == self.current_index:
            return
        if not isinstance(self.sessions[index], Session):
            self.sessions[index] = self._current_clone()
        self.current_index = index
        self._sync_marks_to_current_session()

    def _current_clone(self) -> SessionSlot:
        session = self.current_session
        if isinstance(session, Session):
            return session.clone()
        return UNINITIALIZED

    def _next_slot(self, index: int) -> int:
        return (index + 1) % len(self.sessions)

    def _previous_slot(self, index: int) -> int:
        return (index - 1) % len(self.sessions)

    def close_current_session(self) -> bool:
        """Close the current slot; return True when no session remains."""
        self.sessions[self.current_index] = UNINITIALIZED
        if self.num_initialized_sessions() == 0:
            return True
        index = self._previous_slot(self.current_index)
        while not isinstance(self.sessions[index], Session):
            index = self._previous_slot(index)
        self.current_index = index
        self._sync_marks_to_current_session()
        return False

    # panes

    def go_to_pane(self, pane: str) -> None:
        self.last_active_pane = self.active_pane
        self.active_pane = pane

    def go_back_or_quit(self) -> None:
        previously_active = self.active_pane
        if self.active_pane == PANE_EXPLORER:
            if self.marked:
                self.clear_marks()
            elif self.close_current_session():
                self.running_state = DONE
        elif self.active_pane == PANE_HELP:
            self.active_pane = self.last_active_pane or PANE_EXPLORER
        self.last_active_pane = previously_active

    def quit(self) -> None:
        self.running_state = DONE

    # listings

    def update_entries_for_session(
        self,
        session_info: SessionInfo,
        entries: Iterable[Entry],
        navigated_to: bool,
    ) -> None:
        """Apply a finished listing of ``session_info.path``.

        A navigation replaces the addressed session and restores the cursor
        remembered for the new path. Every session already showing that path
        is refreshed as well, with the cursor reset to the top.
        """
        ordered = sort_entries(entries)
        for index, slot in enumerate(self.sessions):
            if navigated_to and index == session_info.index:
                self._remember_selection(slot)
                session = Session.from_entries(session_info.path, ordered)
                remembered = self.last_selections.get(session_info.path)
                if remembered is not None:
                    logger.debug("restoring selection %s -> %s", session_info.path, remembered)
                    session.select_path(remembered)
                session.sync_marks(self.marked)
                self.sessions[index] = session
                continue

            if isinstance(slot, Session) and slot.path == session_info.path:
                session = Session.from_entries(session_info.path, ordered)
                session.sync_marks(self.marked)
                self.sessions[index] = session

    def _remember_selection(self, slot: SessionSlot) -> None:
        if not isinstance(slot, Session):
            return
        item = slot.selected_item()
        if item is None:
            return
        logger.debug("remembering selection %s -> %s", slot.path, item.entry.path)
        self.last_selections[slot.path] = item.entry.path

    # addressing

    def directory_under_cursor(self) -> SessionInfo | None:
        """Address of the selected item when it is a directory."""
        session = self.current_session
        if not isinstance(session, Session):
            return None
        item = session.selected_item()
        if item is None or not item.entry.is_dir:
            return None
        return SessionInfo(index=self.current_index, path=item.entry.path)

    def parent_directory_address(self) -> SessionInfo | None:
        """Address of the directory one level above the listed one.

        Derived from the selected child (parent of its parent); an empty
        session falls back to its own path so it can still be left.
        """
        session = self.current_session
        if not isinstance(session, Session):
            return None
        item = session.selected_item()
        listed = item.entry.path.parent if item is not None else session.path
        parent = listed.parent
        if parent == listed:
            return None
        return SessionInfo(index=self.current_index, path=parent)

    def session_directory_address(self) -> SessionInfo | None:
        session = self.current_session
        if not isinstance(session, Session):
            return None
        return SessionInfo(index=self.current_index, path=session.path)

    def unique_session_addresses(self) -> list[SessionInfo]:
        seen: set[Path] = set()
        out: list[SessionInfo] = []
        for index, slot in enumerate(self.sessions):
            if not isinstance(slot, Session) or slot.path in seen:
                continue
            seen.add(slot.path)
            out.append(SessionInfo(index=index, path=slot.path))
        return out

    # terminal

    def resize(self, width: int, height: int) -> None:
        self.dimensions = TerminalDimensions(width=width, height=height)
        self.terminal_too_small = self.dimensions.too_small

    def age_user_message(self) -> None:
        message = self.user_message
        if message is None:
            return
        if message.frames_left <= 0:
            self.user_message = None
        else:
            message.frames_left -= 1


__all__ = [
    "MAX_NUM_SESSIONS",
    "MIN_TERMINAL_WIDTH",
    "MIN_TERMINAL_HEIGHT",
    "USER_MESSAGE_DEFAULT_FRAMES",
    "PANE_EXPLORER",
    "PANE_HELP",
    "RUNNING",
    "DONE",
    "MESSAGE_INFO",
    "MESSAGE_ERROR",
    "UserMessage",
    "EntryItem",
    "UninitializedSession",
    "UNINITIALIZED",
    "Session",
    "SessionSlot",
    "SessionInfo",
    "TerminalDimensions",
    "Model",
]
