"""Terminal input source: readiness polling plus one-event reads."""

from __future__ import annotations

import select
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .reader import has_pending_input, read_key


@dataclass(frozen=True)
class KeyEvent:
    """A key press; modifiers are folded into the token (``CTRL_C``)."""

    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


InputEvent = KeyEvent | ResizeEvent


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


class TerminalInput:
    """Poll stdin and the terminal geometry for the next input event.

    ``poll`` blocks for up to ``timeout`` seconds and is meant to run off the
    main loop; ``read`` is only called after ``poll`` reported readiness.
    """

    def __init__(
        self,
        stdin_fd: int,
        size_provider: Callable[[], tuple[int, int]] = _terminal_size,
    ) -> None:
        self.stdin_fd = stdin_fd
        self._size_provider = size_provider
        self._last_size = size_provider()
        self._pending_resize: ResizeEvent | None = None

    @property
    def size(self) -> tuple[int, int]:
        return self._last_size

    def poll(self, timeout: float) -> bool:
        if self._pending_resize is not None or has_pending_input():
            return True
        size = self._size_provider()
        if size != self._last_size:
            self._last_size = size
            self._pending_resize = ResizeEvent(width=size[0], height=size[1])
            return True
        ready, _, _ = select.select([self.stdin_fd], [], [], max(0.0, timeout))
        return bool(ready)

    def read(self) -> InputEvent | None:
        if self._pending_resize is not None:
            event = self._pending_resize
            self._pending_resize = None
            return event
        key = read_key(self.stdin_fd, timeout_ms=0)
        if not key:
            return None
        return KeyEvent(key=key)


__all__ = ["KeyEvent", "ResizeEvent", "InputEvent", "TerminalInput"]
