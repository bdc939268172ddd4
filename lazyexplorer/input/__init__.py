"""Input-layer public API: raw key decoding, the input source, key mapping."""

from .events import InputEvent, KeyEvent, ResizeEvent, TerminalInput
from .keymap import message_for_event, message_for_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "read_key",
    "InputEvent",
    "KeyEvent",
    "ResizeEvent",
    "TerminalInput",
    "message_for_event",
    "message_for_key",
]
