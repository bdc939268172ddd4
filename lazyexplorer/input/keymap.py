"""Pane-dependent translation of raw input events into messages."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime import messages as msg
from ..runtime.model import PANE_EXPLORER, PANE_HELP, Model
from .events import InputEvent, KeyEvent, ResizeEvent

MessageFactory = Callable[[Model], "msg.Message | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a message factory."""

    combos: tuple[str, ...]
    factory: MessageFactory


class KeyComboRegistry:
    """Small key-to-message dispatch table."""

    def __init__(self) -> None:
        self._factories: dict[str, MessageFactory] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings, overwriting existing factories for same combos."""
        for binding in bindings:
            for combo in binding.combos:
                self._factories[combo] = binding.factory
        return self

    def dispatch(self, key: str, model: Model) -> msg.Message | None:
        factory = self._factories.get(key)
        if factory is None:
            return None
        return factory(model)


def _always(message: msg.Message) -> MessageFactory:
    return lambda _model: message


def _when_marked(message: msg.Message) -> MessageFactory:
    return lambda model: message if model.marked else None


QUIT_KEYS = ("q", "ESC")
INTERRUPT_KEYS = ("CTRL_C",)

TOO_SMALL_BINDINGS = KeyComboRegistry().register_bindings(
    KeyComboBinding(QUIT_KEYS, _always(msg.GoBackOrQuit())),
    KeyComboBinding(INTERRUPT_KEYS, _always(msg.QuitImmediately())),
)

EXPLORER_BINDINGS = KeyComboRegistry().register_bindings(
    KeyComboBinding((" ",), _always(msg.MarkPath())),
    KeyComboBinding(("j", "DOWN"), _always(msg.SelectNext())),
    KeyComboBinding(("k", "UP"), _always(msg.SelectPrevious())),
    KeyComboBinding(("g", "HOME"), _always(msg.SelectFirst())),
    KeyComboBinding(("G", "END"), _always(msg.SelectLast())),
    KeyComboBinding(("TAB",), _always(msg.GoToNextSession())),
    KeyComboBinding(("SHIFT_TAB",), _always(msg.GoToPreviousSession())),
    KeyComboBinding(("1",), _always(msg.GoToSession(0))),
    KeyComboBinding(("2",), _always(msg.GoToSession(1))),
    KeyComboBinding(("3",), _always(msg.GoToSession(2))),
    KeyComboBinding(("4",), _always(msg.GoToSession(3))),
    KeyComboBinding(("l", "RIGHT"), _always(msg.NavigateIntoDir())),
    KeyComboBinding(("h", "LEFT"), _always(msg.NavigateOutOfDir())),
    KeyComboBinding(("p",), _when_marked(msg.CopyMarkedItems())),
    KeyComboBinding(("v",), _when_marked(msg.MoveMarkedItems())),
    KeyComboBinding(QUIT_KEYS, _always(msg.GoBackOrQuit())),
    KeyComboBinding(INTERRUPT_KEYS, _always(msg.QuitImmediately())),
    KeyComboBinding(("?",), _always(msg.GoToPane(PANE_HELP))),
)

HELP_BINDINGS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("?",) + QUIT_KEYS, _always(msg.GoBackOrQuit())),
    KeyComboBinding(INTERRUPT_KEYS, _always(msg.QuitImmediately())),
)

_PANE_BINDINGS: dict[str, KeyComboRegistry] = {
    PANE_EXPLORER: EXPLORER_BINDINGS,
    PANE_HELP: HELP_BINDINGS,
}


def message_for_key(model: Model, key: str) -> msg.Message | None:
    if model.terminal_too_small:
        return TOO_SMALL_BINDINGS.dispatch(key, model)
    registry = _PANE_BINDINGS.get(model.active_pane)
    if registry is None:
        return None
    return registry.dispatch(key, model)


def message_for_event(model: Model, event: InputEvent | None) -> msg.Message | None:
    """Translate one raw event into at most one message."""
    if isinstance(event, ResizeEvent):
        return msg.TerminalResize(width=event.width, height=event.height)
    if isinstance(event, KeyEvent):
        return message_for_key(model, event.key)
    return None


__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "EXPLORER_BINDINGS",
    "HELP_BINDINGS",
    "TOO_SMALL_BINDINGS",
    "message_for_key",
    "message_for_event",
]
