"""State transitions: apply one message to the model, return follow-up work."""

from __future__ import annotations

import logging

from ..fs_model import CopyOperation, MoveOperation, sort_entries
from . import messages as msg
from .commands import Command, ReadDir, RunFileOperation
from .model import Model, UserMessage

logger = logging.getLogger(__name__)

PAST_TENSE = {"copy": "copied", "move": "moved"}
PROGRESSIVE = {"copy": "copying", "move": "moving"}


def _items_label(count: int) -> str:
    return f"{count} item" if count == 1 else f"{count} items"


def _file_operation_command(model: Model, verb: str) -> Command | None:
    destination = model.session_directory_address()
    if not model.marked or destination is None:
        return None
    items = tuple(sort_entries(model.marked))
    if verb == "copy":
        operation = CopyOperation(items=items, destination=destination.path)
    else:
        operation = MoveOperation(items=items, destination=destination.path)
    model.user_message = UserMessage.info(f"{PROGRESSIVE[verb]} {_items_label(len(items))}...")
    return RunFileOperation(operation=operation)


def update(model: Model, message: msg.Message) -> list[Command]:
    """Apply ``message`` to ``model`` in place and return commands to run.

    Every call ages the transient user message by one frame, so status text
    expires after a fixed number of renders regardless of wall-clock time.
    """
    logger.debug("update got message: %r", message)
    commands: list[Command] = []

    if isinstance(message, msg.MarkPath):
        model.toggle_mark()
    elif isinstance(message, msg.SelectNext):
        model.select_next()
    elif isinstance(message, msg.SelectPrevious):
        model.select_previous()
    elif isinstance(message, msg.SelectFirst):
        model.select_first()
    elif isinstance(message, msg.SelectLast):
        model.select_last()
    elif isinstance(message, msg.GoToNextSession):
        model.go_to_next_session()
    elif isinstance(message, msg.GoToPreviousSession):
        model.go_to_previous_session()
    elif isinstance(message, msg.GoToSession):
        model.go_to_session(message.index)
    elif isinstance(message, msg.GoToPane):
        model.go_to_pane(message.pane)
    elif isinstance(message, msg.GoBackOrQuit):
        model.go_back_or_quit()
    elif isinstance(message, msg.QuitImmediately):
        model.quit()
    elif isinstance(message, msg.NavigateIntoDir):
        address = model.directory_under_cursor()
        if address is not None:
            commands.append(ReadDir(session_info=address, navigated_to=True))
    elif isinstance(message, msg.NavigateOutOfDir):
        address = model.parent_directory_address()
        if address is not None:
            commands.append(ReadDir(session_info=address, navigated_to=True))
        else:
            model.user_message = UserMessage.error("no parent found")
    elif isinstance(message, msg.CopyMarkedItems):
        command = _file_operation_command(model, "copy")
        if command is not None:
            commands.append(command)
    elif isinstance(message, msg.MoveMarkedItems):
        command = _file_operation_command(model, "move")
        if command is not None:
            commands.append(command)
    elif isinstance(message, msg.TerminalResize):
        model.resize(message.width, message.height)
    elif isinstance(message, msg.DirectoryRead):
        model.update_entries_for_session(
            message.session_info,
            message.entries,
            message.navigated_to,
        )
    elif isinstance(message, msg.ReadingDirFailed):
        model.user_message = UserMessage.error(f"reading directory failed: {message.error}")
    elif isinstance(message, msg.FileOperationFinished):
        if message.error is not None:
            model.user_message = UserMessage.error(message.error)
        else:
            verb = PAST_TENSE.get(message.verb, message.verb)
            model.user_message = UserMessage.info(f"{verb} {_items_label(message.count)}")
        model.clear_marks()
        for address in model.unique_session_addresses():
            commands.append(ReadDir(session_info=address, navigated_to=False))
    else:
        raise TypeError(f"unsupported message: {message!r}")

    model.age_user_message()
    return commands


__all__ = ["update"]
