"""Commands emitted by ``update`` and the executor that runs them.

Each command runs on its own short-lived daemon thread and reports back by
sending a message into the channel; the main loop never waits for one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..errors import ChannelClosed, ChannelFull, FileOperationError
from ..fs_model import Entry, FileOperation, list_directory, run_file_operation
from .channel import MessageChannel
from .messages import DirectoryRead, FileOperationFinished, Message, ReadingDirFailed
from .model import SessionInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadDir:
    session_info: SessionInfo
    navigated_to: bool


@dataclass(frozen=True)
class RunFileOperation:
    operation: FileOperation


Command = ReadDir | RunFileOperation


class CommandExecutor:
    """Fire-and-forget runner turning commands into result messages."""

    def __init__(
        self,
        channel: MessageChannel,
        list_directory: Callable[[Path], list[Entry]] = list_directory,
        run_file_operation: Callable[[FileOperation], None] = run_file_operation,
    ) -> None:
        self._channel = channel
        self._list_directory = list_directory
        self._run_file_operation = run_file_operation

    def dispatch(self, command: Command) -> threading.Thread:
        """Start ``command`` in the background and return its thread."""
        if isinstance(command, ReadDir):
            target = self._read_dir
            name = "lazyexplorer-read-dir"
        elif isinstance(command, RunFileOperation):
            target = self._file_operation
            name = "lazyexplorer-file-op"
        else:
            raise TypeError(f"unsupported command: {command!r}")

        worker = threading.Thread(target=target, args=(command,), name=name, daemon=True)
        worker.start()
        return worker

    def _read_dir(self, command: ReadDir) -> None:
        path = command.session_info.path
        try:
            entries = self._list_directory(path)
        except OSError as exc:
            logger.debug("couldn't read directory %s: %s", path, exc)
            self._report(ReadingDirFailed(error=str(exc)))
            return
        self._report(
            DirectoryRead(
                session_info=command.session_info,
                entries=tuple(entries),
                navigated_to=command.navigated_to,
            )
        )

    def _file_operation(self, command: RunFileOperation) -> None:
        operation = command.operation
        error: str | None = None
        try:
            self._run_file_operation(operation)
        except (FileOperationError, OSError) as exc:
            error = str(exc)
        self._report(
            FileOperationFinished(
                verb=operation.verb,
                count=len(operation.items),
                error=error,
            )
        )

    def _report(self, message: Message) -> None:
        try:
            self._channel.send(message)
        except (ChannelFull, ChannelClosed) as exc:
            logger.warning("dropping %s: %s", type(message).__name__, exc)


__all__ = ["ReadDir", "RunFileOperation", "Command", "CommandExecutor"]
