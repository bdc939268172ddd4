"""Main interactive event loop for the terminal UI.

Races two wait points, a receive on the message channel and a blocking
input poll, so completed background work is applied while the terminal is
idle and key presses are handled while background work is in flight.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Protocol

from ..input.events import InputEvent
from ..input.keymap import message_for_event
from .channel import MessageChannel
from .commands import Command, CommandExecutor, ReadDir
from .messages import Message
from .model import DONE, RUNNING, Model, Session, SessionInfo
from .update import update

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.016


class InputSource(Protocol):
    def poll(self, timeout: float) -> bool: ...

    def read(self) -> InputEvent | None: ...


class Terminal(Protocol):
    def raw_mode(self): ...


class EventLoop:
    """Owns the model, the channel, and the input source for one run."""

    def __init__(
        self,
        model: Model,
        terminal: Terminal,
        input_source: InputSource,
        render: Callable[[Model], None],
        channel: MessageChannel | None = None,
        executor: CommandExecutor | None = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self.model = model
        self.channel = channel if channel is not None else MessageChannel()
        self.executor = executor if executor is not None else CommandExecutor(self.channel)
        self._terminal = terminal
        self._input = input_source
        self._render_model = render
        self._poll_interval = poll_interval

    def run(self) -> None:
        """Run until the model reaches ``DONE``; fatal errors propagate."""
        with self._terminal.raw_mode():
            self._render()
            for command in self._startup_commands():
                self.executor.dispatch(command)
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="lazyexplorer-wait") as waiter:
                try:
                    self._cycle(waiter)
                finally:
                    # unblocks a pending receive so the waiter can shut down
                    self.channel.close()
        logger.debug("event loop finished after %d renders", self.model.render_counter)

    def _startup_commands(self) -> list[Command]:
        session = self.model.current_session
        if not isinstance(session, Session):
            return []
        info = SessionInfo(index=self.model.current_index, path=session.path)
        return [ReadDir(session_info=info, navigated_to=False)]

    def _cycle(self, waiter: ThreadPoolExecutor) -> None:
        receive: Future[Message | None] | None = None
        poll: Future[bool] | None = None
        while self.model.running_state == RUNNING:
            if receive is None:
                receive = waiter.submit(self.channel.receive)
            if poll is None:
                poll = waiter.submit(self._input.poll, self._poll_interval)

            done, _ = wait((receive, poll), return_when=FIRST_COMPLETED)

            if receive in done:
                message = receive.result()
                receive = None
                if message is not None:
                    self._apply(message)
                if self.model.running_state == DONE:
                    break

            if poll in done:
                ready = poll.result()
                poll = None
                if ready:
                    self._handle_input()

    def _apply(self, message: Message) -> None:
        commands = update(self.model, message)
        if self.model.running_state == DONE:
            return
        self._render()
        for command in commands:
            self.executor.dispatch(command)

    def _handle_input(self) -> None:
        event = self._input.read()
        self.model.event_counter += 1
        message = message_for_event(self.model, event)
        if message is not None:
            # ChannelFull here is fatal: input outran the loop
            self.channel.send(message)

    def _render(self) -> None:
        self._render_model(self.model)
        self.model.render_counter += 1


__all__ = ["POLL_INTERVAL_SECONDS", "EventLoop", "InputSource"]
