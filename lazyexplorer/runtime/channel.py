"""Bounded many-producer/single-consumer message channel."""

from __future__ import annotations

import threading
from queue import Empty, Full, Queue

from ..errors import ChannelClosed, ChannelFull
from .messages import Message

MESSAGE_QUEUE_CAPACITY = 10
RECEIVE_WAKEUP_SECONDS = 0.05


class MessageChannel:
    """Small bounded queue; ``send`` never blocks and fails when full."""

    def __init__(self, capacity: int = MESSAGE_QUEUE_CAPACITY) -> None:
        self._queue: Queue[Message] = Queue(maxsize=capacity)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, message: Message) -> None:
        """Enqueue without blocking; raise ``ChannelFull`` when saturated."""
        if self._closed.is_set():
            raise ChannelClosed("message channel is closed")
        try:
            self._queue.put_nowait(message)
        except Full as exc:
            raise ChannelFull(f"message channel is full (capacity {self._queue.maxsize})") from exc

    def receive(self) -> Message | None:
        """Block until a message arrives; return ``None`` once closed."""
        while not self._closed.is_set():
            try:
                return self._queue.get(timeout=RECEIVE_WAKEUP_SECONDS)
            except Empty:
                continue
        return None

    def close(self) -> None:
        self._closed.set()


__all__ = ["MESSAGE_QUEUE_CAPACITY", "MessageChannel"]
