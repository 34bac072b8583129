"""An unbounded single-producer, single-consumer channel for threads."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class SendError(Exception):
    """The channel is closed; the unsent item is returned in ``item``."""

    def __init__(self, item: Any) -> None:
        super().__init__("sending on a closed channel")
        self.item = item


class RecvError(Exception):
    """The channel is closed and holds no more items."""


class TryRecvError(Exception):
    """A non-blocking receive found nothing."""


class ChannelEmpty(TryRecvError):
    """No item is available right now."""


class ChannelDisconnected(TryRecvError):
    """No item is available and the channel is closed."""


class _Shared(Generic[T]):
    def __init__(self) -> None:
        self.queue: deque[T] = deque()
        self.available = threading.Condition()
        self.closed = False


class Sender(Generic[T]):
    """The sending half of a channel."""

    def __init__(self, shared: _Shared[T]) -> None:
        self._shared = shared

    def send(self, item: T) -> None:
        """Queue an item; raise SendError if the channel is closed."""
        shared = self._shared
        with shared.available:
            if shared.closed:
                raise SendError(item)
            shared.queue.append(item)
            shared.available.notify()

    def close(self) -> None:
        """Close the channel and wake a waiting receiver."""
        shared = self._shared
        with shared.available:
            shared.closed = True
            shared.available.notify_all()

    def __enter__(self) -> Sender[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Receiver(Generic[T]):
    """The receiving half of a channel."""

    def __init__(self, shared: _Shared[T]) -> None:
        self._shared = shared

    def recv(self) -> T:
        """Wait for the next item; raise RecvError once closed and drained."""
        shared = self._shared
        with shared.available:
            while True:
                if shared.queue:
                    return shared.queue.popleft()
                if shared.closed:
                    raise RecvError("channel closed")
                shared.available.wait()

    def try_recv(self) -> T:
        """Return the next item without waiting."""
        shared = self._shared
        with shared.available:
            if shared.queue:
                return shared.queue.popleft()
            if shared.closed:
                raise ChannelDisconnected("channel closed")
            raise ChannelEmpty("channel empty")

    def close(self) -> None:
        """Close the channel so further sends fail."""
        shared = self._shared
        with shared.available:
            shared.closed = True

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except RecvError:
                return

    def __enter__(self) -> Receiver[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def channel() -> tuple[Sender[Any], Receiver[Any]]:
    """Create a connected sender and receiver."""
    shared: _Shared[Any] = _Shared()
    return Sender(shared), Receiver(shared)