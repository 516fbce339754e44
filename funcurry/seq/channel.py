"""A closable rendezvous channel and conversions to and from iterables."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Any

_EMPTY = object()


class Channel:
    """An unbuffered channel between threads.

    ``send`` blocks until a receiver has taken the value. Once the channel
    is closed, receivers get the values still being handed over and then
    learn that it is closed; sending to a closed channel raises
    ``ValueError``.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._slot: Any = _EMPTY
        self._closed = False
        self._sent = 0
        self._taken = 0

    def send(self, value: Any) -> None:
        """Hand ``value`` to a receiver, waiting until one takes it."""
        with self._cond:
            self._cond.wait_for(lambda: self._closed or self._slot is _EMPTY)
            if self._closed:
                raise ValueError("send on closed channel")
            self._slot = value
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            self._cond.wait_for(lambda: self._taken >= ticket or self._closed)
            if self._taken < ticket:
                self._slot = _EMPTY
                self._cond.notify_all()
                raise ValueError("send on closed channel")

    def close(self) -> None:
        """Close the channel; closing it twice raises ``ValueError``."""
        with self._cond:
            if self._closed:
                raise ValueError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def receive(self) -> tuple[Any, bool]:
        """Wait for a value.

        Returns ``(value, True)``, or ``(None, False)`` once the channel is
        closed and nothing is left to take.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._closed or self._slot is not _EMPTY)
            if self._slot is _EMPTY:
                return None, False
            value = self._slot
            self._slot = _EMPTY
            self._taken += 1
            self._cond.notify_all()
            return value, True

    def __iter__(self) -> Iterator[Any]:
        while True:
            value, ok = self.receive()
            if not ok:
                return
            yield value


def chan_as_seq(channel: Channel) -> Iterator[Any]:
    """Yield the values received from ``channel`` until it is closed."""
    yield from channel


def seq_as_chan(iterable: Iterable[Any]) -> Channel:
    """Feed the values of ``iterable`` into a new channel from a thread.

    The channel is closed when the iterable is exhausted.
    """
    channel = Channel()

    def feed() -> None:
        try:
            for value in iterable:
                channel.send(value)
        finally:
            channel.close()

    threading.Thread(target=feed, daemon=True).start()
    return channel