"""Shared-state primitives used between the engine threads.

Guarded
    A value reachable only while holding its lock. If the holder fails with
    the lock held, the guard is poisoned and every later access raises
    LockPoisoned instead of handing out half-updated state.

Channel
    One-way, multi-message queue. Closing it (optionally with the exception
    that caused it) makes the peer fail loudly with ChannelClosed rather than
    wait forever.
"""

from __future__ import annotations

import queue
import threading
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

from core.errors import ChannelClosed, LockPoisoned

T = TypeVar("T")


class Guarded(Generic[T]):
    def __init__(self, value: T, name: str = "") -> None:
        self._value = value
        self._lock = threading.Lock()
        self._poisoned = False
        self.name = name or type(value).__name__

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def lock(self) -> Iterator[T]:
        with self._lock:
            if self._poisoned:
                raise LockPoisoned(self.name)
            try:
                yield self._value
            except BaseException:
                self._poisoned = True
                raise

    def __repr__(self) -> str:
        state = "poisoned" if self._poisoned else "ok"
        return f"Guarded({self.name!r}, {state})"


class _Closed:
    def __init__(self, cause: Optional[BaseException]) -> None:
        self.cause = cause


class Channel(Generic[T]):
    def __init__(self, name: str = "") -> None:
        self.name = name
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._closed: Optional[_Closed] = None
        self._close_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed is not None

    def send(self, item: T) -> None:
        with self._close_lock:
            if self._closed is not None:
                raise ChannelClosed(f"send on closed channel {self.name!r}")
            self._queue.put(item)

    def recv(self, timeout: Optional[float] = None) -> Optional[T]:
        """Next item, or None if `timeout` seconds pass without one."""
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if isinstance(item, _Closed):
            # Leave the marker for any other receiver
            self._queue.put(item)
            raise ChannelClosed(f"channel {self.name!r} closed") from item.cause
        return item  # type: ignore[return-value]

    def close(self, cause: Optional[BaseException] = None) -> None:
        with self._close_lock:
            if self._closed is not None:
                return
            self._closed = _Closed(cause)
            self._queue.put(self._closed)
