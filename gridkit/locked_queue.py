"""A thread-safe first-in first-out queue with conditional removal."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class LockedQueue(Generic[T]):
    """A FIFO queue whose every operation holds a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._queue: deque[T] = deque()

    def add(self, item: T) -> None:
        """Append an item to the back of the queue."""
        with self._lock:
            self._queue.append(item)

    def next(self, check: Callable[[T], bool] | None = None) -> T | None:
        """Pop and return the front item.

        Returns None when the queue is empty, or when ``check`` is given and
        rejects the front item; a rejected item stays in the queue.
        """
        with self._lock:
            if not self._queue:
                return None
            item = self._queue[0]
            if check is not None and not check(item):
                return None
            return self._queue.popleft()

    def empty(self) -> bool:
        """Tell whether the queue holds no items."""
        with self._lock:
            return not self._queue

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)