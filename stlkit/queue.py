"""A first-in first-out queue over a pluggable linear container."""

from __future__ import annotations

import contextlib
import threading
from typing import Any

from .bidlist import LinkedList
from .deque import Deque


class Queue:
    """A FIFO queue backed by a :class:`Deque` unless another container is given.

    The container must offer ``push_back``, ``pop_front``, ``front``,
    ``back``, ``size``, ``empty``, ``clear`` and a string form.
    """

    def __init__(self, container: Any = None, thread_safe: bool = False) -> None:
        self._container = Deque() if container is None else container
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    @classmethod
    def with_list(cls, thread_safe: bool = False) -> "Queue":
        """Create a queue backed by a linked list."""
        return cls(LinkedList(), thread_safe)

    def __len__(self) -> int:
        return self.size()

    def size(self) -> int:
        with self._lock:
            return self._container.size()

    def empty(self) -> bool:
        with self._lock:
            return self._container.empty()

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        with self._lock:
            self._container.push_back(value)

    def front(self) -> Any:
        """The oldest value, or None if empty."""
        with self._lock:
            return self._container.front()

    def back(self) -> Any:
        """The newest value, or None if empty."""
        with self._lock:
            return self._container.back()

    def pop(self) -> Any:
        """Remove and return the oldest value, or None if empty."""
        with self._lock:
            return self._container.pop_front()

    def clear(self) -> None:
        with self._lock:
            self._container.clear()

    def __str__(self) -> str:
        with self._lock:
            return str(self._container)