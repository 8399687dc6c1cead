"""A binary-heap priority queue ordered by a three-way comparator."""

from __future__ import annotations

import contextlib
import heapq
import threading
from collections.abc import Callable
from typing import Any

from .algorithm import builtin_compare

Comparator = Callable[[Any, Any], int]


class _Item:
    __slots__ = ("value", "cmp")

    def __init__(self, value: Any, cmp: Comparator) -> None:
        self.value = value
        self.cmp = cmp

    def __lt__(self, other: "_Item") -> bool:
        return self.cmp(self.value, other.value) < 0


class PriorityQueue:
    """A queue that always yields its smallest element under ``cmp`` first.

    Pass ``reverse_compare()`` as ``cmp`` for a max-queue.
    """

    def __init__(self, cmp: Comparator | None = None, thread_safe: bool = False) -> None:
        self._cmp = cmp or builtin_compare
        self._heap: list[_Item] = []
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    def push(self, element: Any) -> None:
        """Add ``element`` to the queue."""
        with self._lock:
            heapq.heappush(self._heap, _Item(element, self._cmp))

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError if empty."""
        with self._lock:
            if not self._heap:
                raise IndexError("pop from empty priority queue")
            return heapq.heappop(self._heap).value

    def top(self) -> Any:
        """The top element without removing it, or None if empty."""
        with self._lock:
            return self._heap[0].value if self._heap else None

    def empty(self) -> bool:
        with self._lock:
            return not self._heap

    def __len__(self) -> int:
        return self.size()

    def size(self) -> int:
        """The number of elements in the queue."""
        with self._lock:
            return len(self._heap)