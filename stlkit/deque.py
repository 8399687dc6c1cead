"""A double-ended queue with random access and random-access iterators."""

from __future__ import annotations

import collections
import contextlib
from collections.abc import Iterator
from typing import Any


class Deque:
    """A sequence with cheap insertion and removal at both ends.

    Reads outside the valid range give None and removals from an empty
    deque give None. Writing outside the range raises :class:`IndexError`.
    """

    def __init__(self) -> None:
        self._items: collections.deque[Any] = collections.deque()

    def __len__(self) -> int:
        return len(self._items)

    def size(self) -> int:
        """The number of values in the deque."""
        return len(self._items)

    def empty(self) -> bool:
        return not self._items

    def push_front(self, value: Any) -> None:
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        self._items.append(value)

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` before position ``pos``; ``pos`` may equal the size.

        Positions outside ``[0, size]`` leave the deque unchanged.
        """
        if not 0 <= pos <= len(self._items):
            return
        self._items.insert(pos, value)

    def front(self) -> Any:
        """The first value, or None if the deque is empty."""
        return self._items[0] if self._items else None

    def back(self) -> Any:
        """The last value, or None if the deque is empty."""
        return self._items[-1] if self._items else None

    def at(self, pos: int) -> Any:
        """The value at ``pos``, or None if ``pos`` is out of range."""
        if 0 <= pos < len(self._items):
            return self._items[pos]
        return None

    def set(self, pos: int, val: Any) -> None:
        """Replace the value at ``pos``; raise IndexError if out of range."""
        if not 0 <= pos < len(self._items):
            raise IndexError("out of range")
        self._items[pos] = val

    def pop_front(self) -> Any:
        """Remove and return the first value, or None if empty."""
        return self._items.popleft() if self._items else None

    def pop_back(self) -> Any:
        """Remove and return the last value, or None if empty."""
        return self._items.pop() if self._items else None

    def erase_at(self, pos: int) -> None:
        """Remove the value at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._items):
            del self._items[pos]

    def erase_range(self, first_pos: int, last_pos: int) -> None:
        """Remove the values in ``[first_pos, last_pos)``; invalid ranges are ignored."""
        if first_pos < 0 or first_pos >= last_pos or last_pos > len(self._items):
            return
        self._items.rotate(-first_pos)
        for _ in range(last_pos - first_pos):
            self._items.popleft()
        self._items.rotate(first_pos)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self._items) + "]"

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def begin(self) -> "DequeIterator":
        return self.first()

    def end(self) -> "DequeIterator":
        return self.iter_at(len(self._items))

    def first(self) -> "DequeIterator":
        return self.iter_at(0)

    def last(self) -> "DequeIterator":
        return self.iter_at(len(self._items) - 1)

    def iter_at(self, pos: int) -> "DequeIterator":
        return DequeIterator(self, pos)


class DequeIterator:
    """A random-access position within a :class:`Deque`."""

    def __init__(self, deque: Deque, position: int) -> None:
        self._deque = deque
        self._position = position

    def is_valid(self) -> bool:
        return 0 <= self._position < len(self._deque)

    @property
    def value(self) -> Any:
        return self._deque.at(self._position)

    @value.setter
    def value(self, val: Any) -> None:
        with contextlib.suppress(IndexError):
            self._deque.set(self._position, val)

    def next(self) -> "DequeIterator":
        """Advance one position (not past the end) and return self."""
        if self._position < len(self._deque):
            self._position += 1
        return self

    def prev(self) -> "DequeIterator":
        """Step back one position (not before -1) and return self."""
        if self._position >= 0:
            self._position -= 1
        return self

    def clone(self) -> "DequeIterator":
        return DequeIterator(self._deque, self._position)

    def iterator_at(self, pos: int) -> "DequeIterator":
        return DequeIterator(self._deque, pos)

    @property
    def position(self) -> int:
        return self._position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DequeIterator):
            return NotImplemented
        return other._deque is self._deque and other._position == self._position

    __hash__ = None  # type: ignore[assignment]