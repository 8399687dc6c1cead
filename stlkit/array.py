"""A fixed-size array with random-access iterators."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Array:
    """A sequence of fixed length; out-of-range access reads as None."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._values: list[Any] = [None] * size

    @classmethod
    def from_array(cls, other: "Array") -> "Array":
        """Create a copy of ``other``."""
        arr = cls(0)
        arr._values = list(other._values)
        return arr

    def fill(self, val: Any) -> None:
        """Set every element to ``val``."""
        self._values = [val] * len(self._values)

    def set(self, pos: int, val: Any) -> None:
        """Store ``val`` at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._values):
            self._values[pos] = val

    def at(self, pos: int) -> Any:
        """The value at ``pos``, or None if out of range."""
        if 0 <= pos < len(self._values):
            return self._values[pos]
        return None

    def front(self) -> Any:
        return self.at(0)

    def back(self) -> Any:
        return self.at(len(self._values) - 1)

    def __len__(self) -> int:
        return len(self._values)

    def empty(self) -> bool:
        return not self._values

    def swap_array(self, other: "Array") -> None:
        """Exchange contents with an array of the same size; otherwise do nothing."""
        if len(self) != len(other):
            return
        self._values, other._values = other._values, self._values

    def data(self) -> list[Any]:
        """The underlying list of values."""
        return self._values

    def begin(self) -> "ArrayIterator":
        return self.first()

    def end(self) -> "ArrayIterator":
        return self.iter_at(len(self))

    def first(self) -> "ArrayIterator":
        return self.iter_at(0)

    def last(self) -> "ArrayIterator":
        return self.iter_at(len(self) - 1)

    def iter_at(self, pos: int) -> "ArrayIterator":
        return ArrayIterator(self, pos)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self._values) + "]"


class ArrayIterator:
    """A random-access position within an :class:`Array`."""

    def __init__(self, array: Array, position: int) -> None:
        self._array = array
        self._position = position

    def is_valid(self) -> bool:
        return 0 <= self._position < len(self._array)

    @property
    def value(self) -> Any:
        return self._array.at(self._position)

    @value.setter
    def value(self, val: Any) -> None:
        self._array.set(self._position, val)

    def next(self) -> "ArrayIterator":
        """Advance one position (not past the end) and return self."""
        if self._position < len(self._array):
            self._position += 1
        return self

    def prev(self) -> "ArrayIterator":
        """Step back one position (not before -1) and return self."""
        if self._position >= 0:
            self._position -= 1
        return self

    def clone(self) -> "ArrayIterator":
        return ArrayIterator(self._array, self._position)

    def iterator_at(self, pos: int) -> "ArrayIterator":
        return ArrayIterator(self._array, pos)

    @property
    def position(self) -> int:
        return self._position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayIterator):
            return NotImplemented
        return other._array is self._array and other._position == self._position

    __hash__ = None  # type: ignore[assignment]