"""Generic algorithms over iterator ranges ``[first, last)``.

An iterator here is any object offering ``clone()``, ``next()``, a readable
and writable ``value`` attribute and equality with another iterator.
Bidirectional algorithms additionally need ``prev()``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol

Comparator = Callable[[Any, Any], int]


class ConstIterator(Protocol):
    value: Any

    def clone(self) -> "ConstIterator": ...

    def next(self) -> "ConstIterator": ...


def builtin_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the natural ordering: -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_compare(cmp: Comparator = builtin_compare) -> Comparator:
    """Return a comparator that orders the opposite way to ``cmp``."""

    def reversed_cmp(a: Any, b: Any) -> int:
        return cmp(b, a)

    return reversed_cmp


def _walk(first: ConstIterator, last: ConstIterator) -> Iterator[ConstIterator]:
    """Yield a single moving iterator positioned on each element of the range."""
    it = first.clone()
    while not it == last:
        yield it
        it.next()


def count(first, last, value, cmp: Comparator | None = None) -> int:
    """Number of elements in the range equal to ``value``."""
    cmp = cmp or builtin_compare
    return sum(1 for it in _walk(first, last) if cmp(it.value, value) == 0)


def count_if(first, last, pred: Callable[[Any], bool]) -> int:
    """Number of positions in the range for which ``pred(iterator)`` holds."""
    return sum(1 for it in _walk(first, last) if pred(it))


def find(first, last, value, cmp: Comparator | None = None):
    """Iterator to the first element equal to ``value``, or ``last``."""
    cmp = cmp or builtin_compare
    for it in _walk(first, last):
        if cmp(it.value, value) == 0:
            return it
    return last


def find_if(first, last, pred: Callable[[Any], bool]):
    """Iterator to the first position satisfying ``pred``, or ``last``."""
    for it in _walk(first, last):
        if pred(it):
            return it
    return last


def max_element(first, last, cmp: Comparator | None = None):
    """Iterator to the first largest element, or ``last`` for an empty range."""
    cmp = cmp or builtin_compare
    if first == last:
        return last
    largest = first
    for it in _walk(first, last):
        if cmp(it.value, largest.value) > 0:
            largest = it.clone()
    return largest


def min_element(first, last, cmp: Comparator | None = None):
    """Iterator to the first smallest element, or ``last`` for an empty range."""
    cmp = cmp or builtin_compare
    if first == last:
        return last
    smallest = first
    for it in _walk(first, last):
        if cmp(it.value, smallest.value) < 0:
            smallest = it.clone()
    return smallest


def swap(a, b) -> None:
    """Exchange the values the two iterators point to."""
    a.value, b.value = b.value, a.value


def reverse(first, last) -> None:
    """Reverse the elements of the range ``[first, last)`` in place."""
    if first == last:
        return
    left = first.clone()
    right = last.clone()
    right.prev()
    while not left == right:
        swap(left, right)
        left.next()
        if left == right:
            break
        right.prev()