"""Sorting, selection, permutation and searching over random-access ranges.

A range is given by two random-access iterators ``first`` and ``last``
(half-open, ``[first, last)``) such as those of :class:`stlkit.array.Array`
or :class:`stlkit.deque.Deque`. Each iterator offers ``position``,
``iterator_at(pos)``, ``clone()``, ``is_valid()`` and a writable ``value``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from .algorithm import builtin_compare

Comparator = Callable[[Any, Any], int]


def _value_at(first, pos: int) -> Any:
    return first.iterator_at(pos).value


def _read(first, last) -> list[Any]:
    return [_value_at(first, pos) for pos in range(first.position, last.position)]


def _write(first, values: list[Any]) -> None:
    start = first.position
    for offset, value in enumerate(values):
        first.iterator_at(start + offset).value = value


def sort(first, last, cmp: Comparator | None = None) -> None:
    """Sort the range in place into ascending order under ``cmp``."""
    cmp = cmp or builtin_compare
    values = _read(first, last)
    if len(values) < 2:
        return
    values.sort(key=functools.cmp_to_key(cmp))
    _write(first, values)


def stable_sort(first, last, cmp: Comparator | None = None) -> None:
    """Sort the range in place, keeping the order of equivalent elements."""
    cmp = cmp or builtin_compare
    values = _read(first, last)
    if len(values) < 2:
        return
    # list.sort is a stable merge sort.
    values.sort(key=functools.cmp_to_key(cmp))
    _write(first, values)


def _pivot(values: list[Any], lo: int, mid: int, hi: int, cmp: Comparator) -> None:
    if cmp(values[lo], values[mid]) > 0:
        values[lo], values[mid] = values[mid], values[lo]
    if cmp(values[lo], values[hi]) > 0:
        values[lo], values[hi] = values[hi], values[lo]
    if cmp(values[mid], values[hi]) > 0:
        values[mid], values[hi] = values[hi], values[mid]


def _select(values: list[Any], lo: int, hi: int, n: int, cmp: Comparator) -> None:
    """Quickselect over the inclusive span ``[lo, hi]``; ``n`` is relative to ``lo``."""
    while lo < hi:
        length = hi - lo + 1
        if length < 3:
            if cmp(values[lo], values[hi]) > 0:
                values[lo], values[hi] = values[hi], values[lo]
            return
        mid = lo + length // 2
        _pivot(values, lo, mid, hi, cmp)
        base = hi - 1
        values[mid], values[base] = values[base], values[mid]
        if length == 3:
            return
        left, right = lo + 1, hi - 2
        while left <= right:
            if cmp(values[left], values[base]) <= 0:
                left += 1
            elif cmp(values[right], values[base]) > 0:
                right -= 1
            else:
                values[left], values[right] = values[right], values[left]
                left += 1
                right -= 1
        m = right + 1
        values[base], values[m] = values[m], values[base]
        if n <= m - lo:
            hi = m
        else:
            n -= m - lo + 1
            lo = m + 1


def nth_element(first, last, n: int, cmp: Comparator | None = None) -> None:
    """Rearrange the range so that offset ``n`` holds the value a full sort would put there.

    Everything before it compares no greater and everything after it no
    smaller. Invalid ranges or ``n`` beyond the range length leave it unchanged.
    """
    if first.position < 0 or n < 0 or last.position - first.position < n:
        return
    cmp = cmp or builtin_compare
    values = _read(first, last)
    if len(values) < 2:
        return
    _select(values, 0, len(values) - 1, n, cmp)
    _write(first, values)


def next_permutation(first, last, cmp: Comparator | None = None) -> bool:
    """Turn the range into the next permutation under ``cmp``.

    Return False, leaving the range unchanged, when it is already the last
    permutation.
    """
    cmp = cmp or builtin_compare
    values = _read(first, last)
    cur = len(values) - 1
    while cur > 0 and cmp(values[cur - 1], values[cur]) >= 0:
        cur -= 1
    if cur <= 0:
        return False
    pre = cur - 1
    swap_pos = len(values) - 1
    while cmp(values[swap_pos], values[pre]) <= 0:
        swap_pos -= 1
    values[swap_pos], values[pre] = values[pre], values[swap_pos]
    values[cur:] = reversed(values[cur:])
    _write(first, values)
    return True


def _is_empty(first, last) -> bool:
    return not first.is_valid() or first.position >= last.position


def binary_search(first, last, val: Any, cmp: Comparator | None = None) -> bool:
    """True if a sorted range contains an element equivalent to ``val``."""
    cmp = cmp or builtin_compare
    if _is_empty(first, last):
        return False
    lo, hi = first.position, last.position - 1
    while lo <= hi:
        mid = (lo + hi) >> 1
        result = cmp(val, _value_at(first, mid))
        if result == 0:
            return True
        if result < 0:
            hi = mid - 1
        else:
            lo = mid + 1
    return False


def _bound(first, last, val: Any, cmp: Comparator, goes_left: Callable[[int], bool]):
    if _is_empty(first, last):
        return last.clone()
    lo, hi = first.position, last.position
    while lo < hi:
        mid = (lo + hi) >> 1
        if goes_left(cmp(val, _value_at(first, mid))):
            hi = mid
        else:
            lo = mid + 1
    if lo >= last.position:
        return last.clone()
    return first.iterator_at(lo)


def lower_bound(first, last, val: Any, cmp: Comparator | None = None):
    """Iterator to the first element not less than ``val``, or a copy of ``last``."""
    return _bound(first, last, val, cmp or builtin_compare, lambda r: r <= 0)


def upper_bound(first, last, val: Any, cmp: Comparator | None = None):
    """Iterator to the first element greater than ``val``, or a copy of ``last``."""
    return _bound(first, last, val, cmp or builtin_compare, lambda r: r < 0)