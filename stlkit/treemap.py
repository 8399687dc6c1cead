"""Ordered maps with bidirectional iterators.

:class:`TreeMap` keeps unique keys. :class:`MultiMap` allows repeated keys
and keeps equal keys in insertion order. Keys are ordered by a three-way
comparator, :func:`stlkit.algorithm.builtin_compare` by default.
"""

from __future__ import annotations

import contextlib
import functools
import itertools
import threading
from collections.abc import Callable
from typing import Any

from sortedcontainers import SortedKeyList

from .algorithm import builtin_compare

Comparator = Callable[[Any, Any], int]

_BEFORE_ALL = -1
_AFTER_ALL = float("inf")


class _Entry:
    """A stored key-value pair; identity distinguishes entries with equal keys."""

    __slots__ = ("key", "value", "seq")

    def __init__(self, key: Any, value: Any, seq: int) -> None:
        self.key = key
        self.value = value
        self.seq = seq


class MapIterator:
    """A bidirectional position within a :class:`TreeMap` or :class:`MultiMap`."""

    def __init__(self, entries: SortedKeyList, entry: _Entry | None) -> None:
        self._entries = entries
        self._entry = entry

    def _index(self) -> int | None:
        if self._entry is None:
            return None
        try:
            return self._entries.index(self._entry)
        except ValueError:
            return None

    def is_valid(self) -> bool:
        return self._entry is not None

    def next(self) -> "MapIterator":
        """Move to the following entry (invalid past the last) and return self."""
        if self._entry is not None:
            idx = self._index()
            if idx is None or idx + 1 >= len(self._entries):
                self._entry = None
            else:
                self._entry = self._entries[idx + 1]
        return self

    def prev(self) -> "MapIterator":
        """Move to the preceding entry (invalid before the first) and return self."""
        if self._entry is not None:
            idx = self._index()
            if idx is None or idx == 0:
                self._entry = None
            else:
                self._entry = self._entries[idx - 1]
        return self

    def _require(self) -> _Entry:
        if self._entry is None:
            raise ValueError("iterator is not valid")
        return self._entry

    @property
    def key(self) -> Any:
        return self._require().key

    @property
    def value(self) -> Any:
        return self._require().value

    @value.setter
    def value(self, val: Any) -> None:
        self._require().value = val

    def clone(self) -> "MapIterator":
        return MapIterator(self._entries, self._entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapIterator):
            return NotImplemented
        return other._entry is self._entry

    __hash__ = None  # type: ignore[assignment]


class _OrderedStore:
    """Shared machinery for the ordered map types."""

    def __init__(self, key_cmp: Comparator | None, thread_safe: bool) -> None:
        self._cmp_key = functools.cmp_to_key(key_cmp or builtin_compare)
        self._entries = SortedKeyList(key=lambda e: (self._cmp_key(e.key), e.seq))
        self._seq = itertools.count()
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    def _add(self, key: Any, value: Any) -> None:
        self._entries.add(_Entry(key, value, next(self._seq)))

    def _lower_index(self, key: Any) -> int:
        return self._entries.bisect_key_left((self._cmp_key(key), _BEFORE_ALL))

    def _upper_index(self, key: Any) -> int:
        return self._entries.bisect_key_right((self._cmp_key(key), _AFTER_ALL))

    def _entry_at(self, idx: int) -> _Entry | None:
        return self._entries[idx] if 0 <= idx < len(self._entries) else None

    def _find_entry(self, key: Any) -> _Entry | None:
        entry = self._entry_at(self._lower_index(key))
        if entry is not None and self._cmp_key(entry.key) == self._cmp_key(key):
            return entry
        return None

    def _iter(self, entry: _Entry | None) -> MapIterator:
        return MapIterator(self._entries, entry)

    def _get(self, key: Any) -> Any:
        with self._lock:
            entry = self._find_entry(key)
            return None if entry is None else entry.value

    def _find(self, key: Any) -> MapIterator:
        with self._lock:
            return self._iter(self._find_entry(key))

    def _lower_bound(self, key: Any) -> MapIterator:
        with self._lock:
            return self._iter(self._entry_at(self._lower_index(key)))

    def _upper_bound(self, key: Any) -> MapIterator:
        with self._lock:
            return self._iter(self._entry_at(self._upper_index(key)))

    def _first(self) -> MapIterator:
        with self._lock:
            return self._iter(self._entry_at(0))

    def _last(self) -> MapIterator:
        with self._lock:
            return self._iter(self._entry_at(len(self._entries) - 1))

    def _clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _contains(self, key: Any) -> bool:
        with self._lock:
            return self._find_entry(key) is not None

    def _size(self) -> int:
        with self._lock:
            return len(self._entries)

    def _traversal(self, visitor: Callable[[Any, Any], bool]) -> None:
        with self._lock:
            for entry in list(self._entries):
                if not visitor(entry.key, entry.value):
                    break


class TreeMap(_OrderedStore):
    """An ordered map in which every key is unique."""

    def __init__(self, key_cmp: Comparator | None = None, thread_safe: bool = False) -> None:
        super().__init__(key_cmp, thread_safe)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        with self._lock:
            entry = self._find_entry(key)
            if entry is not None:
                entry.value = value
            else:
                self._add(key, value)

    def get(self, key: Any) -> Any:
        """The value stored under ``key``, or None."""
        return self._get(key)

    def erase(self, key: Any) -> None:
        """Remove the entry with ``key`` if present."""
        with self._lock:
            entry = self._find_entry(key)
            if entry is not None:
                self._entries.remove(entry)

    def erase_iter(self, it: MapIterator) -> None:
        """Remove the entry ``it`` points to; foreign or invalid iterators are ignored."""
        with self._lock:
            if not isinstance(it, MapIterator) or it._entries is not self._entries:
                return
            if it._entry is not None and it._index() is not None:
                self._entries.remove(it._entry)

    def find(self, key: Any) -> MapIterator:
        """Iterator to the entry with ``key``; invalid if there is none."""
        return self._find(key)

    def lower_bound(self, key: Any) -> MapIterator:
        """Iterator to the first entry whose key is not less than ``key``."""
        return self._lower_bound(key)

    def upper_bound(self, key: Any) -> MapIterator:
        """Iterator to the first entry whose key is greater than ``key``."""
        return self._upper_bound(key)

    def begin(self) -> MapIterator:
        return self._first()

    def first(self) -> MapIterator:
        """Iterator to the smallest entry; invalid if empty."""
        return self._first()

    def last(self) -> MapIterator:
        """Iterator to the largest entry; invalid if empty."""
        return self._last()

    def clear(self) -> None:
        self._clear()

    def contains(self, key: Any) -> bool:
        return self._contains(key)

    def __contains__(self, key: Any) -> bool:
        return self._contains(key)

    def __len__(self) -> int:
        return self._size()

    def size(self) -> int:
        """The number of entries."""
        return self._size()

    def traversal(self, visitor: Callable[[Any, Any], bool]) -> None:
        """Call ``visitor(key, value)`` in key order until it returns False."""
        self._traversal(visitor)


class MultiMap(_OrderedStore):
    """An ordered map that allows repeated keys, kept in insertion order."""

    def __init__(self, key_cmp: Comparator | None = None, thread_safe: bool = False) -> None:
        super().__init__(key_cmp, thread_safe)

    def insert(self, key: Any, value: Any) -> None:
        """Add a new entry, even if ``key`` is already present."""
        with self._lock:
            self._add(key, value)

    def get(self, key: Any) -> Any:
        """The value of the first entry with ``key``, or None."""
        return self._get(key)

    def erase(self, key: Any) -> None:
        """Remove every entry with ``key``."""
        with self._lock:
            lo = self._lower_index(key)
            hi = self._upper_index(key)
            del self._entries[lo:hi]

    def find(self, key: Any) -> MapIterator:
        """Iterator to the first entry with ``key``; invalid if there is none."""
        return self._find(key)

    def lower_bound(self, key: Any) -> MapIterator:
        """Iterator to the first entry whose key is not less than ``key``."""
        return self._lower_bound(key)

    def upper_bound(self, key: Any) -> MapIterator:
        """Iterator to the first entry whose key is greater than ``key``."""
        return self._upper_bound(key)

    def begin(self) -> MapIterator:
        return self._first()

    def first(self) -> MapIterator:
        """Iterator to the smallest entry; invalid if empty."""
        return self._first()

    def last(self) -> MapIterator:
        """Iterator to the largest entry; invalid if empty."""
        return self._last()

    def clear(self) -> None:
        self._clear()

    def contains(self, key: Any) -> bool:
        return self._contains(key)

    def __contains__(self, key: Any) -> bool:
        return self._contains(key)

    def __len__(self) -> int:
        return self._size()

    def size(self) -> int:
        """The number of entries."""
        return self._size()

    def traversal(self, visitor: Callable[[Any, Any], bool]) -> None:
        """Call ``visitor(key, value)`` in key order until it returns False."""
        self._traversal(visitor)