"""Consistent hashing over a ring of named nodes."""

from __future__ import annotations

import contextlib
import threading

from .hashing import gen_hash_ints
from .treemap import TreeMap

_SALT = "ni9fkh72hgh1g"
DEFAULT_REPLICAS = 10


def _ring_points(name: str, count: int) -> list[int]:
    return gen_hash_ints((_SALT + name).encode("utf-8"), count)


class Ketama:
    """A consistent-hash ring placing each node at ``replicas`` points."""

    def __init__(self, replicas: int = DEFAULT_REPLICAS, thread_safe: bool = False) -> None:
        if replicas < 0:
            raise ValueError("replicas must not be negative")
        self._replicas = replicas
        self._ring = TreeMap()
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    def empty(self) -> bool:
        """True if the ring holds no points."""
        with self._lock:
            return self._ring.size() == 0

    def add(self, *args: str) -> None:
        """Place each named node on the ring; occupied points are left as they are."""
        with self._lock:
            for node in args:
                for point in _ring_points(node, self._replicas):
                    if not self._ring.contains(point):
                        self._ring.insert(point, node)

    def remove(self, *args: str) -> None:
        """Take each named node's points off the ring."""
        with self._lock:
            for node in args:
                for point in _ring_points(node, self._replicas):
                    it = self._ring.find(point)
                    if it.is_valid() and it.value == node:
                        self._ring.erase_iter(it)

    def get(self, key: str) -> str | None:
        """The node at or clockwise after ``key``'s hash, or None if the ring is empty."""
        point = _ring_points(key, 1)[0]
        with self._lock:
            if self._ring.size() == 0:
                return None
            it = self._ring.lower_bound(point)
            if it.is_valid():
                return it.value
            return self._ring.first().value