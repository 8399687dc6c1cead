"""A hash array mapped trie keyed by byte strings."""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Callable, Iterator
from typing import Any, Union

_FANOUT = 6  # bits consumed per level, so at most 11 levels for a 64-bit hash
_MASK = (1 << _FANOUT) - 1
_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_U64 = (1 << 64) - 1

KeyLike = Union[bytes, bytearray, memoryview, str]


def _fnv1_64(data: bytes) -> int:
    h = _FNV_OFFSET
    for byte in data:
        h = (h * _FNV_PRIME) & _U64
        h ^= byte
    return h


def _pos(hash_value: int, depth: int) -> int:
    return (hash_value >> (depth * _FANOUT)) & _MASK


def _as_key(key: KeyLike) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


class _KvNode:
    """A leaf holding every pair whose key hashes to ``hash``."""

    __slots__ = ("hash", "pairs")

    def __init__(self, hash_value: int, pairs: list[list[Any]]) -> None:
        self.hash = hash_value
        self.pairs = pairs

    def items(self) -> Iterator[tuple[bytes, Any]]:
        for key, value in self.pairs:
            yield key, value


class _BitmapNode:
    """An inner node whose children are indexed by a 64-bit occupancy map."""

    __slots__ = ("bitmap", "children", "pos")

    def __init__(self, pos: int = 0) -> None:
        self.bitmap = 0
        self.children: list[_KvNode | _BitmapNode] = []
        self.pos = pos

    def _index(self, bit: int) -> int:
        return ((bit - 1) & self.bitmap).bit_count()

    def insert(self, depth: int, leaf: _KvNode) -> None:
        pos = _pos(leaf.hash, depth)
        bit = 1 << pos
        idx = self._index(bit)
        if not bit & self.bitmap:
            self.bitmap |= bit
            self.children.insert(idx, leaf)
            return
        child = self.children[idx]
        if isinstance(child, _BitmapNode):
            child.insert(depth + 1, leaf)
            return
        if child.hash == leaf.hash:
            for key, value in leaf.pairs:
                for pair in child.pairs:
                    if pair[0] == key:
                        pair[1] = value
                        break
                else:
                    child.pairs.insert(0, [key, value])
            return
        branch = _BitmapNode(pos)
        branch.insert(depth + 1, child)
        branch.insert(depth + 1, leaf)
        self.children[idx] = branch

    def find(self, depth: int, hash_value: int, key: bytes) -> Any:
        node: _BitmapNode = self
        while True:
            bit = 1 << _pos(hash_value, depth)
            if not bit & node.bitmap:
                return None
            child = node.children[node._index(bit)]
            if isinstance(child, _BitmapNode):
                node = child
                depth += 1
                continue
            if child.hash != hash_value:
                return None
            for pair_key, value in child.pairs:
                if pair_key == key:
                    return value
            return None

    def erase(self, depth: int, hash_value: int, key: bytes) -> bool:
        bit = 1 << _pos(hash_value, depth)
        if not bit & self.bitmap:
            return False
        idx = self._index(bit)
        child = self.children[idx]
        if isinstance(child, _KvNode):
            if child.hash != hash_value:
                return False
            for i, (pair_key, _) in enumerate(child.pairs):
                if pair_key == key:
                    del child.pairs[i]
                    break
            else:
                return False
            if not child.pairs:
                del self.children[idx]
                self.bitmap &= ~bit
            return True
        ok = child.erase(depth + 1, hash_value, key)
        # A branch left with a single leaf is folded back into this node.
        if ok and len(child.children) == 1 and isinstance(child.children[0], _KvNode):
            self.children[idx] = child.children[0]
        return ok

    def items(self) -> Iterator[tuple[bytes, Any]]:
        for child in self.children:
            yield from child.items()


class Hamt:
    """A map from byte-string keys to values. String keys are UTF-8 encoded."""

    def __init__(self, thread_safe: bool = False) -> None:
        self._root = _BitmapNode()
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    def insert(self, key: KeyLike, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        raw = _as_key(key)
        leaf = _KvNode(_fnv1_64(raw), [[raw, value]])
        with self._lock:
            self._root.insert(0, leaf)

    def get(self, key: KeyLike) -> Any:
        """The value stored under ``key``, or None if absent."""
        raw = _as_key(key)
        hash_value = _fnv1_64(raw)
        with self._lock:
            return self._root.find(0, hash_value, raw)

    def erase(self, key: KeyLike) -> bool:
        """Remove ``key``; return True if it was present."""
        raw = _as_key(key)
        hash_value = _fnv1_64(raw)
        with self._lock:
            return self._root.erase(0, hash_value, raw)

    def keys(self) -> list[bytes]:
        """All keys, as bytes, in trie order."""
        with self._lock:
            return [key for key, _ in self._root.items()]

    def string_keys(self) -> list[str]:
        """All keys decoded as UTF-8, in the same order as :meth:`keys`."""
        with self._lock:
            return [key.decode("utf-8") for key, _ in self._root.items()]

    def traversal(self, visitor: Callable[[bytes, Any], bool]) -> None:
        """Call ``visitor(key, value)`` for each entry until it returns False."""
        with self._lock:
            for key, value in list(self._root.items()):
                if not visitor(key, value):
                    break