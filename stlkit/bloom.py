"""A Bloom filter backed by :class:`stlkit.bitmap.Bitmap`."""

from __future__ import annotations

import contextlib
import math
import struct
import threading

from .bitmap import Bitmap
from .hashing import gen_hash_ints

_SALT = "g9hmj2fhgr"
_HEADER = struct.Struct("<QQ")


def estimate_parameters(n: int, p: float) -> tuple[int, int]:
    """Estimate bit count ``m`` and hash count ``k`` for ``n`` items at error rate ``p``."""
    if n <= 0:
        raise ValueError("n must be positive")
    if not 0.0 < p < 1.0:
        raise ValueError("p must lie strictly between 0 and 1")
    m = math.ceil(-1 * n * math.log(p) / (math.log(2) * math.log(2)))
    k = math.ceil(math.log(2) * m / n)
    return m, k


class BloomFilter:
    """A probabilistic set of strings with no false negatives."""

    def __init__(self, m: int, k: int, thread_safe: bool = False) -> None:
        if m <= 0:
            raise ValueError("m must be positive")
        if k < 0:
            raise ValueError("k must not be negative")
        self._m = m
        self._k = k
        self._bits = Bitmap(m)
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

    @classmethod
    def with_estimates(cls, n: int, fp: float, thread_safe: bool = False) -> "BloomFilter":
        """Create a filter sized for ``n`` items at false-positive rate ``fp``."""
        m, k = estimate_parameters(n, fp)
        return cls(m, k, thread_safe)

    @classmethod
    def from_data(cls, data: bytes, thread_safe: bool = False) -> "BloomFilter":
        """Rebuild a filter from bytes produced by :meth:`data`."""
        if len(data) < _HEADER.size:
            raise ValueError("data too short for a bloom filter header")
        m, k = _HEADER.unpack_from(data)
        bf = cls(m, k, thread_safe)
        bf._bits = Bitmap.from_data(data[_HEADER.size:])
        return bf

    def _positions(self, val: str) -> list[int]:
        return [h % self._m for h in gen_hash_ints((_SALT + val).encode(), self._k)]

    def add(self, val: str) -> None:
        """Add ``val`` to the filter."""
        with self._lock:
            for pos in self._positions(val):
                self._bits.set(pos)

    def contains(self, val: str) -> bool:
        """True if ``val`` is probably in the filter; False if it surely is not."""
        with self._lock:
            return all(self._bits.is_set(pos) for pos in self._positions(val))

    def __contains__(self, val: str) -> bool:
        return self.contains(val)

    def data(self) -> bytes:
        """Serialise the filter: little-endian ``m`` and ``k`` then the bits."""
        with self._lock:
            return _HEADER.pack(self._m, self._k) + self._bits.data()