"""Deterministic 64-bit hash values derived from SHA-512."""

from __future__ import annotations

import hashlib
import itertools
import struct

_WORDS = struct.Struct(">8Q")


def hash512(data: bytes) -> bytes:
    """Return the SHA-512 digest of ``data``."""
    return hashlib.sha512(data).digest()


def gen_hash_ints(seed: bytes, n: int) -> list[int]:
    """Return ``n`` unsigned 64-bit integers derived from ``seed``.

    The digest of the seed is split into eight big-endian words, which are
    repeated in order until ``n`` values have been produced.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    words = _WORDS.unpack(hash512(bytes(seed)))
    return list(itertools.islice(itertools.cycle(words), n))