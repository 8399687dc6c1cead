"""A fixed-size array of bits."""

from __future__ import annotations


def _round_bits(size: int) -> int:
    return (size + 7) // 8 * 8


class Bitmap:
    """A bit array whose size is always a multiple of eight."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = _round_bits(size)
        self._data = bytearray(self._size // 8)

    @classmethod
    def from_data(cls, data: bytes) -> "Bitmap":
        """Build a bitmap from bytes previously returned by :meth:`data`."""
        bitmap = cls(0)
        bitmap._data = bytearray(data)
        bitmap._size = len(bitmap._data) * 8
        return bitmap

    def _in_range(self, pos: int) -> bool:
        return 0 <= pos < self._size

    def set(self, pos: int) -> bool:
        """Set bit ``pos`` to 1; return False if it is out of range."""
        if not self._in_range(pos):
            return False
        self._data[pos >> 3] |= 1 << (pos & 0x07)
        return True

    def unset(self, pos: int) -> bool:
        """Set bit ``pos`` to 0; return False if it is out of range."""
        if not self._in_range(pos):
            return False
        self._data[pos >> 3] &= ~(1 << (pos & 0x07)) & 0xFF
        return True

    def is_set(self, pos: int) -> bool:
        """True if bit ``pos`` is 1; out-of-range positions read as 0."""
        if not self._in_range(pos):
            return False
        return bool(self._data[pos >> 3] & (1 << (pos & 0x07)))

    def resize(self, size: int) -> None:
        """Change the size, keeping the bits that still fit."""
        if size < 0:
            raise ValueError("size must not be negative")
        size = _round_bits(size)
        if size == self._size:
            return
        nbytes = size // 8
        data = self._data[:nbytes]
        data.extend(bytes(nbytes - len(data)))
        self._data = data
        self._size = size

    def size(self) -> int:
        """The size of the bitmap in bits."""
        return self._size

    def clear(self) -> None:
        """Reset every bit to 0."""
        self._data = bytearray(self._size // 8)

    def data(self) -> bytes:
        """The raw bytes of the bitmap, least significant bit first."""
        return bytes(self._data)