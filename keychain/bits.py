"""Packing and unpacking of 11-bit values, most significant bit first."""

from __future__ import annotations

_BLOCK_BITS = 11
_BLOCK_MASK = (1 << _BLOCK_BITS) - 1
_U16_LIMIT = 1 << 16


class BitWriterBy11:
    """Accumulates 11-bit values into a zero-padded byte string."""

    def __init__(self) -> None:
        self._value = 0
        self._bits = 0

    def write(self, value: int) -> None:
        """Append the low 11 bits of a 16-bit value."""
        if not 0 <= value < _U16_LIMIT:
            raise ValueError(f"value {value} does not fit in 16 bits")
        self._value = (self._value << _BLOCK_BITS) | (value & _BLOCK_MASK)
        self._bits += _BLOCK_BITS

    def to_bytes(self) -> bytes:
        """Return the written bits, padded with zero bits to a whole byte."""
        length = -(-self._bits // 8)
        padding = length * 8 - self._bits
        return (self._value << padding).to_bytes(length, "big")


class BitReaderBy11:
    """Reads consecutive 11-bit values from a byte string."""

    def __init__(self, data: bytes) -> None:
        raw = bytes(data)
        self._value = int.from_bytes(raw, "big")
        self._total = len(raw) * 8
        self._position = 0

    def size(self) -> int:
        """Number of whole 11-bit values still available."""
        return (self._total - self._position) // _BLOCK_BITS

    def read(self) -> int:
        """Return the next 11-bit value."""
        end = self._position + _BLOCK_BITS
        if end > self._total:
            raise EOFError("not enough data to read 11 bits")
        self._position = end
        return (self._value >> (self._total - end)) & _BLOCK_MASK