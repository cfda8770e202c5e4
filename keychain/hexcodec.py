"""Hexadecimal encoding and decoding."""

from __future__ import annotations

_WHITESPACE = frozenset(b" \r\n\t")
_DIGITS = {
    **{code: code - ord("0") for code in range(ord("0"), ord("9") + 1)},
    **{code: code - ord("a") + 10 for code in range(ord("a"), ord("f") + 1)},
    **{code: code - ord("A") + 10 for code in range(ord("A"), ord("F") + 1)},
}


class UnknownSymbolError(ValueError):
    """A character outside the hexadecimal alphabet was found."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Unknown symbol at byte index {index}")


def encode(data: bytes) -> str:
    """Encode bytes as lower-case hexadecimal text."""
    return bytes(data).hex()


def decode(text: str) -> bytes:
    """Decode hexadecimal text; whitespace is skipped and a trailing odd digit dropped."""
    nibbles = []
    for index, code in enumerate(text.encode("utf-8")):
        if code in _WHITESPACE:
            continue
        try:
            nibbles.append(_DIGITS[code])
        except KeyError:
            raise UnknownSymbolError(index) from None
    return bytes((high << 4) | low for high, low in zip(nibbles[::2], nibbles[1::2]))