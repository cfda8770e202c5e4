"""BIP44-style key paths and their text form."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import KeyPathError

BIP44_PURPOSE = 0x8000002C
BIP44_SOFT_UPPER_BOUND = 0x80000000
KEY_PATH_PARTS_COUNT = 6

_U32_LIMIT = 1 << 32
_NUMBER = re.compile(r"\+?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class KeyPath:
    """A five-level derivation path: purpose/coin/account/change/address."""

    purpose: int
    coin: int
    account: int
    change: int
    address: int

    def __post_init__(self) -> None:
        for name in ("purpose", "coin", "account", "change", "address"):
            value = getattr(self, name)
            if not 0 <= value < _U32_LIMIT:
                raise ValueError(f"{name} {value} does not fit in 32 bits")

    def __str__(self) -> str:
        parts = (self.purpose, self.coin, self.account, self.change, self.address)
        return "m/" + "/".join(_format_index(value) for value in parts)


def _format_index(value: int) -> str:
    if value >= BIP44_SOFT_UPPER_BOUND:
        return f"{value - BIP44_SOFT_UPPER_BOUND}'"
    return str(value)


def _parse_soft(index: int, text: str) -> int:
    if not text:
        raise KeyPathError.empty_value_at(index)
    if not _NUMBER.fullmatch(text):
        raise KeyPathError.parse_error_at(index, "invalid digit found in string")
    value = int(text)
    if value >= _U32_LIMIT:
        raise KeyPathError.parse_error_at(index, "number too large to fit in target type")
    return value


def _parse_index(index: int, text: str) -> int:
    if not text:
        raise KeyPathError.empty_value_at(index)
    if not text.endswith("'"):
        return _parse_soft(index, text)
    value = _parse_soft(index, text[:-1]) + BIP44_SOFT_UPPER_BOUND
    if value >= _U32_LIMIT:
        raise KeyPathError.parse_error_at(index, "number too large to fit in target type")
    return value


def parse_key_path(path: str) -> KeyPath:
    """Parse text such as ``m/44'/60'/0'/0/0``; ``'`` marks a hardened index."""
    parts = [part.strip() for part in path.split("/")]
    if len(parts) != KEY_PATH_PARTS_COUNT:
        raise KeyPathError.invalid_parts_count(len(parts), KEY_PATH_PARTS_COUNT)
    if parts[0] != "m":
        raise KeyPathError.invalid_path_marker(parts[0])
    values = [_parse_index(index, text) for index, text in enumerate(parts[1:], start=1)]
    return KeyPath(*values)