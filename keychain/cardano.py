"""Cardano key paths."""

from __future__ import annotations

from .errors import KeyPathError
from .key_path import BIP44_PURPOSE, BIP44_SOFT_UPPER_BOUND, KeyPath

BIP44_COIN_TYPE = 0x80000717

_U32_LIMIT = 1 << 32


def key_path(account: int, change: int, address: int) -> KeyPath:
    """BIP44 path for a Cardano address."""
    for name, value in (("account", account), ("change", change), ("address", address)):
        if not 0 <= value < _U32_LIMIT:
            raise ValueError(f"{name} {value} does not fit in 32 bits")
    if account >= BIP44_SOFT_UPPER_BOUND:
        raise KeyPathError.invalid_account(account)
    if change not in (0, 1):
        raise KeyPathError.invalid_change(change)
    if address >= BIP44_SOFT_UPPER_BOUND:
        raise KeyPathError.invalid_address(change)
    return KeyPath(
        BIP44_PURPOSE,
        BIP44_COIN_TYPE,
        account + BIP44_SOFT_UPPER_BOUND,
        change,
        address,
    )