"""Bitcoin key paths, keys and key factory."""

from __future__ import annotations

from .errors import Bip32Error, KeyPathError, SignError
from .key_factory import Key, KeyFactory, SeedSize, _key_error, _seed_bytes
from .key_path import BIP44_PURPOSE, BIP44_SOFT_UPPER_BOUND, KeyPath
from .network import Network
from .xprv import XPrv

COIN_TYPE = 0x80000000
COIN_TYPE_TESTNET = 0x80000001
BIP49_PURPOSE = 0x80000031
BIP84_PURPOSE = 0x80000054

_U32_LIMIT = 1 << 32


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value < _U32_LIMIT:
        raise ValueError(f"{name} {value} does not fit in 32 bits")


def _make_path(purpose: int, testnet: bool, account: int, change: int, address: int) -> KeyPath:
    for name, value in (("account", account), ("change", change), ("address", address)):
        _check_u32(name, value)
    if account >= BIP44_SOFT_UPPER_BOUND:
        raise KeyPathError.invalid_account(account)
    if change not in (0, 1):
        raise KeyPathError.invalid_change(change)
    if address >= BIP44_SOFT_UPPER_BOUND:
        raise KeyPathError.invalid_address(change)
    coin = COIN_TYPE_TESTNET if testnet else COIN_TYPE
    return KeyPath(purpose, coin, account + BIP44_SOFT_UPPER_BOUND, change, address)


def bip44(testnet: bool, account: int, change: int, address: int) -> KeyPath:
    """BIP44 path for a legacy address."""
    return _make_path(BIP44_PURPOSE, testnet, account, change, address)


def bip49(testnet: bool, account: int, change: int, address: int) -> KeyPath:
    """BIP49 path for a nested SegWit address."""
    return _make_path(BIP49_PURPOSE, testnet, account, change, address)


def bip84(testnet: bool, account: int, change: int, address: int) -> KeyPath:
    """BIP84 path for a native SegWit address."""
    return _make_path(BIP84_PURPOSE, testnet, account, change, address)


class BitcoinKey(Key):
    """A Bitcoin master key; every operation derives along the full path."""

    def __init__(self, xprv: XPrv) -> None:
        self._xprv = xprv

    @classmethod
    def from_data(cls, data: bytes) -> BitcoinKey:
        try:
            return cls(XPrv.from_data(data))
        except Bip32Error as exc:
            raise _key_error(exc) from exc

    @staticmethod
    def data_from_seed(seed: bytes) -> bytes:
        try:
            return XPrv.from_seed(seed).serialize()
        except Bip32Error as exc:
            raise _key_error(exc) from exc

    def _derive_private(self, path: KeyPath) -> XPrv:
        if path.coin != COIN_TYPE:
            raise KeyPathError.invalid_coin(path.coin, COIN_TYPE)
        if path.account < BIP44_SOFT_UPPER_BOUND:
            raise KeyPathError.invalid_account(path.account)
        if path.change not in (0, 1):
            raise KeyPathError.invalid_change(path.change)
        if path.address >= BIP44_SOFT_UPPER_BOUND:
            raise KeyPathError.invalid_address(path.address)
        key = self._xprv
        try:
            for index in (path.purpose, path.coin, path.account, path.change, path.address):
                key = key.derive(index)
        except Bip32Error as exc:
            raise _key_error(exc) from exc
        return key

    def network(self) -> Network:
        return Network.BITCOIN

    def pub_key(self, path: KeyPath) -> bytes:
        return self._derive_private(path).public().serialize()

    def sign(self, data: bytes, path: KeyPath) -> bytes:
        child = self._derive_private(path)
        try:
            return child.sign(data)
        except Bip32Error as exc:
            raise SignError(exc) from exc

    def verify(self, data: bytes, signature: bytes, path: KeyPath) -> bool:
        public = self._derive_private(path).public()
        try:
            return public.verify(data, signature)
        except Bip32Error as exc:
            raise _key_error(exc) from exc


class BitcoinKeyFactory(KeyFactory):
    """Makes Bitcoin keys."""

    def network(self) -> Network:
        return Network.BITCOIN

    def seed_size(self) -> SeedSize:
        return SeedSize(128, 256)

    def key_from_data(self, data: bytes) -> BitcoinKey:
        return BitcoinKey.from_data(data)

    def key_data_from_seed(self, seed: bytes) -> bytes:
        return BitcoinKey.data_from_seed(_seed_bytes(seed))