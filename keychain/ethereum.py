"""Ethereum key paths, keys and key factory."""

from __future__ import annotations

from .errors import Bip32Error, KeyPathError, SignError
from .key_factory import Key, KeyFactory, SeedSize, _key_error, _seed_bytes
from .key_path import BIP44_PURPOSE, BIP44_SOFT_UPPER_BOUND, KeyPath
from .network import Network
from .xprv import XPrv

BIP44_COIN_TYPE = 0x8000003C

_U32_LIMIT = 1 << 32


def _check_account(account: int) -> None:
    if not 0 <= account < _U32_LIMIT:
        raise ValueError(f"account {account} does not fit in 32 bits")
    if account >= BIP44_SOFT_UPPER_BOUND:
        raise KeyPathError.invalid_account(account)


def key_path(account: int) -> KeyPath:
    """Path with one hardened account per address."""
    _check_account(account)
    return KeyPath(
        BIP44_PURPOSE, BIP44_COIN_TYPE, account + BIP44_SOFT_UPPER_BOUND, 0, 0
    )


def metamask_key_path(account: int) -> KeyPath:
    """Path with the first account and one address per account number."""
    _check_account(account)
    return KeyPath(BIP44_PURPOSE, BIP44_COIN_TYPE, BIP44_SOFT_UPPER_BOUND, 0, account)


class EthereumKey(Key):
    """An Ethereum key, held already derived to the coin level."""

    def __init__(self, xprv: XPrv) -> None:
        self._xprv = xprv

    @classmethod
    def from_data(cls, data: bytes) -> EthereumKey:
        try:
            master = XPrv.from_data(data)
            return cls(master.derive(BIP44_PURPOSE).derive(BIP44_COIN_TYPE))
        except Bip32Error as exc:
            raise _key_error(exc) from exc

    @staticmethod
    def data_from_seed(seed: bytes) -> bytes:
        try:
            return XPrv.from_seed(seed).serialize()
        except Bip32Error as exc:
            raise _key_error(exc) from exc

    def _derive_private(self, path: KeyPath) -> XPrv:
        if path.purpose != BIP44_PURPOSE:
            raise KeyPathError.invalid_purpose(path.purpose, BIP44_PURPOSE)
        if path.coin != BIP44_COIN_TYPE:
            raise KeyPathError.invalid_coin(path.coin, BIP44_COIN_TYPE)
        if path.account < BIP44_SOFT_UPPER_BOUND:
            raise KeyPathError.invalid_account(path.account)
        if path.change not in (0, 1):
            raise KeyPathError.invalid_change(path.change)
        if path.address >= BIP44_SOFT_UPPER_BOUND:
            raise KeyPathError.invalid_address(path.address)
        key = self._xprv
        try:
            for index in (path.account, path.change, path.address):
                key = key.derive(index)
        except Bip32Error as exc:
            raise _key_error(exc) from exc
        return key

    def network(self) -> Network:
        return Network.ETHEREUM

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


class EthereumKeyFactory(KeyFactory):
    """Makes Ethereum keys."""

    def network(self) -> Network:
        return Network.ETHEREUM

    def seed_size(self) -> SeedSize:
        return SeedSize(128, 256)

    def key_from_data(self, data: bytes) -> EthereumKey:
        return EthereumKey.from_data(data)

    def key_data_from_seed(self, seed: bytes) -> bytes:
        return EthereumKey.data_from_seed(_seed_bytes(seed))