"""Interfaces of network keys and of the factories that create them."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from .errors import (
    Bip32Error,
    Bip32ErrorKind,
    InvalidSignatureSizeError,
    KeyOperationError,
    MnemonicError,
)
from .key_path import KeyPath
from .network import Network

SEED_SIZE = 64


@dataclass(frozen=True)
class SeedSize:
    """Range of mnemonic entropy sizes, in bits, that a network accepts."""

    min: int
    max: int

    def min_words(self) -> int:
        """Number of mnemonic words for the smallest accepted size."""
        return self.min // 32 * 3

    def max_words(self) -> int:
        """Number of mnemonic words for the largest accepted size."""
        return self.max // 32 * 3


class Key(abc.ABC):
    """A private key of one network that can derive, sign and verify."""

    @abc.abstractmethod
    def network(self) -> Network:
        """The network this key belongs to."""

    @abc.abstractmethod
    def pub_key(self, path: KeyPath) -> bytes:
        """Public key at a derivation path."""

    @abc.abstractmethod
    def sign(self, data: bytes, path: KeyPath) -> bytes:
        """Sign data with the key at a derivation path."""

    @abc.abstractmethod
    def verify(self, data: bytes, signature: bytes, path: KeyPath) -> bool:
        """Check a signature with the key at a derivation path."""


class KeyFactory(abc.ABC):
    """Creates key data from a seed and keys from stored key data."""

    @abc.abstractmethod
    def network(self) -> Network:
        """The network whose keys this factory makes."""

    @abc.abstractmethod
    def seed_size(self) -> SeedSize:
        """Entropy sizes the network accepts."""

    @abc.abstractmethod
    def key_from_data(self, data: bytes) -> Key:
        """Load a key from data made by :meth:`key_data_from_seed`."""

    @abc.abstractmethod
    def key_data_from_seed(self, seed: bytes) -> bytes:
        """Serialised key data for a 64-byte seed."""


def _seed_bytes(seed: bytes) -> bytes:
    raw = bytes(seed)
    if len(raw) != SEED_SIZE:
        raise MnemonicError(f"invalid seed size {len(raw)}, expected {SEED_SIZE}")
    return raw


def _key_error(error: Bip32Error) -> KeyOperationError:
    if error.kind is Bip32ErrorKind.INVALID_SIGNATURE:
        return InvalidSignatureSizeError(*error.values)
    return KeyOperationError.invalid_key_data(error)