"""A set of loaded network keys that can derive, sign and verify."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator

from .errors import KeyDoesNotExistError, KeychainError, NetworkKeyError
from .key_factory import Key
from .key_path import KeyPath
from .network import Network


@contextmanager
def _network_errors(network: Network) -> Iterator[None]:
    """Re-raise key failures as errors tied to a network."""
    try:
        yield
    except NetworkKeyError:
        raise
    except KeychainError as exc:
        raise NetworkKeyError(network, exc) from exc


class Keychain:
    """Keys of several networks, at most one per network."""

    def __init__(self, keys: Iterable[Key] = ()) -> None:
        self._keys: dict[Network, Key] = {key.network(): key for key in keys}

    def has_network(self, network: Network) -> bool:
        """Whether a key for the network is loaded."""
        return network in self._keys

    def networks(self) -> list[Network]:
        """Networks that have a key."""
        return list(self._keys)

    def pub_key(self, network: Network, path: KeyPath) -> bytes:
        """Public key of a network at a derivation path."""
        key = self._key(network)
        with _network_errors(network):
            return key.pub_key(path)

    def sign(self, network: Network, data: bytes, path: KeyPath) -> bytes:
        """Sign data with a network's key at a derivation path."""
        key = self._key(network)
        with _network_errors(network):
            return key.sign(data, path)

    def verify(self, network: Network, data: bytes, signature: bytes, path: KeyPath) -> bool:
        """Check a signature with a network's key at a derivation path."""
        key = self._key(network)
        with _network_errors(network):
            return key.verify(data, signature, path)

    def _key(self, network: Network) -> Key:
        try:
            return self._keys[network]
        except KeyError:
            raise KeyDoesNotExistError(network) from None