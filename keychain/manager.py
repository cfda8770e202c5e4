"""Creation, encryption, loading and upgrading of stored keychains."""

from __future__ import annotations

import hashlib
import unicodedata
from typing import Iterable

from . import crypt
from .bitcoin import BitcoinKeyFactory
from .data import Language, WalletData, decode_wallet_data, encode_wallet_data
from .entropy import Entropy, OsEntropy
from .errors import (
    CantCalculateSeedSizeError,
    InvalidSeedSizeError,
    KeyAlreadyExistError,
    MnemonicError,
    NetworkIsNotSupportedError,
    SeedIsNotSavedError,
)
from .ethereum import EthereumKeyFactory
from .key_factory import SEED_SIZE, Key, KeyFactory
from .keyring import Keychain, _network_errors
from .network import Network

_USIZE_MAX = (1 << 64) - 1
_MNEMONIC_WORD_COUNTS = frozenset({12, 15, 18, 21, 24})
_MNEMONIC_ROUNDS = 2048


def all_factories() -> list[KeyFactory]:
    """A factory for every supported network."""
    return [EthereumKeyFactory(), BitcoinKeyFactory()]


def _calculate_seed_size(factories: Iterable[KeyFactory]) -> int:
    minimum, maximum = 0, _USIZE_MAX
    for factory in factories:
        size = factory.seed_size()
        minimum = max(minimum, size.min)
        maximum = min(maximum, size.max)
    if minimum == 0 or maximum < minimum:
        raise CantCalculateSeedSizeError(minimum, maximum)
    return minimum


def _seed_from_mnemonic(mnemonic: str, size: int, language: Language) -> bytes:
    words = mnemonic.split()
    count = len(words)
    if count not in _MNEMONIC_WORD_COUNTS:
        raise MnemonicError.wrong_number_of_words(count)
    size_words = size // 32 * 3
    if size_words > count:
        raise MnemonicError.too_short(count, size_words)
    if size_words < count:
        raise MnemonicError.too_long(count, size_words)
    separator = "\u3000" if language is Language.JAPANESE else " "
    phrase = unicodedata.normalize("NFKD", separator.join(words))
    salt = unicodedata.normalize("NFKD", "mnemonic")
    return hashlib.pbkdf2_hmac(
        "sha512", phrase.encode("utf-8"), salt.encode("utf-8"), _MNEMONIC_ROUNDS, SEED_SIZE
    )


class KeychainManager:
    """Makes encrypted keychain data and opens it with the known key factories."""

    def __init__(
        self, factories: Iterable[KeyFactory] | None = None, entropy: Entropy | None = None
    ) -> None:
        chosen = list(all_factories() if factories is None else factories)
        self._seed_size = _calculate_seed_size(chosen)
        self._entropy = entropy if entropy is not None else OsEntropy()
        self._factories: dict[Network, KeyFactory] = {
            factory.network(): factory for factory in chosen
        }

    @classmethod
    def with_networks(cls, networks: Iterable[Network]) -> KeychainManager:
        """A manager for the supported networks among those given."""
        wanted = set(networks)
        return cls([factory for factory in all_factories() if factory.network() in wanted])

    @property
    def seed_size(self) -> int:
        """Entropy size, in bits, accepted by every registered network."""
        return self._seed_size

    def has_network(self, network: Network) -> bool:
        return network in self._factories

    def get_key_factory(self, network: Network) -> KeyFactory | None:
        return self._factories.get(network)

    def keychain_data_from_seed(self, seed: bytes, password: str) -> bytes:
        """Encrypted keychain data with keys for every network, made from a seed."""
        return self._new_keychain_data(bytes(seed), password)

    def keychain_from_data(self, data: bytes, password: str) -> Keychain:
        """Open encrypted data; keys of networks without a factory are left out."""
        wallet = self._load(data, password)
        keys: list[Key] = []
        for network, key_data in wallet.keys.items():
            factory = self._factories.get(network)
            if factory is None:
                continue
            with _network_errors(network):
                keys.append(factory.key_from_data(key_data))
        return Keychain(keys)

    def change_password(self, encrypted: bytes, old_password: str, new_password: str) -> bytes:
        """Re-encrypt data under a new password."""
        decrypted = crypt.decrypt(encrypted, old_password)
        return crypt.encrypt(decrypted, new_password, self._entropy)

    def add_network(self, encrypted: bytes, password: str, network: Network) -> bytes:
        """Add a key for a network to encrypted data, from its stored seed or mnemonic."""
        factory = self._factories.get(network)
        if factory is None:
            raise NetworkIsNotSupportedError(network)
        wallet = self._load(encrypted, password)
        if network in wallet.keys:
            raise KeyAlreadyExistError(network)
        seed = self._seed_from_data(wallet.seed, wallet.mnemonic, wallet.dictionary)
        with _network_errors(network):
            wallet.keys[network] = factory.key_data_from_seed(seed)
        return crypt.encrypt(encode_wallet_data(wallet), password, self._entropy)

    def retrieve_mnemonic(self, encrypted: bytes, password: str) -> tuple[str, Language]:
        """The mnemonic stored in encrypted data and its language."""
        wallet = self._load(encrypted, password)
        if wallet.mnemonic is None or wallet.dictionary is None:
            raise SeedIsNotSavedError()
        return wallet.mnemonic, wallet.dictionary

    def get_keys_data(self, encrypted: bytes, password: str) -> list[tuple[Network, bytes]]:
        """Raw key data of every network stored in encrypted data."""
        return list(self._load(encrypted, password).keys.items())

    def _seed_from_data(
        self, seed: bytes | None, mnemonic: str | None, language: Language | None
    ) -> bytes:
        if seed is not None:
            if len(seed) != SEED_SIZE:
                raise InvalidSeedSizeError(len(seed))
            return bytes(seed)
        if mnemonic is None or language is None:
            raise SeedIsNotSavedError()
        return _seed_from_mnemonic(mnemonic, self._seed_size, language)

    def _new_keychain_data(self, seed: bytes, password: str) -> bytes:
        calculated = self._seed_from_data(seed, None, None)
        keys: dict[Network, bytes] = {}
        for network, factory in self._factories.items():
            with _network_errors(network):
                keys[network] = factory.key_data_from_seed(calculated)
        wallet = WalletData(seed=seed, keys=keys)
        return crypt.encrypt(encode_wallet_data(wallet), password, self._entropy)

    @staticmethod
    def _load(data: bytes, password: str) -> WalletData:
        return decode_wallet_data(crypt.decrypt(data, password))