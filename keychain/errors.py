"""Exceptions raised by the keychain and its key derivation code."""

from __future__ import annotations

import enum
from typing import Any


class KeychainError(Exception):
    """Base class of every error raised by the keychain."""


class WrongPasswordError(KeychainError):
    """Encrypted data could not be opened with the given password."""

    def __init__(self) -> None:
        super().__init__("Wrong password")


class NotEnoughDataError(KeychainError):
    """Encrypted data is too short to hold a keychain."""

    def __init__(self) -> None:
        super().__init__("Not enough data to load keychain")


class SeedIsNotSavedError(KeychainError):
    """Neither a seed nor a mnemonic is stored in the keychain data."""

    def __init__(self) -> None:
        super().__init__("Seed is not saved")


class CantCalculateSeedSizeError(KeychainError):
    """The networks' seed size ranges have no common value."""

    def __init__(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Can't calculate seed size for networks: min({minimum}), max({maximum})"
        )


class InvalidSeedSizeError(KeychainError):
    """A seed has the wrong length."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Invalid seed size {size}")


class KeyDoesNotExistError(KeychainError):
    """The keychain holds no key for a network."""

    def __init__(self, network: Any) -> None:
        self.network = network
        super().__init__(f"Key for {network} doesn't exist")


class KeyAlreadyExistError(KeychainError):
    """The keychain already holds a key for a network."""

    def __init__(self, network: Any) -> None:
        self.network = network
        super().__init__(f"Key for {network} already exist in keychain")


class NetworkIsNotSupportedError(KeychainError):
    """No key factory is registered for a network."""

    def __init__(self, network: Any) -> None:
        self.network = network
        super().__init__(f"Network {network} is not supported")


class DataError(KeychainError):
    """Stored keychain data could not be parsed or serialised."""

    def __init__(self, detail: Any) -> None:
        self.detail = detail
        super().__init__(f"Data parsing error {detail}")


class NetworkKeyError(KeychainError):
    """A key operation failed for a particular network."""

    def __init__(self, network: Any, error: Exception) -> None:
        self.network = network
        self.error = error
        super().__init__(f"Key error {error} for network {network}")


class MnemonicError(KeychainError):
    """A mnemonic phrase or its entropy is not acceptable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Mnemonic error {reason}")

    @classmethod
    def too_short(cls, size: int, minimum: int) -> MnemonicError:
        return cls(f"Mnemonic {size} too short. Min: {minimum}")

    @classmethod
    def too_long(cls, size: int, maximum: int) -> MnemonicError:
        return cls(f"Mnemonic {size} too long. Max: {maximum}")

    @classmethod
    def wrong_number_of_words(cls, count: int) -> MnemonicError:
        return cls(f"Wrong number of words {count}")

    @classmethod
    def unsupported_word(cls, word: str) -> MnemonicError:
        return cls(f"Unsupported word found '{word}'. Maybe wrong dictionary?")

    @classmethod
    def invalid_entropy_size(cls, size: int) -> MnemonicError:
        return cls(f"Invalid entropy size {size}")


class KeyPathError(KeychainError):
    """A key path is malformed or not accepted by a network."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Key path error {reason}")

    @classmethod
    def invalid_parts_count(cls, count: int, expected: int) -> KeyPathError:
        return cls(f"Invalid parts count {count}, expected: {expected}")

    @classmethod
    def invalid_purpose(cls, purpose: int, expected: int) -> KeyPathError:
        return cls(f"Invalid purpose {purpose}, expected: {expected}")

    @classmethod
    def invalid_path_marker(cls, marker: str) -> KeyPathError:
        return cls(f"Invalid path marker '{marker}', expected: 'm'")

    @classmethod
    def invalid_coin(cls, coin: int, expected: int) -> KeyPathError:
        return cls(f"Invalid coin {coin}, expected: {expected}")

    @classmethod
    def invalid_account(cls, account: int) -> KeyPathError:
        return cls(f"Invalid account {account}")

    @classmethod
    def invalid_change(cls, change: int) -> KeyPathError:
        return cls(f"Invalid change {change}")

    @classmethod
    def invalid_address(cls, address: int) -> KeyPathError:
        return cls(f"Invalid address {address}")

    @classmethod
    def empty_value_at(cls, index: int) -> KeyPathError:
        return cls(f"Found empty value at index: {index}")

    @classmethod
    def parse_error_at(cls, index: int, detail: str) -> KeyPathError:
        return cls(f"Can't parse number at index {index}, error: {detail}")


class KeyOperationError(KeychainError):
    """A network key could not be loaded or used."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_key_size(cls, size: int, expected: int) -> KeyOperationError:
        return cls(f"Invalid key size {size}, accepts {expected}")

    @classmethod
    def invalid_key_data(cls, cause: Exception) -> KeyOperationError:
        error = cls(f"Invalid key data: {cause}")
        error.__cause__ = cause
        return error


class InvalidSignatureSizeError(KeyOperationError):
    """A signature has the wrong length."""

    def __init__(self, size: int, expected: int) -> None:
        self.size = size
        self.expected = expected
        super().__init__(f"Invalid signature size {size}, accepts {expected}")


class SignError(KeyOperationError):
    """Signing data failed."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Sign error: {cause}")
        self.__cause__ = cause


class Bip32ErrorKind(enum.Enum):
    """Kinds of failure of extended key operations; values are message templates."""

    INVALID_SIGNATURE = "Invalid signature {}, expected {}"
    INVALID_PUBLIC_POINT = "Invalid public key"
    INVALID_PRIVATE_SCALAR = "Invalid secret key"
    INVALID_RECOVERY_ID = "Invalid recovery id"
    INVALID_MESSAGE = "Invalid message"
    INVALID_INPUT_LENGTH = "Invalid input length"
    TWEAK_OUT_OF_RANGE = "Tweak out of range"
    INVALID_DATA_SIZE = "Invalid key data size {}, expected {}"
    INVALID_ENTROPY_SIZE = "Invalid entropy size {}"
    DERIVE_DEPTH_TOO_BIG = "Derive depth is too big"
    INTERNAL_ERROR = "Unknown internal error"


class Bip32Error(KeychainError):
    """An extended key operation failed."""

    def __init__(self, kind: Bip32ErrorKind, *values: int) -> None:
        expected = kind.value.count("{}")
        if len(values) != expected:
            raise TypeError(f"{kind.name} takes {expected} value(s), got {len(values)}")
        self.kind = kind
        self.values = values
        super().__init__(kind.value.format(*values))