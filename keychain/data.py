"""Versioned serialisation of the data stored in an encrypted keychain."""

from __future__ import annotations

import base64
import binascii
import enum
import json
from dataclasses import dataclass, field
from typing import Any

from .errors import DataError
from .network import Network


class Language(enum.IntEnum):
    """Mnemonic dictionary languages."""

    ENGLISH = 0
    FRENCH = 1
    JAPANESE = 2
    KOREAN = 3
    CHINESE_SIMPLIFIED = 4
    CHINESE_TRADITIONAL = 5
    ITALIAN = 6
    SPANISH = 7

    @classmethod
    def default(cls) -> Language:
        return cls.ENGLISH

    @property
    def wire_name(self) -> str:
        """Name used for the language in stored data."""
        return _WIRE_NAMES[self]

    @classmethod
    def from_wire_name(cls, name: str) -> Language:
        try:
            return _BY_WIRE_NAME[name]
        except KeyError:
            raise ValueError(f"unknown language {name!r}") from None


_WIRE_NAMES = {
    Language.ENGLISH: "English",
    Language.FRENCH: "French",
    Language.JAPANESE: "Japanese",
    Language.KOREAN: "Korean",
    Language.CHINESE_SIMPLIFIED: "ChineseSimplified",
    Language.CHINESE_TRADITIONAL: "ChineseTraditional",
    Language.ITALIAN: "Italian",
    Language.SPANISH: "Spanish",
}
_BY_WIRE_NAME = {name: language for language, name in _WIRE_NAMES.items()}


class _Version(enum.IntEnum):
    V1 = 1
    V2 = 2


@dataclass
class WalletData:
    """Seed or mnemonic a keychain was made from, and its per-network key data."""

    seed: bytes | None = None
    mnemonic: str | None = None
    dictionary: Language | None = None
    keys: dict[Network, bytes] = field(default_factory=dict)


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _b64decode(value: Any, name: str) -> bytes:
    if not isinstance(value, str):
        raise DataError(f"invalid type for `{name}`: expected a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise DataError(f"invalid base64 in `{name}`: {exc}") from exc


def _dumps(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _loads_object(raw: bytes, what: str) -> dict[str, Any]:
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise DataError(str(exc)) from exc
    if not isinstance(value, dict):
        raise DataError(f"invalid type: expected struct {what}")
    return value


def _field(obj: dict[str, Any], name: str) -> Any:
    try:
        return obj[name]
    except KeyError:
        raise DataError(f"missing field `{name}`") from None


def _parse_keys(value: Any) -> dict[Network, bytes]:
    if not isinstance(value, list):
        raise DataError("invalid type for `keys`: expected a sequence")
    keys: dict[Network, bytes] = {}
    for entry in value:
        if not isinstance(entry, list) or len(entry) != 2:
            raise DataError("invalid key entry: expected a pair of network and key")
        code, key = entry
        if type(code) is not int:
            raise DataError(f"invalid network {code!r}")
        try:
            network = Network(code)
        except ValueError as exc:
            raise DataError(str(exc)) from exc
        keys[network] = _b64decode(key, "keys")
    return keys


def encode_wallet_data(data: WalletData) -> bytes:
    """Serialise wallet data in the current format version."""
    inner = {
        "seed": None if data.seed is None else _b64encode(data.seed),
        "mnemonic": data.mnemonic,
        "dictionary": None if data.dictionary is None else data.dictionary.wire_name,
        "keys": [[network.code, _b64encode(key)] for network, key in data.keys.items()],
    }
    return _dumps({"version": int(_Version.V2), "data": _b64encode(_dumps(inner))})


def decode_wallet_data(raw: bytes) -> WalletData:
    """Parse serialised wallet data of any supported format version."""
    outer = _loads_object(raw, "VersionedData")
    version = _field(outer, "version")
    if type(version) is not int or version not in {v.value for v in _Version}:
        raise DataError(f"invalid value: {version!r}, expected one of 1, 2")
    inner = _loads_object(_b64decode(_field(outer, "data"), "data"), "WalletData")
    keys = _parse_keys(_field(inner, "keys"))
    if version == _Version.V1:
        return WalletData(keys=keys)

    seed_value = _field(inner, "seed")
    seed = None if seed_value is None else _b64decode(seed_value, "seed")

    mnemonic = inner.get("mnemonic")
    if mnemonic is not None and not isinstance(mnemonic, str):
        raise DataError("invalid type for `mnemonic`: expected a string")

    dictionary_name = inner.get("dictionary")
    dictionary = None
    if dictionary_name is not None:
        if not isinstance(dictionary_name, str):
            raise DataError("invalid type for `dictionary`: expected a string")
        try:
            dictionary = Language.from_wire_name(dictionary_name)
        except ValueError as exc:
            raise DataError(str(exc)) from exc

    return WalletData(seed=seed, mnemonic=mnemonic, dictionary=dictionary, keys=keys)