"""Extended private keys: BIP32 derivation and signing on secp256k1."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field
from typing import Iterator

from Crypto.Hash import RIPEMD160

from .errors import Bip32Error, Bip32ErrorKind
from .xpub import XPub, _N, _generator_mul, _message_scalar

HMAC_KEY = b"Bitcoin seed"
BIP44_SOFT_UPPER_BOUND = 0x80000000

DEPTH_SIZE = 1
FINGERPRINT_SIZE = 4
INDEX_SIZE = 4
CHAIN_CODE_SIZE = 32
KEY_SIZE = 32
CHECKSUM_SIZE = 4
KEY_DATA_SIZE = (
    DEPTH_SIZE + FINGERPRINT_SIZE + INDEX_SIZE + CHAIN_CODE_SIZE + KEY_SIZE + CHECKSUM_SIZE
)

_FINGERPRINT_START = DEPTH_SIZE
_INDEX_START = _FINGERPRINT_START + FINGERPRINT_SIZE
_CHAIN_CODE_START = _INDEX_START + INDEX_SIZE
_KEY_START = _CHAIN_CODE_START + CHAIN_CODE_SIZE
_CHECKSUM_START = _KEY_START + KEY_SIZE

_MAX_DEPTH = 0xFF
_MAX_INDEX = 0xFFFFFFFF


def _checksum(body: bytes) -> bytes:
    once = hashlib.sha256(body).digest()
    return hashlib.sha256(once).digest()[:CHECKSUM_SIZE]


def _parse_secret(raw: bytes) -> int:
    if len(raw) != KEY_SIZE:
        raise Bip32Error(Bip32ErrorKind.INVALID_INPUT_LENGTH)
    value = int.from_bytes(raw, "big")
    if not 0 < value < _N:
        raise Bip32Error(Bip32ErrorKind.INVALID_SECRET_KEY)
    return value


def _nonces(secret: int, message: int) -> Iterator[int]:
    """Deterministic nonce candidates (RFC 6979, HMAC-SHA256)."""
    seed = secret.to_bytes(32, "big") + message.to_bytes(32, "big")
    k = bytes(32)
    v = b"\x01" * 32

    def mac(key: bytes, payload: bytes) -> bytes:
        return hmac.new(key, payload, hashlib.sha256).digest()

    k = mac(k, v + b"\x00" + seed)
    v = mac(k, v)
    k = mac(k, v + b"\x01" + seed)
    v = mac(k, v)
    while True:
        v = mac(k, v)
        candidate = int.from_bytes(v, "big")
        if 0 < candidate < _N:
            yield candidate
        k = mac(k, v + b"\x00")
        v = mac(k, v)


@dataclass(frozen=True)
class XPrv:
    """A BIP32 extended private key."""

    key: int = field(repr=False)
    chaincode: bytes
    parent_fingerprint: bytes = bytes(FINGERPRINT_SIZE)
    depth: int = 0
    index: int = 0

    @classmethod
    def from_data(cls, data: bytes) -> XPrv:
        """Load a key from its 77-byte serialised form."""
        data = bytes(data)
        if len(data) != KEY_DATA_SIZE:
            raise Bip32Error(Bip32ErrorKind.INVALID_DATA_SIZE, len(data), KEY_DATA_SIZE)
        if data[_CHECKSUM_START:] != _checksum(data[:_CHECKSUM_START]):
            raise Bip32Error(Bip32ErrorKind.INVALID_SECRET_KEY)
        return cls(
            key=_parse_secret(data[_KEY_START:_CHECKSUM_START]),
            chaincode=data[_CHAIN_CODE_START:_KEY_START],
            parent_fingerprint=data[_FINGERPRINT_START:_INDEX_START],
            depth=data[0],
            index=int.from_bytes(data[_INDEX_START:_CHAIN_CODE_START], "big"),
        )

    @classmethod
    def from_seed(cls, seed: bytes) -> XPrv:
        """Create the master key of a seed."""
        entropy = hmac.new(HMAC_KEY, bytes(seed), hashlib.sha512).digest()
        return cls(
            key=_parse_secret(entropy[:KEY_SIZE]),
            chaincode=entropy[KEY_SIZE:KEY_SIZE + CHAIN_CODE_SIZE],
        )

    def public(self) -> XPub:
        """The matching public key."""
        point = _generator_mul(self.key)
        assert point is not None
        return XPub(*point)

    def serialize(self) -> bytes:
        """Depth, parent fingerprint, index, chain code, key and checksum."""
        body = (
            bytes([self.depth])
            + self.parent_fingerprint
            + self.index.to_bytes(INDEX_SIZE, "big")
            + self.chaincode
            + self.key.to_bytes(KEY_SIZE, "big")
        )
        return body + _checksum(body)

    def sign(self, data: bytes) -> bytes:
        """Sign the Keccak-256 hash of data; returns r, s and a recovery byte."""
        message = _message_scalar(data)
        for nonce in _nonces(self.key, message):
            point = _generator_mul(nonce)
            assert point is not None
            r = point[0] % _N
            if r == 0:
                continue
            s = pow(nonce, -1, _N) * (message + r * self.key) % _N
            if s == 0:
                continue
            recovery = (2 if point[0] >= _N else 0) | (point[1] & 1)
            if s > _N // 2:
                s = _N - s
                recovery ^= 1
            break
        if recovery not in (0, 1):
            raise Bip32Error(Bip32ErrorKind.INVALID_RECOVERY_ID)
        return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([recovery])

    def derive(self, index: int) -> XPrv:
        """Derive a child key; indexes from 2**31 up are hardened."""
        if not 0 <= index <= _MAX_INDEX:
            raise ValueError(f"index {index} does not fit in 32 bits")
        if self.depth == _MAX_DEPTH:
            raise Bip32Error(Bip32ErrorKind.DERIVE_DEPTH_TOO_BIG)
        hardened = index >= BIP44_SOFT_UPPER_BOUND
        index_bytes = index.to_bytes(INDEX_SIZE, "big")
        if hardened:
            payload = b"\x00" + self.key.to_bytes(KEY_SIZE, "big") + index_bytes
        else:
            payload = self.public().serialize_compressed() + index_bytes
        entropy = hmac.new(self.chaincode, payload, hashlib.sha512).digest()

        chaincode = entropy[KEY_SIZE:KEY_SIZE + CHAIN_CODE_SIZE]
        tweak = _parse_secret(entropy[:KEY_SIZE])
        child = (self.key + tweak) % _N
        if child == 0:
            if (hardened and index < _MAX_INDEX) or (
                not hardened and index < BIP44_SOFT_UPPER_BOUND
            ):
                return self.derive(index + 1)
            raise Bip32Error(Bip32ErrorKind.TWEAK_OUT_OF_RANGE)

        digest = RIPEMD160.new(self.public().compressed_sha256()).digest()
        return XPrv(
            key=child,
            chaincode=chaincode,
            parent_fingerprint=digest[:FINGERPRINT_SIZE],
            depth=self.depth + 1,
            index=index,
        )