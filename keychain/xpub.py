"""Public keys on the secp256k1 curve and signature verification."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Optional, Tuple

from Crypto.Hash import keccak

from .errors import Bip32Error, Bip32ErrorKind

SIGNATURE_SIZE = 64
MESSAGE_SIZE = 32
PUBLIC_KEY_SIZE = 65
COMPRESSED_PUBLIC_KEY_SIZE = 33

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_Point = Optional[Tuple[int, int]]
_G: _Point = (_GX, _GY)


def _point_add(first: _Point, second: _Point) -> _Point:
    if first is None:
        return second
    if second is None:
        return first
    x1, y1 = first
    x2, y2 = second
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return (x3, y3)


def _point_mul(scalar: int, point: _Point) -> _Point:
    result: _Point = None
    for bit in bin(scalar % _N)[2:]:
        result = _point_add(result, result)
        if bit == "1":
            result = _point_add(result, point)
    return result


def _generator_mul(scalar: int) -> _Point:
    return _point_mul(scalar, _G)


def _message_scalar(data: bytes) -> int:
    digest = keccak.new(digest_bits=256, data=bytes(data)).digest()
    return int.from_bytes(digest, "big") % _N


@dataclass(frozen=True)
class XPub:
    """A secp256k1 public key given by its affine coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < _P and 0 <= self.y < _P):
            raise ValueError("coordinates out of field range")
        if (self.y * self.y - self.x ** 3 - 7) % _P != 0:
            raise ValueError("point is not on the secp256k1 curve")

    def serialize(self) -> bytes:
        """Uncompressed 65-byte form: 0x04, x, y."""
        return b"\x04" + self.x.to_bytes(32, "big") + self.y.to_bytes(32, "big")

    def serialize_compressed(self) -> bytes:
        """Compressed 33-byte form: parity prefix and x."""
        prefix = b"\x03" if self.y & 1 else b"\x02"
        return prefix + self.x.to_bytes(32, "big")

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Check a 64-byte r||s signature over the Keccak-256 hash of data."""
        signature = bytes(signature)
        if len(signature) != SIGNATURE_SIZE:
            raise Bip32Error(
                Bip32ErrorKind.INVALID_SIGNATURE, len(signature), SIGNATURE_SIZE
            )
        z = _message_scalar(data)
        r = int.from_bytes(signature[:32], "big") % _N
        s = int.from_bytes(signature[32:], "big") % _N
        if r == 0 or s == 0:
            return False
        inverse = pow(s, -1, _N)
        point = _point_add(
            _generator_mul(z * inverse % _N),
            _point_mul(r * inverse % _N, (self.x, self.y)),
        )
        if point is None:
            return False
        return point[0] % _N == r

    def sha256(self) -> bytes:
        """SHA-256 of the uncompressed form."""
        return hashlib.sha256(self.serialize()).digest()

    def compressed_sha256(self) -> bytes:
        """SHA-256 of the compressed form."""
        return hashlib.sha256(self.serialize_compressed()).digest()