"""Password-based authenticated encryption of keychain data."""

from __future__ import annotations

import hashlib

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .entropy import Entropy
from .errors import NotEnoughDataError, WrongPasswordError

ITERATIONS = 19_162
SALT_SIZE = 32
NONCE_SIZE = 12
KEY_SIZE = 32
TAG_SIZE = 16
METADATA_SIZE = SALT_SIZE + NONCE_SIZE + TAG_SIZE

_NONCE_START = SALT_SIZE
_TAG_START = _NONCE_START + NONCE_SIZE
_ENCRYPTED_START = _TAG_START + TAG_SIZE


def _derive_key(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(
        "sha512", password.encode("utf-8"), salt, ITERATIONS, KEY_SIZE
    )


def encrypt(data: bytes, password: str, entropy: Entropy) -> bytes:
    """Encrypt data; the result is salt, nonce, tag and ciphertext in that order."""
    salt = entropy.random_bytes(SALT_SIZE)
    nonce = entropy.random_bytes(NONCE_SIZE)
    key = _derive_key(password, salt)
    sealed = ChaCha20Poly1305(key).encrypt(nonce, bytes(data), None)
    ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
    return salt + nonce + tag + ciphertext


def decrypt(data: bytes, password: str) -> bytes:
    """Decrypt what :func:`encrypt` produced."""
    data = bytes(data)
    if len(data) <= METADATA_SIZE:
        raise NotEnoughDataError()
    salt = data[:_NONCE_START]
    nonce = data[_NONCE_START:_TAG_START]
    tag = data[_TAG_START:_ENCRYPTED_START]
    ciphertext = data[_ENCRYPTED_START:]
    key = _derive_key(password, salt)
    try:
        return ChaCha20Poly1305(key).decrypt(nonce, ciphertext + tag, None)
    except InvalidTag:
        raise WrongPasswordError() from None