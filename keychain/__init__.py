"""Password-encrypted keychain with BIP32/BIP44 key derivation for Bitcoin and Ethereum."""

__version__ = "0.1.0"