# keychain

A library that keeps private keys for several networks in one
password-encrypted blob, and uses those keys to derive public keys, sign data
and check signatures along BIP44-style key paths.

Keys are created for Bitcoin and Ethereum (secp256k1, BIP32 derivation).
Key paths for Cardano can be built and validated, but no Cardano keys are
made.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `keychain.manager`
  - `KeychainManager(factories=None, entropy=None)` uses the factories from
    `all_factories()` (Ethereum and Bitcoin) unless given others. It fails with
    `CantCalculateSeedSizeError` when the factories' seed sizes do not overlap.
  - `KeychainManager.with_networks(networks)` keeps only the supported
    networks among those given.
  - `keychain_data_from_seed(seed, password)` makes encrypted data holding
    the 64-byte seed and key data for every registered network.
  - `keychain_from_data(data, password)` opens that data and returns a
    `Keychain`. Networks that have no registered factory are skipped.
  - `change_password`, `add_network`, `retrieve_mnemonic` and
    `get_keys_data` work on encrypted data. `add_network` makes the new key
    from the stored seed, or from a stored mnemonic and language.
  - `has_network`, `get_key_factory` and `seed_size` describe the manager.
- `keychain.keyring.Keychain` holds the opened keys, one per network.
  - `has_network` and `networks` list what is loaded.
  - `pub_key(network, path)` returns the 65-byte uncompressed public key.
  - `sign(network, data, path)` signs the Keccak-256 hash of the data. It
    returns 65 bytes: `r`, `s` and a recovery byte.
  - `verify(network, data, signature, path)` takes the 64-byte `r || s`
    part of a signature.
  - Failures of a key are raised as `NetworkKeyError`. A missing network is
    raised as `KeyDoesNotExistError`.
- `keychain.network.Network` identifies a network by its 32-bit coin type:
  `Network.BITCOIN`, `Network.ETHEREUM` and `Network.CARDANO`.
- `keychain.key_path`
  - `parse_key_path` parses text such as `m/44'/60'/0'/0/0`, where `'` marks
    a hardened index.
  - `str(KeyPath)` prints a path in that form.
- Network-specific path builders:
  - `keychain.bitcoin`: `bip44`, `bip49` and `bip84`, each taking
    `(testnet, account, change, address)`.
  - `keychain.ethereum`: `key_path` and `metamask_key_path`, each taking
    `(account)`.
  - `keychain.cardano`: `key_path(account, change, address)`.
- `keychain.bitcoin.BitcoinKeyFactory` and
  `keychain.ethereum.EthereumKeyFactory` implement the abstract
  `keychain.key_factory.KeyFactory`, whose keys implement
  `keychain.key_factory.Key`. Other factories can be passed to
  `KeychainManager`.
- `keychain.xprv.XPrv` and `keychain.xpub.XPub` are extended private keys
  and public keys on secp256k1. `XPrv` offers `from_seed`, `from_data`,
  `derive`, `sign` and `serialize`. `XPub` offers `verify`.
- `keychain.crypt` provides `encrypt(data, password, entropy)` and
  `decrypt(data, password)`. The key comes from PBKDF2-HMAC-SHA512 with
  19,162 iterations. The cipher is ChaCha20-Poly1305. The output is salt,
  nonce, tag and ciphertext, in that order.
- `keychain.data` serialises `WalletData` as versioned JSON with base64
  fields: `encode_wallet_data` and `decode_wallet_data`. Both version 1 and
  version 2 data can be read.
- Small helpers:
  - `keychain.hexcodec`: `encode` and `decode`.
  - `keychain.bits`: `BitWriterBy11` and `BitReaderBy11`, which pack and
    unpack 11-bit values.
  - `keychain.securemem.zero` wipes a writable buffer.
  - `keychain.entropy.OsEntropy` supplies random bytes.

## Example

```python
import os

from keychain.ethereum import key_path
from keychain.manager import KeychainManager
from keychain.network import Network

manager = KeychainManager()
password = "password"

seed = os.urandom(64)
encrypted = manager.keychain_data_from_seed(seed, password)

keychain = manager.keychain_from_data(encrypted, password)
path = key_path(0)

public_key = keychain.pub_key(Network.ETHEREUM, path)
signature = keychain.sign(Network.ETHEREUM, b"message", path)
assert keychain.verify(Network.ETHEREUM, b"message", signature[:64], path)
```

A wrong password raises `keychain.errors.WrongPasswordError`. Data too short
to hold a keychain raises `NotEnoughDataError`. Every error the library raises
derives from `keychain.errors.KeychainError`.

## What it does not do

- It does not generate mnemonic phrases and carries no BIP39 word lists.
  New keychain data is made only from a seed. A mnemonic already stored in
  the data is turned into a seed by word count and PBKDF2 alone; its words
  and checksum are not checked against a dictionary.
- It makes no Cardano keys. Only Cardano key paths are available.
- There is no command-line program and no storage of its own. The encrypted
  data is returned as bytes for the caller to keep.