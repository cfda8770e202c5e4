import pytest

from keychain.errors import (
    InvalidSignatureSizeError,
    KeyOperationError,
    KeyPathError,
    MnemonicError,
)
from keychain.ethereum import (
    BIP44_COIN_TYPE,
    EthereumKey,
    EthereumKeyFactory,
    key_path,
    metamask_key_path,
)
from keychain.key_factory import SeedSize
from keychain.key_path import BIP44_PURPOSE, BIP44_SOFT_UPPER_BOUND, KeyPath
from keychain.network import Network
from keychain.xprv import KEY_DATA_SIZE

SEED = bytes(range(100, 164))


@pytest.fixture(scope="module")
def factory():
    return EthereumKeyFactory()


@pytest.fixture(scope="module")
def key_data(factory):
    return factory.key_data_from_seed(SEED)


@pytest.fixture(scope="module")
def key(factory, key_data):
    return factory.key_from_data(key_data)


def test_key_path_fields():
    assert key_path(0) == KeyPath(BIP44_PURPOSE, BIP44_COIN_TYPE, 0x80000000, 0, 0)


def test_key_path_text():
    assert str(key_path(0)) == "m/44'/60'/0'/0/0"


def test_metamask_path_uses_address():
    path = metamask_key_path(5)
    assert path.account == BIP44_SOFT_UPPER_BOUND
    assert path.address == 5
    assert metamask_key_path(0) == key_path(0)


def test_coin_matches_network():
    assert Network(key_path(1).coin) == Network.ETHEREUM


@pytest.mark.parametrize("builder", [key_path, metamask_key_path])
def test_hardened_account_rejected(builder):
    with pytest.raises(KeyPathError):
        builder(0x80000000)


@pytest.mark.parametrize("builder", [key_path, metamask_key_path])
def test_negative_account_rejected(builder):
    with pytest.raises(ValueError):
        builder(-1)


def test_factory_description(factory, key):
    assert factory.network() == Network.ETHEREUM
    assert key.network() == Network.ETHEREUM
    assert factory.seed_size() == SeedSize(128, 256)


def test_key_data_round_trip(key, key_data):
    assert len(key_data) == KEY_DATA_SIZE
    reloaded = EthereumKey.from_data(key_data)
    assert reloaded.pub_key(key_path(0)) == key.pub_key(key_path(0))


def test_wrong_seed_size(factory):
    with pytest.raises(MnemonicError):
        factory.key_data_from_seed(bytes(65))


def test_corrupted_key_data(factory, key_data):
    corrupted = bytearray(key_data)
    corrupted[-1] ^= 0x01
    with pytest.raises(KeyOperationError):
        factory.key_from_data(bytes(corrupted))


def test_pub_key_shape_and_variation(key):
    first = key.pub_key(key_path(0))
    assert len(first) == 65
    assert first[0] == 4
    assert key.pub_key(key_path(1)) != first
    assert key.pub_key(metamask_key_path(1)) != first


def test_sign_and_verify(key):
    path = metamask_key_path(2)
    signature = key.sign(b"payload", path)
    assert len(signature) == 65
    assert signature[64] in (0, 1)
    assert key.verify(b"payload", signature[:64], path) is True
    assert key.verify(b"tampered", signature[:64], path) is False


def test_verify_rejects_wrong_signature_size(key):
    with pytest.raises(InvalidSignatureSizeError) as info:
        key.verify(b"payload", bytes(10), key_path(0))
    assert (info.value.size, info.value.expected) == (10, 64)


@pytest.mark.parametrize(
    "path",
    [
        KeyPath(0x80000031, BIP44_COIN_TYPE, BIP44_SOFT_UPPER_BOUND, 0, 0),
        KeyPath(BIP44_PURPOSE, 0x80000000, BIP44_SOFT_UPPER_BOUND, 0, 0),
        KeyPath(BIP44_PURPOSE, BIP44_COIN_TYPE, 0, 0, 0),
        KeyPath(BIP44_PURPOSE, BIP44_COIN_TYPE, BIP44_SOFT_UPPER_BOUND, 2, 0),
        KeyPath(BIP44_PURPOSE, BIP44_COIN_TYPE, BIP44_SOFT_UPPER_BOUND, 0, 0x80000000),
    ],
)
def test_key_rejects_bad_paths(key, path):
    with pytest.raises(KeyPathError):
        key.pub_key(path)