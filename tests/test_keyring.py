import pytest

from keychain.errors import (
    InvalidSignatureSizeError,
    KeyDoesNotExistError,
    KeyPathError,
    NetworkKeyError,
)
from keychain.ethereum import EthereumKeyFactory, key_path
from keychain.key_factory import Key
from keychain.key_path import KeyPath
from keychain.keyring import Keychain
from keychain.network import Network

SEED = bytes(range(64))
PATH = KeyPath(1, 2, 3, 0, 7)


class _StubKey(Key):
    def __init__(self, network):
        self._network = network

    def network(self):
        return self._network

    def pub_key(self, path):
        return bytes([path.address])

    def sign(self, data, path):
        return bytes(data)[::-1]

    def verify(self, data, signature, path):
        return bytes(signature) == bytes(data)[::-1]


class _FailingKey(_StubKey):
    def pub_key(self, path):
        raise KeyPathError.invalid_coin(path.coin, 5)


@pytest.fixture(scope="module")
def ethereum_key():
    factory = EthereumKeyFactory()
    return factory.key_from_data(factory.key_data_from_seed(SEED))


def test_networks_and_has_network():
    keychain = Keychain([_StubKey(Network(1)), _StubKey(Network(2))])
    assert sorted(keychain.networks()) == [Network(1), Network(2)]
    assert keychain.has_network(Network(1))
    assert not keychain.has_network(Network(3))


def test_empty_keychain_has_no_networks():
    keychain = Keychain([])
    assert keychain.networks() == []
    assert not keychain.has_network(Network.BITCOIN)


def test_operations_delegate_to_key():
    keychain = Keychain([_StubKey(Network(9))])
    assert keychain.pub_key(Network(9), PATH) == bytes([7])
    signature = keychain.sign(Network(9), b"abc", PATH)
    assert signature == b"cba"
    assert keychain.verify(Network(9), b"abc", signature, PATH) is True
    assert keychain.verify(Network(9), b"abd", signature, PATH) is False


@pytest.mark.parametrize("operation", ["pub_key", "sign", "verify"])
def test_missing_network_raises(operation):
    keychain = Keychain([_StubKey(Network(1))])
    args = {
        "pub_key": (PATH,),
        "sign": (b"x", PATH),
        "verify": (b"x", b"y", PATH),
    }[operation]
    with pytest.raises(KeyDoesNotExistError) as info:
        getattr(keychain, operation)(Network(2), *args)
    assert info.value.network == Network(2)


def test_key_failure_is_tied_to_network():
    keychain = Keychain([_FailingKey(Network(4))])
    with pytest.raises(NetworkKeyError) as info:
        keychain.pub_key(Network(4), PATH)
    assert info.value.network == Network(4)
    assert isinstance(info.value.error, KeyPathError)


def test_real_ethereum_key_sign_and_verify(ethereum_key):
    keychain = Keychain([ethereum_key])
    path = key_path(0)
    public = keychain.pub_key(Network.ETHEREUM, path)
    assert public == ethereum_key.pub_key(path)
    assert len(public) == 65 and public[0] == 4
    signature = keychain.sign(Network.ETHEREUM, b"message", path)
    assert len(signature) == 65
    assert keychain.verify(Network.ETHEREUM, b"message", signature[:64], path) is True
    assert keychain.verify(Network.ETHEREUM, b"other", signature[:64], path) is False


def test_real_key_bad_signature_size(ethereum_key):
    keychain = Keychain([ethereum_key])
    with pytest.raises(NetworkKeyError) as info:
        keychain.verify(Network.ETHEREUM, b"message", b"\x01" * 10, key_path(0))
    assert isinstance(info.value.error, InvalidSignatureSizeError)
    assert info.value.error.size == 10


def test_real_key_wrong_path(ethereum_key):
    keychain = Keychain([ethereum_key])
    with pytest.raises(NetworkKeyError) as info:
        keychain.pub_key(Network.ETHEREUM, KeyPath(0x8000002C, 1, 0x80000000, 0, 0))
    assert isinstance(info.value.error, KeyPathError)
    assert info.value.network == Network.ETHEREUM