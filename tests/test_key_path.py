import pytest

from keychain.errors import KeyPathError
from keychain.key_path import (
    BIP44_PURPOSE,
    BIP44_SOFT_UPPER_BOUND,
    KeyPath,
    parse_key_path,
)


def test_parse_hardened_and_soft():
    path = parse_key_path("m/44'/60'/0'/0/0")
    assert path.purpose == BIP44_PURPOSE
    assert path.coin == 0x8000003C
    assert path.account == BIP44_SOFT_UPPER_BOUND
    assert path.change == 0
    assert path.address == 0


@pytest.mark.parametrize(
    "text",
    ["m/44'/60'/0'/0/0", "m/44'/1815'/3'/1/17", "m/49'/0'/0'/1/2", "m/0/1/2/3/4"],
)
def test_round_trip(text):
    assert str(parse_key_path(text)) == text


def test_whitespace_is_trimmed():
    assert parse_key_path(" m / 44' / 0'/0'/0/ 5") == parse_key_path("m/44'/0'/0'/0/5")


def test_str_of_constructed_path_parses_back():
    path = KeyPath(BIP44_PURPOSE, BIP44_SOFT_UPPER_BOUND, BIP44_SOFT_UPPER_BOUND + 7, 1, 9)
    assert parse_key_path(str(path)) == path


def test_leading_plus_accepted():
    assert parse_key_path("m/+44'/0'/0'/0/+3") == parse_key_path("m/44'/0'/0'/0/3")


@pytest.mark.parametrize("text", ["m/44'/0'/0'/0", "m/44'/0'/0'/0/0/0", ""])
def test_wrong_parts_count(text):
    with pytest.raises(KeyPathError, match="Invalid parts count"):
        parse_key_path(text)


def test_wrong_marker():
    with pytest.raises(KeyPathError, match="Invalid path marker"):
        parse_key_path("n/44'/0'/0'/0/0")


@pytest.mark.parametrize("text", ["m/44'//0'/0/0", "m/44'/'/0'/0/0"])
def test_empty_value(text):
    with pytest.raises(KeyPathError, match="Found empty value at index"):
        parse_key_path(text)


@pytest.mark.parametrize(
    "text",
    ["m/44'/x/0'/0/0", "m/44'/0'/-1/0/0", "m/44'/0'/0'/0/4294967296", "m/2147483648'/0/0/0/0"],
)
def test_parse_errors(text):
    with pytest.raises(KeyPathError, match="Can't parse number at index"):
        parse_key_path(text)


def test_key_path_rejects_out_of_range_fields():
    with pytest.raises(ValueError):
        KeyPath(0, 0, 0, 0, -1)
    with pytest.raises(ValueError):
        KeyPath(1 << 32, 0, 0, 0, 0)