import pytest

from keychain.network import Network


def test_constants_match_coin_types():
    assert Network(0x80000000) == Network.BITCOIN
    assert Network(0x8000003C) == Network.ETHEREUM
    assert Network(0x80000717) == Network.CARDANO


def test_str_format():
    assert str(Network.BITCOIN) == f"Network({0x80000000})"
    assert str(Network(12)) == "Network(12)"


def test_equality_and_hash():
    assert Network(0x8000003C) == Network.ETHEREUM
    mapping = {Network.BITCOIN: "btc"}
    assert mapping[Network(0x80000000)] == "btc"
    assert len({Network.CARDANO, Network(0x80000717)}) == 1


def test_constants_are_distinct():
    built = {Network(0x80000000), Network(0x8000003C), Network(0x80000717)}
    assert len(built) == 3
    assert built == {Network.BITCOIN, Network.ETHEREUM, Network.CARDANO}


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range(value):
    with pytest.raises(ValueError):
        Network(value)


def test_non_integer():
    with pytest.raises(TypeError):
        Network("1")