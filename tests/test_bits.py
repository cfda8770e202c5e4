import pytest

from keychain.bits import BitReaderBy11, BitWriterBy11

BYTES = bytes(
    [
        0b0000_0000,
        0b0010_0000,
        0b0000_0100,
        0b0000_0000,
        0b1000_0000,
        0b0001_0000,
        0b0000_0010,
        0b0000_0000,
        0b0100_0000,
        0b0000_1000,
        0b0000_0001,
        0b1000_0000,
        0b0011_0000,
        0b0000_0110,
        0b0000_0000,
        0b1100_0000,
        0b0001_1000,
        0b0000_0011,
        0b0000_0000,
        0b0110_0000,
        0b0000_1100,
        0b0000_0001,
    ]
)

EXPECTED = [0b000_0000_0001] * 8 + [0b100_0000_0001] * 8


def test_bit_read_by_11():
    reader = BitReaderBy11(BYTES)
    values = [reader.read() for _ in range(16)]
    assert values == EXPECTED


def test_writer_produces_reader_input():
    writer = BitWriterBy11()
    for value in EXPECTED:
        writer.write(value)
    assert writer.to_bytes() == BYTES


def test_size_counts_remaining_values():
    reader = BitReaderBy11(BYTES)
    assert reader.size() == 16
    reader.read()
    assert reader.size() == 15


def test_read_past_end_raises():
    reader = BitReaderBy11(BYTES)
    for _ in range(16):
        reader.read()
    assert reader.size() == 0
    with pytest.raises(EOFError):
        reader.read()


def test_single_byte_is_not_enough():
    reader = BitReaderBy11(b"\xff")
    assert reader.size() == 0
    with pytest.raises(EOFError):
        reader.read()


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8, 12, 24])
def test_round_trip(count):
    values = [(index * 379 + 7) & 0x7FF for index in range(count)]
    writer = BitWriterBy11()
    for value in values:
        writer.write(value)
    data = writer.to_bytes()
    assert len(data) == -(-count * 11 // 8)
    reader = BitReaderBy11(data)
    assert [reader.read() for _ in range(count)] == values


def test_writer_keeps_low_eleven_bits():
    writer = BitWriterBy11()
    writer.write(0xFFFF)
    reader = BitReaderBy11(writer.to_bytes())
    assert reader.read() == 0x7FF


def test_writer_rejects_values_outside_sixteen_bits():
    writer = BitWriterBy11()
    with pytest.raises(ValueError):
        writer.write(1 << 16)
    with pytest.raises(ValueError):
        writer.write(-1)


def test_empty_writer():
    assert BitWriterBy11().to_bytes() == b""