import pytest
from hypothesis import given, strategies as st

from scompress.bitwriter import BitstreamWriter


def _prefixed(prefix_bits):
    writer = BitstreamWriter()
    writer.write_u64_bits(0, prefix_bits)
    return writer


def test_empty_writer_has_no_data():
    writer = BitstreamWriter()
    assert writer.getvalue() == b""
    assert writer.size_in_bits() == 0


def test_bit_then_byte_is_shifted():
    writer = BitstreamWriter()
    writer.write_bit(1)
    writer.write_u8(0xFF)
    assert writer.getvalue() == b"\xff\x80"
    assert writer.size_in_bits() == 9
    assert writer.size_in_bytes() == 2


def test_three_bits_pad_to_one_byte():
    writer = BitstreamWriter()
    writer.write_u64_bits(0b101, 3)
    assert writer.getvalue() == b"\xa0"


def test_aligned_integers_are_big_endian():
    writer = BitstreamWriter()
    writer.write_u16(0x1234)
    writer.write_u32(0x12345678)
    assert writer.getvalue() == bytes.fromhex("1234") + bytes.fromhex("12345678")


@given(st.integers(0, 7), st.integers(0, 64), st.data())
def test_bits_one_by_one_match_u64_bits(prefix, nbits, data):
    value = data.draw(st.integers(0, (1 << nbits) - 1))
    a = _prefixed(prefix)
    a.write_u64_bits(value, nbits)
    b = _prefixed(prefix)
    for shift in range(nbits - 1, -1, -1):
        b.write_bit((value >> shift) & 1)
    assert a.getvalue() == b.getvalue()
    assert a.size_in_bits() == prefix + nbits


@given(st.integers(0, 7), st.integers(0, 0xFFFF))
def test_u16_matches_two_u8(prefix, value):
    a = _prefixed(prefix)
    a.write_u16(value)
    b = _prefixed(prefix)
    b.write_u8(value >> 8)
    b.write_u8(value & 0xFF)
    assert a.getvalue() == b.getvalue()


@given(st.integers(0, 7), st.integers(0, 0xFFFFFFFF))
def test_u32_matches_u64_bits(prefix, value):
    a = _prefixed(prefix)
    a.write_u32(value)
    b = _prefixed(prefix)
    b.write_u64_bits(value, 32)
    assert a.getvalue() == b.getvalue()


@given(st.integers(0, 7), st.integers(0, (1 << 64) - 1))
def test_u64_matches_u64_bits(prefix, value):
    a = _prefixed(prefix)
    a.write_u64(value)
    b = _prefixed(prefix)
    b.write_u64_bits(value, 64)
    assert a.getvalue() == b.getvalue()


@given(st.integers(0, 7), st.binary(max_size=20))
def test_write_bytes_matches_u8_sequence(prefix, data):
    a = _prefixed(prefix)
    a.write_bytes(data)
    b = _prefixed(prefix)
    for byte in data:
        b.write_u8(byte)
    assert a.getvalue() == b.getvalue()


@given(st.binary(max_size=20))
def test_aligned_write_bytes_is_identity(data):
    writer = BitstreamWriter()
    writer.write_bytes(data)
    assert writer.getvalue() == data


@given(st.integers(0, 255), st.integers(0, 10))
def test_repeated_u8(value, count):
    writer = BitstreamWriter()
    writer.write_repeated_u8(value, count)
    assert writer.getvalue() == bytes([value]) * count


@given(st.integers(0, 40))
def test_repeated_bit_ones_match_single_bits(length):
    a = BitstreamWriter()
    a.write_repeated_bit(1, length)
    b = BitstreamWriter()
    for _ in range(length):
        b.write_bit(1)
    assert a.getvalue() == b.getvalue()
    assert a.size_in_bits() == length


@given(st.integers(0, 16), st.integers(0, 255))
def test_insert_u8_preserves_surrounding_bits(position, value):
    writer = BitstreamWriter()
    writer.write_u64_bits((1 << 24) - 1, 24)
    writer.seek(position - 24)
    writer.insert_u8(value)
    writer.seek(24 - position - 8)
    expected = BitstreamWriter()
    expected.write_repeated_bit(1, position)
    expected.write_u8(value)
    expected.write_repeated_bit(1, 16 - position)
    assert writer.getvalue() == expected.getvalue()


@given(st.integers(0, 23), st.integers(0, 1))
def test_insert_bit_changes_only_one_bit(position, bit):
    writer = BitstreamWriter()
    writer.write_u64_bits(0xA5A5A5, 24)
    writer.seek(position - 24)
    writer.insert_bit(bit)
    writer.seek(24 - position - 1)
    original = 0xA5A5A5
    mask = 1 << (23 - position)
    expected = (original & ~mask) | (mask if bit else 0)
    assert writer.getvalue() == expected.to_bytes(3, "big")


@given(st.integers(0, 8), st.integers(0, 0xFFFF))
def test_insert_u16_matches_fresh_write(position, value):
    writer = BitstreamWriter()
    writer.write_u64_bits(0, 32)
    writer.seek(position - 32)
    writer.insert_u16(value)
    writer.seek(32 - position - 16)
    expected = BitstreamWriter()
    expected.write_u64_bits(0, position)
    expected.write_u16(value)
    expected.write_u64_bits(0, 16 - position)
    assert writer.getvalue() == expected.getvalue()


@given(st.integers(0, 7), st.binary(max_size=6))
def test_insert_bytes_over_zeros_matches_write(prefix, data):
    total = 8 * len(data) + 16
    writer = BitstreamWriter()
    writer.write_repeated_bit(0, total)
    writer.seek(prefix - total)
    writer.insert_bytes(data)
    a_bits = writer.size_in_bits()
    fresh = _prefixed(prefix)
    fresh.write_bytes(data)
    assert a_bits == fresh.size_in_bits()
    assert writer.getvalue() == fresh.getvalue()


def test_insert_u32_and_u64_round_values():
    writer = BitstreamWriter()
    writer.insert_u32(0x01020304)
    writer.insert_u64(0x0102030405060708)
    writer.insert_u64_bits(0x7, 3)
    expected = BitstreamWriter()
    expected.write_u32(0x01020304)
    expected.write_u64(0x0102030405060708)
    expected.write_u64_bits(0x7, 3)
    assert writer.getvalue() == expected.getvalue()


def test_seek_backwards_shrinks_size():
    writer = BitstreamWriter()
    writer.write_u32(0xDEADBEEF)
    writer.seek(-12)
    assert writer.size_in_bits() == 20
    assert writer.size_in_bytes() == 3
    assert writer.getvalue() == bytes.fromhex("DEADBE")


def test_seek_before_start_raises():
    writer = BitstreamWriter()
    writer.write_u8(1)
    with pytest.raises(ValueError):
        writer.seek(-9)


@pytest.mark.parametrize(
    "call",
    [
        lambda w: w.write_u8(256),
        lambda w: w.write_u16(-1),
        lambda w: w.write_u32(1 << 32),
        lambda w: w.write_u64_bits(8, 3),
        lambda w: w.write_u64_bits(0, 65),
        lambda w: w.write_repeated_u8(1, -1),
        lambda w: w.insert_u8(300),
    ],
)
def test_out_of_range_values_raise(call):
    with pytest.raises(ValueError):
        call(BitstreamWriter())


def test_write_bit_clears_rest_of_byte_after_seek():
    writer = BitstreamWriter()
    writer.write_u8(0xFF)
    writer.seek(-8)
    writer.write_bit(0)
    writer.seek(7)
    assert writer.getvalue() == b"\x00"