import pytest

from chip8vm.bits import append_bits, bit_range
from chip8vm.errors import BitRangeError


def test_bit_range_nibbles():
    assert bit_range(0b01101101, 0, 4) == 0b1101
    assert bit_range(0b01101101, 4, 8) == 0b0110


def test_bit_range_whole_word_is_unchanged():
    assert bit_range(0xBEEF, 0, 16) == 0xBEEF
    assert bit_range(0xAB, 0, 8, width=8) == 0xAB


def test_bit_range_single_bit():
    assert bit_range(0b100, 2, 3) == 1
    assert bit_range(0b100, 1, 2) == 0


def test_bit_range_empty_range():
    assert bit_range(0xFFFF, 5, 5) == 0


@pytest.mark.parametrize("start,end,width", [
    (5, 2, 16),
    (-1, 4, 16),
    (16, 20, 16),
    (14, 17, 16),
    (8, 8, 8),
    (0, 9, 8),
])
def test_bit_range_invalid(start, end, width):
    with pytest.raises(BitRangeError):
        bit_range(0b01101101, start, end, width)


def test_bit_range_error_is_value_error():
    with pytest.raises(ValueError):
        bit_range(1, 3, 1)


def test_append_bits_is_big_endian():
    assert append_bits(0b10000101, 0b01101100) == 0b1000010101101100
    assert append_bits(0b10000101, 0b11101101) == 0b1000010111101101
    assert append_bits(0x12, 0x34) == 0x1234
