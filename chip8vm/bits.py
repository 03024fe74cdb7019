"""Bit-field helpers used to pull opcodes apart.

Bits are counted from the least significant end, so ``bit_range(v, 0, 4)``
is the low nibble of ``v``.
"""
from .errors import BitRangeError


def bit_range(value, start, end, width=16):
    """Return bits ``[start, end)`` of ``value`` shifted down to bit 0.

    Raises BitRangeError when the range is reversed or falls outside a word
    of ``width`` bits.
    """
    if start < 0 or start > end or start >= width or end > width:
        raise BitRangeError("invalid bit range [%d, %d) for %d-bit word" % (start, end, width))
    mask = (1 << (end - start)) - 1
    return (value >> start) & mask


def append_bits(high, low, low_width=8):
    # high half goes first, so two bytes read from memory become a big-endian word
    return (high << low_width) | bit_range(low, 0, low_width, low_width)
