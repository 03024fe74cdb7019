from collections import namedtuple

from .bits import append_bits, bit_range


class Instruction(namedtuple("Instruction", "opcode family x y n nn nnn")):
    """One fetched opcode split into the fields every handler needs.

    family - first nibble, selects the opcode group
    x, y   - second and third nibble, register indices
    n      - fourth nibble
    nn     - low byte
    nnn    - low 12 bits, an address
    """
    __slots__ = ()

    @classmethod
    def decode(cls, opcode):
        return cls(
            opcode,
            bit_range(opcode, 12, 16),
            bit_range(opcode, 8, 12),
            bit_range(opcode, 4, 8),
            bit_range(opcode, 0, 4),
            bit_range(opcode, 0, 8),
            bit_range(opcode, 0, 12),
        )

    @classmethod
    def from_bytes(cls, high, low):
        return cls.decode(append_bits(high, low))

    def __str__(self):
        return "%04X" % self.opcode
