from chip8vm.instruction import Instruction


def test_decode_fields():
    ins = Instruction.decode(0xD12F)
    assert ins.opcode == 0xD12F
    assert ins.family == 0xD
    assert ins.x == 0x1
    assert ins.y == 0x2
    assert ins.n == 0xF
    assert ins.nn == 0x2F
    assert ins.nnn == 0x12F


def test_from_bytes():
    ins = Instruction.from_bytes(0xA2, 0x5E)
    assert ins.family == 0xA
    assert ins.nnn == 0x25E
    assert str(ins) == "A25E"


def test_zero_opcode():
    assert Instruction.decode(0x0000) == (0, 0, 0, 0, 0, 0, 0)
