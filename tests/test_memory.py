import pytest

from chip8vm.config import FONT_START, MAX_ROM_SIZE, PROGRAM_START, fontset
from chip8vm.errors import MemoryAccessError, RomTooLargeError
from chip8vm.memory import Memory, load_rom, read_rom


def test_font_loaded_at_0x50():
    memory = Memory()
    assert len(memory) == 4096
    assert memory.read(FONT_START, 80) == bytes(fontset)
    assert memory.read(FONT_START - 1) == b"\x00"
    assert memory.read(FONT_START + 80) == b"\x00"


def test_load_rom_copies_to_0x200():
    memory = Memory()
    load_rom(b"\x12\x34\x56", memory)
    assert memory.read(PROGRAM_START, 3) == b"\x12\x34\x56"
    assert memory.read(PROGRAM_START - 1) == b"\x00"


def test_load_rom_fills_memory_exactly():
    memory = Memory()
    load_rom(bytes([0xAA]) * MAX_ROM_SIZE, memory)
    assert memory.read(0xFFF) == b"\xaa"


def test_load_rom_too_large():
    memory = Memory()
    with pytest.raises(RomTooLargeError):
        load_rom(bytes(MAX_ROM_SIZE + 1), memory)
    assert memory.read(PROGRAM_START) == b"\x00"


def test_write_then_read():
    memory = Memory()
    memory.write(0x300, [0xAB, 0xCD])
    assert memory.read(0x300, 2) == b"\xab\xcd"
    assert memory.read(0x301) == b"\xcd"


@pytest.mark.parametrize("address,count", [(0xFFF, 2), (0x1000, 1), (0xFFE, 3), (-1, 1)])
def test_out_of_bounds(address, count):
    memory = Memory()
    with pytest.raises(MemoryAccessError):
        memory.read(address, count)
    with pytest.raises(MemoryAccessError):
        memory.write(address, bytes(count))


def test_read_rom(tmp_path):
    path = tmp_path / "test.ch8"
    path.write_bytes(b"\x00\xE0")
    assert read_rom(str(path)) == b"\x00\xE0"
