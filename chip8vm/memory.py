"""Flat 4096 byte memory with the hex font preloaded."""
from .config import FONT_START, MAX_ROM_SIZE, MEMORY_SIZE, PROGRAM_START, fontset
from .errors import MemoryAccessError, RomTooLargeError
from .log import log


class Memory:

    def __init__(self):
        self.data = bytearray(MEMORY_SIZE)
        # Load fontset into memory
        self.data[FONT_START:FONT_START + len(fontset)] = bytes(fontset)

    def __len__(self):
        return len(self.data)

    def _check(self, address, count):
        if address < 0 or address + count > MEMORY_SIZE:
            raise MemoryAccessError(address, count)

    def read(self, address, count=1):
        self._check(address, count)
        return bytes(self.data[address:address + count])

    def write(self, address, values):
        values = bytes(values)
        self._check(address, len(values))
        self.data[address:address + len(values)] = values


def load_rom(data, memory):
    """Copy ROM bytes into ``memory`` starting at 0x200."""
    if len(data) > MAX_ROM_SIZE:
        raise RomTooLargeError(len(data), MAX_ROM_SIZE)
    memory.write(PROGRAM_START, data)
    log("Loaded %d bytes at 0x%03X" % (len(data), PROGRAM_START))


def read_rom(path):
    log("Loading ROM:", path)
    with open(path, "rb") as f:
        return f.read()
