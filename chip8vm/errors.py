"""Errors raised by the interpreter.

Everything derives from Chip8Error so the host can stop a run with one
except clause. Unknown opcodes are not errors: they are reported and skipped.
"""


class Chip8Error(Exception):
    pass


class StackUnderflowError(Chip8Error):
    """00EE executed with nothing on the call stack."""


class StackOverflowError(Chip8Error):
    """2NNN executed with every stack level already in use."""


class MemoryAccessError(Chip8Error):
    """A fetch, sprite, BCD or register-block access ran past 0xFFF."""

    def __init__(self, address, count=1):
        self.address = address
        self.count = count
        super().__init__("Memory access out of bounds: 0x%03X (+%d)" % (address, count))


class RomTooLargeError(Chip8Error):
    def __init__(self, size, limit):
        self.size = size
        self.limit = limit
        super().__init__("ROM is %d bytes, only %d fit in memory" % (size, limit))


class BitRangeError(ValueError):
    pass
