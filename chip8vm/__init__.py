from .cpu import Chip8
from .display import Display
from .errors import (BitRangeError, Chip8Error, MemoryAccessError, RomTooLargeError,
                     StackOverflowError, StackUnderflowError)
from .instruction import Instruction
from .keypad import Keypad
from .memory import Memory, load_rom, read_rom
from .quirks import Quirks
from .stack import CallStack
from .timers import Timers

__version__ = "0.1.0"
