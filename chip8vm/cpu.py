# CHIP8 interpreter core.
# CPU - Cowgod's CHIP8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM#0.0
#----------------------------------------------------------------------------------------------
# Each cycle fetches the big-endian opcode at PC, moves PC on by 2 and then
# dispatches on the first nibble. Families 0, 5, 8, 9, E and F are looked up
# a second time on the field that tells their members apart.
#----------------------------------------------------------------------------------------------

import random

from .config import FONT_START, PROGRAM_START, height, width
from .display import Display
from .instruction import Instruction
from .keypad import Keypad
from .log import log
from .memory import Memory, load_rom
from .quirks import Quirks
from .stack import CallStack
from .timers import Timers


class Chip8:

    def __init__(self, quirks=None, display=None, keypad=None, timers=None, rng=None):
        # ---- CPU state ----
        self.memory = Memory()      # 4096 bytes, font already loaded
        self.V = [0] * 16           # 16 general-purpose registers
        self.I = 0                  # index register (memory pointer)
        self.pc = PROGRAM_START     # program counter starts at 0x200
        self.stack = CallStack()

        # ---- collaborators ----
        self.quirks = quirks if quirks is not None else Quirks()
        self.display = display if display is not None else Display()
        self.keypad = keypad if keypad is not None else Keypad()
        self.timers = timers if timers is not None else Timers()
        self.rng = rng if rng is not None else random.Random()

        # register FX0A is filling while it waits for a key, None otherwise
        self.waiting_register = None
        self.cycle_count = 0

        # Prepare opcode function map
        self.setup_funcmap()

    def load_rom(self, data):
        load_rom(data, self.memory)

    # ---- Frame ----
    def run_frame(self, cycles):
        """One host frame: a single timer tick, then ``cycles`` instructions."""
        self.timers.tick()
        for _ in range(cycles):
            self.cycle()

    # ---- Cycle ----
    def cycle(self):
        self.cycle_count += 1

        # Fetch opcode, raises MemoryAccessError when PC is past the end of memory
        ins = Instruction.from_bytes(*self.memory.read(self.pc, 2))

        # jumps, calls and skips are all relative to the next instruction
        self.pc += 2

        handler = self.lookup(ins)
        if handler is None:
            print("Unknown opcode: %04X" % ins.opcode)
            return
        handler(ins)

    def lookup(self, ins):
        handler = self.funcmap[ins.family]
        if isinstance(handler, tuple):
            field, table = handler
            handler = table.get(getattr(ins, field))
        return handler

    # ---- Opcode function map ----
    def setup_funcmap(self):
        self.funcmap = {
            0x0: ("opcode", {
                0x00E0: self._00E0,  # 00E0 - Clear the screen
                0x00EE: self._00EE,  # 00EE - Return from a subroutine
            }),
            0x1: self._1nnn,  # 1nnn - Jump to a specific memory address
            0x2: self._2nnn,  # 2nnn - Call a function (subroutine) at a memory address
            0x3: self._3xkk,  # 3xkk - Skip next instruction if a register equals a specific number
            0x4: self._4xkk,  # 4xkk - Skip next instruction if a register does NOT equal a number
            0x5: ("n", {0x0: self._5xy0}),  # 5xy0 - Skip next instruction if two registers are equal
            0x6: self._6xkk,  # 6xkk - Set a register to a specific number
            0x7: self._7xkk,  # 7xkk - Add a number to a register
            0x8: ("n", {      # 8xy0..8xyE - Math and logic operations between two registers
                0x0: self._8xy0,
                0x1: self._8xy1,
                0x2: self._8xy2,
                0x3: self._8xy3,
                0x4: self._8xy4,
                0x5: self._8xy5,
                0x6: self._8xy6,
                0x7: self._8xy7,
                0xE: self._8xyE,
            }),
            0x9: ("n", {0x0: self._9xy0}),  # 9xy0 - Skip next instruction if two registers are NOT equal
            0xA: self._Annn,  # Annn - Set the memory pointer (I) to a specific address
            0xB: self._Bnnn,  # Bnnn - Jump to an address plus the value of a register
            0xC: self._Cxkk,  # Cxkk - Set a register to a random number ANDed with a value
            0xD: self._Dxyn,  # Dxyn - Draw a sprite on the screen at X,Y coordinates
            0xE: ("nn", {     # Ex9E / ExA1 - Skip next instruction if a key is pressed or not pressed
                0x9E: self._Ex9E,
                0xA1: self._ExA1,
            }),
            0xF: ("nn", {     # Fx07..Fx65 - timers, memory storage, and waiting for keys
                0x07: self._Fx07,
                0x0A: self._Fx0A,
                0x15: self._Fx15,
                0x18: self._Fx18,
                0x1E: self._Fx1E,
                0x29: self._Fx29,
                0x33: self._Fx33,
                0x55: self._Fx55,
                0x65: self._Fx65,
            }),
        }

    def _skip(self):
        self.pc += 2

    # ---- Opcode Handlers ----

    # 00E0 - CLS
    def _00E0(self, ins):
        self.display.clear()
        log("Clear the display (all pixels turned off)")

    # 00EE - RET
    def _00EE(self, ins):
        self.pc = self.stack.pop()
        log(f"Return to {self.pc:03X}")

    # 1nnn - Jump to address NNN
    def _1nnn(self, ins):
        self.pc = ins.nnn
        log(f"Jump to memory address {ins.nnn:03X}")

    # 2nnn - Call subroutine at NNN
    def _2nnn(self, ins):
        self.stack.push(self.pc)
        self.pc = ins.nnn
        log(f"Call subroutine at address {ins.nnn:03X} (return to {self.stack.peek():03X})")

    # 3xkk - Skip next instruction if Vx == kk
    def _3xkk(self, ins):
        if self.V[ins.x] == ins.nn:
            self._skip()
            log(f"Skip next instruction: V{ins.x:X} == {ins.nn}")

    # 4xkk - Skip next instruction if Vx != kk
    def _4xkk(self, ins):
        if self.V[ins.x] != ins.nn:
            self._skip()
            log(f"Skip next instruction: V{ins.x:X} != {ins.nn}")

    # 5xy0 - Skip next instruction if Vx == Vy
    def _5xy0(self, ins):
        if self.V[ins.x] == self.V[ins.y]:
            self._skip()
            log(f"Skip next instruction: V{ins.x:X} == V{ins.y:X}")

    # 6xkk - Set Vx = kk
    def _6xkk(self, ins):
        self.V[ins.x] = ins.nn
        log(f"Set V{ins.x:X} = {ins.nn}")

    # 7xkk - Add immediate, wraps without touching VF
    def _7xkk(self, ins):
        old_val = self.V[ins.x]
        self.V[ins.x] = (old_val + ins.nn) & 0xFF
        log(f"Add {ins.nn} to V{ins.x:X}: {old_val} + {ins.nn} -> {self.V[ins.x]}")

    # 8xy0..8xyE
    # VF is always written after Vx, so an op with VF as its target ends up holding the flag.
    def _8xy0(self, ins):
        self.V[ins.x] = self.V[ins.y]
        log(f"Copy value of V{ins.y:X} ({self.V[ins.y]}) into V{ins.x:X}")

    def _8xy1(self, ins):
        self.V[ins.x] |= self.V[ins.y]
        log(f"V{ins.x:X} = V{ins.x:X} OR V{ins.y:X} -> {self.V[ins.x]}")

    def _8xy2(self, ins):
        self.V[ins.x] &= self.V[ins.y]
        log(f"V{ins.x:X} = V{ins.x:X} AND V{ins.y:X} -> {self.V[ins.x]}")

    def _8xy3(self, ins):
        self.V[ins.x] ^= self.V[ins.y]
        log(f"V{ins.x:X} = V{ins.x:X} XOR V{ins.y:X} -> {self.V[ins.x]}")

    def _8xy4(self, ins):
        total = self.V[ins.x] + self.V[ins.y]
        self.V[ins.x] = total & 0xFF
        self.V[0xF] = 1 if total > 0xFF else 0
        log(f"Add V{ins.y:X} to V{ins.x:X}: result {self.V[ins.x]}, carry={self.V[0xF]}")

    def _subtract(self, dest, left, right):
        a, b = self.V[left], self.V[right]
        self.V[dest] = (a - b) & 0xFF
        self.V[0xF] = 1 if a >= b else 0

    def _8xy5(self, ins):
        self._subtract(ins.x, ins.x, ins.y)
        log(f"Subtract V{ins.y:X} from V{ins.x:X}: result {self.V[ins.x]}, NOT borrow={self.V[0xF]}")

    def _8xy7(self, ins):
        self._subtract(ins.x, ins.y, ins.x)
        log(f"Set V{ins.x:X} = V{ins.y:X} - V{ins.x:X}: result {self.V[ins.x]}, NOT borrow={self.V[0xF]}")

    def _8xy6(self, ins):
        if self.quirks.shift_uses_vy:
            self.V[ins.x] = self.V[ins.y]
        flag = self.V[ins.x] & 1
        self.V[ins.x] >>= 1
        self.V[0xF] = flag
        log(f"Shift V{ins.x:X} right by 1: {self.V[ins.x]}, least significant bit={flag}")

    def _8xyE(self, ins):
        if self.quirks.shift_uses_vy:
            self.V[ins.x] = self.V[ins.y]
        flag = (self.V[ins.x] >> 7) & 1
        self.V[ins.x] = (self.V[ins.x] << 1) & 0xFF
        self.V[0xF] = flag
        log(f"Shift V{ins.x:X} left by 1: {self.V[ins.x]}, most significant bit={flag}")

    # 9xy0 - Skip next instruction if Vx != Vy
    def _9xy0(self, ins):
        if self.V[ins.x] != self.V[ins.y]:
            self._skip()
            log(f"Skip next instruction: V{ins.x:X} != V{ins.y:X}")

    # Annn - Set I = NNN
    def _Annn(self, ins):
        self.I = ins.nnn
        log(f"Set memory pointer I = {self.I:03X}")

    # Bnnn - Jump to NNN + V0, or NNN + Vx where x is the top nibble of NNN
    def _Bnnn(self, ins):
        reg = ins.x if self.quirks.jump_uses_vx else 0
        self.pc = ins.nnn + self.V[reg]
        log(f"Jump to address V{reg:X} + {ins.nnn:03X} = {self.pc:03X}")

    # Cxkk - RND Vx, byte
    def _Cxkk(self, ins):
        self.V[ins.x] = self.rng.getrandbits(8) & ins.nn
        log(f"Set V{ins.x:X} = random_byte & {ins.nn} -> {self.V[ins.x]}")

    # Dxyn - DRW Vx, Vy, nibble
    def _Dxyn(self, ins):
        x_coord = self.V[ins.x] % width
        y_coord = self.V[ins.y] % height
        rows = self.memory.read(self.I, ins.n)
        self.V[0xF] = 0
        # sprites wrap at the origin but clip at the right and bottom edges
        for row, sprite in enumerate(rows[:height - y_coord]):
            py = y_coord + row
            for bit in range(min(8, width - x_coord)):
                if sprite & (0x80 >> bit):
                    px = x_coord + bit
                    lit = self.display.get(px, py)
                    if lit:
                        self.V[0xF] = 1
                    self.display.set(px, py, not lit)
        log(f"Drew sprite at ({x_coord},{y_coord}), height={ins.n}, collision={self.V[0xF]}")

    # Ex9E / ExA1 - SKP / SKNP
    def _Ex9E(self, ins):
        key = self.V[ins.x] & 0xF
        if self.keypad.is_down(key):
            self._skip()
            log(f"Skip next instruction: key {key:X} is pressed")

    def _ExA1(self, ins):
        key = self.V[ins.x] & 0xF
        if not self.keypad.is_down(key):
            self._skip()
            log(f"Skip next instruction: key {key:X} is NOT pressed")

    # Fx07..Fx65 - timers, memory, I, and key input
    def _Fx07(self, ins):
        self.V[ins.x] = self.timers.get_delay()
        log(f"Set V{ins.x:X} = delay timer ({self.V[ins.x]})")

    def _Fx0A(self, ins):
        # LD Vx, K: wait for a key press. Stalls by stepping PC back onto this
        # instruction so the host keeps ticking timers and redrawing meanwhile.
        if self.waiting_register is None:
            self.keypad.take_pressed()  # only presses made during the wait count
            self.waiting_register = ins.x
            key = None
        else:
            key = self.keypad.take_pressed()
        if key is None:
            self.pc -= 2
            log(f"Wait for key press -> V{ins.x:X}: waiting")
            return
        self.waiting_register = None
        self.V[ins.x] = key
        log(f"Wait for key press -> V{ins.x:X}: {key:X}")

    def _Fx15(self, ins):
        self.timers.set_delay(self.V[ins.x])
        log(f"Set delay timer = V{ins.x:X} ({self.V[ins.x]})")

    def _Fx18(self, ins):
        self.timers.set_sound(self.V[ins.x])
        log(f"Set sound timer = V{ins.x:X} ({self.V[ins.x]})")

    def _Fx1E(self, ins):
        old_index = self.I
        total = self.I + self.V[ins.x]
        self.I = total & 0xFFFF
        if self.quirks.index_overflow_flag:
            self.V[0xF] = 1 if total > 0xFFFF else 0
        log(f"Increment I by V{ins.x:X}: {old_index:03X} -> {self.I:03X}")

    def _Fx29(self, ins):
        digit = self.V[ins.x] & 0xF
        self.I = FONT_START + 5 * digit
        log(f"Set I to the memory location of sprite for digit {digit:X} ({self.I:03X})")

    def _Fx33(self, ins):
        val = self.V[ins.x]
        self.memory.write(self.I, [val // 100, (val // 10) % 10, val % 10])
        log(f"Store BCD of V{ins.x:X} ({val}) at I, I+1, I+2")

    def _Fx55(self, ins):
        self.memory.write(self.I, self.V[:ins.x + 1])
        log(f"Store registers V0..V{ins.x:X} in memory starting at I ({self.I:03X})")
        if self.quirks.index_autoincrement:
            self.I = (self.I + ins.x + 1) & 0xFFFF

    def _Fx65(self, ins):
        self.V[:ins.x + 1] = list(self.memory.read(self.I, ins.x + 1))
        log(f"Load registers V0..V{ins.x:X} from memory starting at I ({self.I:03X})")
        if self.quirks.index_autoincrement:
            self.I = (self.I + ins.x + 1) & 0xFFFF
