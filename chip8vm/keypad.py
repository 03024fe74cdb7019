"""Hex keypad state.

COSMAC VIP layout:      QWERTY keys used for it:
    1 2 3 C                 1 2 3 4
    4 5 6 D                 Q W E R
    7 8 9 E                 A S D F
    A 0 B F                 Z X C V
"""
import numpy as np

# hex key -> physical key label
DEFAULT_LAYOUT = {
    0x1: "1", 0x2: "2", 0x3: "3", 0xC: "4",
    0x4: "Q", 0x5: "W", 0x6: "E", 0xD: "R",
    0x7: "A", 0x8: "S", 0x9: "D", 0xE: "F",
    0xA: "Z", 0x0: "X", 0xB: "C", 0xF: "V",
}


class Keypad:

    def __init__(self, layout=None):
        self.keys = np.zeros(16, dtype=np.uint8)
        self.layout = dict(DEFAULT_LAYOUT if layout is None else layout)
        self.physical_to_hex = {phys: hexkey for hexkey, phys in self.layout.items()}
        self._pending = None  # first hex key that went down since the last take_pressed()

    def is_down(self, hexkey):
        return bool(self.keys[hexkey & 0xF])

    def press(self, hexkey):
        if not self.keys[hexkey] and self._pending is None:
            self._pending = hexkey
        self.keys[hexkey] = 1

    def release(self, hexkey):
        self.keys[hexkey] = 0

    def physical_key(self, hexkey):
        return self.layout.get(hexkey)

    def hex_key(self, physical):
        return self.physical_to_hex.get(physical)

    def take_pressed(self):
        """Return the first hex key pressed since the last call, or None."""
        hexkey = self._pending
        self._pending = None
        return hexkey

    def reset(self):
        self.keys[:] = 0
        self._pending = None
