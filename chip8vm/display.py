import numpy as np

from .config import height, width


class Display:
    """64x32 monochrome framebuffer, indexed [y, x]."""

    def __init__(self):
        self.vram = np.zeros((height, width), dtype=np.uint8)
        self.should_draw = True  # so that we only update the window when needed

    def get(self, x, y):
        return bool(self.vram[y, x])

    def set(self, x, y, on):
        self.vram[y, x] = 1 if on else 0
        self.should_draw = True

    def clear(self):
        self.vram[:] = 0
        self.should_draw = True

