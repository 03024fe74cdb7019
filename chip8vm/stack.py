import numpy as np

from .config import STACK_DEPTH
from .errors import StackOverflowError, StackUnderflowError


class CallStack:
    """Return addresses for 2NNN/00EE, STACK_DEPTH levels deep."""

    def __init__(self, depth=STACK_DEPTH):
        self.stack = np.zeros(depth, dtype=np.uint16)
        self.sp = 0

    def __len__(self):
        return self.sp

    def push(self, address):
        if self.sp >= len(self.stack):
            raise StackOverflowError("Stack overflow on CALL")
        self.stack[self.sp] = address
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflowError("Stack underflow on 00EE")
        self.sp -= 1
        return int(self.stack[self.sp])

    def peek(self):
        if self.sp == 0:
            return None
        return int(self.stack[self.sp - 1])

    def is_empty(self):
        return self.sp == 0
