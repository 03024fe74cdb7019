# CHIP8 Virtual Machine layout:
# Memory - 4096 bytes. The interpreter owns everything below 0x200, the font
# sits at 0x050-0x09F and the ROM is copied in from 0x200 onwards.
# Display - 64x32 pixels that are either on or off.
# Timers - delay and sound, both counting down at 60Hz.
#----------------------------------------------------------------------------------------------

# ---- Configuration ----
scale = 10
width, height = 64, 32
window_width, window_height = width * scale, height * scale
CPU_HZ = 720
timer_HZ = 60
CYCLES_PER_FRAME = CPU_HZ // timer_HZ   # 12 instructions per frame

# ---- Machine layout ----
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
FONT_START = 0x050
STACK_DEPTH = 16
MAX_ROM_SIZE = MEMORY_SIZE - PROGRAM_START

# set fonts (binary pixel patterns)
fontset = [
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
] #notice 80 bytes

FONT_END = FONT_START + len(fontset)
