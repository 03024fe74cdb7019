import argparse
import dataclasses
import sys

from . import log as logs
from .config import CYCLES_PER_FRAME, scale
from .cpu import Chip8
from .errors import Chip8Error
from .memory import read_rom
from .quirks import Quirks


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8vm", description="CHIP-8 emulator")
    parser.add_argument("rom", help="Path to CHIP-8 ROM")
    parser.add_argument("--scale", type=int, default=scale,
                        help="Pixel scale factor (default %(default)s)")
    parser.add_argument("--cycles", type=int, default=CYCLES_PER_FRAME,
                        help="Instructions per 60Hz frame (default %(default)s)")
    parser.add_argument("--vip", action="store_true",
                        help="Start from the original COSMAC VIP quirks")
    parser.add_argument("--shift-uses-vy", action="store_true",
                        help="8XY6/8XYE copy VY into VX before shifting")
    parser.add_argument("--jump-uses-v0", action="store_true",
                        help="BNNN jumps to NNN + V0")
    parser.add_argument("--index-autoincrement", action="store_true",
                        help="FX55/FX65 increment I")
    parser.add_argument("--index-overflow-flag", action="store_true",
                        help="FX1E sets VF when I overflows")
    parser.add_argument("--logs", action="store_true",
                        help="Start with instruction logging on (F1 toggles it)")
    return parser


def quirks_from_args(args):
    quirks = Quirks.cosmac_vip() if args.vip else Quirks.modern()
    overrides = {}
    if args.shift_uses_vy:
        overrides["shift_uses_vy"] = True
    if args.jump_uses_v0:
        overrides["jump_uses_vx"] = False
    if args.index_autoincrement:
        overrides["index_autoincrement"] = True
    if args.index_overflow_flag:
        overrides["index_overflow_flag"] = True
    return dataclasses.replace(quirks, **overrides)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logs.logs_on = args.logs

    chip8 = Chip8(quirks=quirks_from_args(args))
    try:
        chip8.load_rom(read_rom(args.rom))
    except (OSError, Chip8Error) as e:
        print("Could not load ROM:", e)
        sys.exit(1)

    # window code needs a display, keep it out of the import path of the core
    import pyglet
    from .window import Chip8Window

    Chip8Window(chip8, cycles_per_frame=args.cycles, pixel_scale=args.scale)
    pyglet.app.run()


if __name__ == "__main__":
    main()
