from dataclasses import dataclass


@dataclass(frozen=True)
class Quirks:
    """Behaviour switches for the opcodes CHIP-8 variants disagree on.

    The defaults follow the later CHIP-48/SUPER-CHIP interpreters.
    """
    # 8XY6/8XYE copy VY into VX before shifting (COSMAC VIP)
    shift_uses_vy: bool = False
    # BNNN jumps to NNN + VX instead of NNN + V0 (CHIP-48)
    jump_uses_vx: bool = True
    # FX55/FX65 leave I pointing past the last register (COSMAC VIP)
    index_autoincrement: bool = False
    # FX1E sets VF when I overflows
    index_overflow_flag: bool = False

    @classmethod
    def modern(cls):
        return cls()

    @classmethod
    def cosmac_vip(cls):
        return cls(shift_uses_vy=True, jump_uses_vx=False, index_autoincrement=True)
