import pytest

from chip8vm import log as logs
from chip8vm.cpu import Chip8
from chip8vm.quirks import Quirks


@pytest.fixture(autouse=True)
def quiet_logs():
    logs.logs_on = False
    yield
    logs.logs_on = False


@pytest.fixture
def chip8():
    return Chip8()


@pytest.fixture
def vip():
    return Chip8(quirks=Quirks.cosmac_vip())


@pytest.fixture
def run():
    """Load opcodes at 0x200 and execute exactly that many cycles."""
    def _run(machine, *opcodes):
        data = bytearray()
        for op in opcodes:
            data += bytes([op >> 8, op & 0xFF])
        machine.load_rom(bytes(data))
        for _ in opcodes:
            machine.cycle()
        return machine
    return _run
