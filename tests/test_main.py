import pytest

from chip8vm.__main__ import build_parser, main, quirks_from_args
from chip8vm.quirks import Quirks


def parse(*argv):
    return build_parser().parse_args(["game.ch8", *argv])


def test_defaults():
    args = parse()
    assert args.rom == "game.ch8"
    assert args.cycles == 12
    assert args.scale == 10
    assert quirks_from_args(args) == Quirks.modern()


def test_vip_preset():
    assert quirks_from_args(parse("--vip")) == Quirks.cosmac_vip()


def test_individual_overrides():
    quirks = quirks_from_args(parse("--shift-uses-vy", "--jump-uses-v0", "--index-overflow-flag"))
    assert quirks.shift_uses_vy
    assert not quirks.jump_uses_vx
    assert quirks.index_overflow_flag
    assert not quirks.index_autoincrement


def test_missing_rom_exits(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.ch8")])
    assert "Could not load ROM" in capsys.readouterr().out


def test_rom_too_large_exits(tmp_path, capsys):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(bytes(4096))
    with pytest.raises(SystemExit):
        main([str(rom)])
    assert "Could not load ROM" in capsys.readouterr().out
