from chip8vm.display import Display


def test_starts_clear():
    display = Display()
    assert not display.vram.any()
    assert display.vram.shape == (32, 64)


def test_set_get_clear():
    display = Display()
    display.set(63, 31, True)
    assert display.get(63, 31)
    assert not display.get(0, 0)
    display.set(63, 31, False)
    assert not display.get(63, 31)
    display.set(5, 5, True)
    display.clear()
    assert not display.vram.any()


def test_vram_is_indexed_row_first():
    display = Display()
    display.set(10, 2, True)
    assert display.vram[2, 10] == 1


def test_should_draw_flag():
    display = Display()
    display.should_draw = False
    display.set(0, 0, True)
    assert display.should_draw
    display.should_draw = False
    display.clear()
    assert display.should_draw
