from chip8vm.timers import Timers


def test_set_and_get():
    timers = Timers()
    timers.set_delay(10)
    timers.set_sound(3)
    assert timers.get_delay() == 10
    assert timers.get_sound() == 3


def test_tick_decrements_both():
    timers = Timers()
    timers.set_delay(2)
    timers.set_sound(1)
    timers.tick()
    assert timers.get_delay() == 1
    assert timers.get_sound() == 0


def test_tick_floors_at_zero():
    timers = Timers()
    timers.set_delay(1)
    for _ in range(5):
        timers.tick()
    assert timers.get_delay() == 0
    assert timers.get_sound() == 0
