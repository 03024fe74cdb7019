# We're subclassing pyglet (that'll handle graphics, sound output, and keyboard handling)
# and overriding whatever def we need from there. The interpreter itself lives in
# chip8vm.cpu and never touches pyglet.

import random

import numpy as np
import pyglet
from pyglet.media import synthesis
from pyglet.window import key

from . import log as logs
from .config import CYCLES_PER_FRAME, height, scale, timer_HZ, width
from .errors import Chip8Error


def build_keymap(layout):
    """Map pyglet key symbols onto hex keys using the keypad layout labels."""
    return {getattr(key, "_" + label if label.isdigit() else label): hexkey
            for hexkey, label in layout.items()}


class Chip8Window(pyglet.window.Window):

    def __init__(self, chip8, cycles_per_frame=CYCLES_PER_FRAME, pixel_scale=scale):
        self.pixel_scale = pixel_scale
        super().__init__(
            width=width * pixel_scale,
            height=height * pixel_scale,
            caption="CHIP-8 Emulator",
            resizable=False,
            vsync=False
        )
        self.chip8 = chip8
        self.keymap = build_keymap(chip8.keypad.layout)
        self.cycles_per_frame = cycles_per_frame
        self.has_exit = False
        self.sound_playing = False

        # Pre-allocated small framebuffer (64x32 RGBA), upscaled with numpy.repeat
        self._small_framebuf = np.zeros((height, width, 4), dtype=np.uint8)
        self._small_framebuf[..., 3] = 255
        self.image = pyglet.image.ImageData(
            self.width,
            self.height,
            'RGBA',
            np.repeat(np.repeat(self._small_framebuf, self.pixel_scale, axis=0), self.pixel_scale, axis=1).tobytes()
        )

        # ---- Performance Counters ----
        self._fps_counter = 0
        self._cps_counter = 0
        self.fps_label = pyglet.text.Label(
            "FPS: 0",
            font_size=12,
            x=5,
            y=self.height - 15,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )
        self.cps_label = pyglet.text.Label(
            "Cycles/s: 0",
            font_size=12,
            x=5,
            y=self.height - 30,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )

        # One frame = one timer tick + a batch of cycles, at 60Hz
        pyglet.clock.schedule_interval(self._frame_tick, 1.0 / timer_HZ)
        pyglet.clock.schedule_interval(self._update_bench, 1.0)

    # ---- Frame ----
    def _frame_tick(self, dt):
        if self.has_exit:
            return
        before = self.chip8.cycle_count
        try:
            self.chip8.run_frame(self.cycles_per_frame)
        except Chip8Error as e:
            print("Emulation error:", e)
            self.has_exit = True
            self.close()
            return
        self._cps_counter += self.chip8.cycle_count - before

        if self.chip8.timers.get_sound() > 0:
            # Play beep only if it hasn't started yet
            if not self.sound_playing:
                self._play_beep(base_freq=440, duration=0.2, pitch_variation=15)
        else:
            self.sound_playing = False

    def _update_bench(self, dt):
        self.fps_label.text = f"FPS: {self._fps_counter / dt:.1f}"
        self.cps_label.text = f"Cycles/s: {int(self._cps_counter / dt)}"
        self._fps_counter = 0
        self._cps_counter = 0

    # ---- Sound ----
    def _play_beep(self, base_freq=440, duration=0.5, pitch_variation=50):
        freq = base_freq + random.randint(-pitch_variation, pitch_variation)
        wave = synthesis.Sine(duration=duration, frequency=freq, sample_rate=44100)

        player = pyglet.media.Player()
        player.queue(wave)
        player.play()
        self.sound_playing = True

        # Ensure the sound stops after the requested duration
        def on_eos():
            self.sound_playing = False
            player.delete()

        player.on_eos = on_eos

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        #@Override
        if symbol == key.ESCAPE:
            self.has_exit = True
            self.close()
        if symbol in self.keymap:
            self.chip8.keypad.press(self.keymap[symbol])
        if symbol == key.F1:
            logs.toggle_logs()

    def on_key_release(self, symbol, modifiers):
        #@Override
        if symbol in self.keymap:
            self.chip8.keypad.release(self.keymap[symbol])

    # ---- Drawing ----
    def on_draw(self):
        display = self.chip8.display
        if display.should_draw:
            # vram row 0 is the top of the screen, pyglet's origin is bottom-left
            pixels = np.flipud(display.vram) * 255
            self._small_framebuf[..., :3] = pixels[..., None]
            if self.pixel_scale != 1:
                scaled = np.repeat(np.repeat(self._small_framebuf, self.pixel_scale, axis=0), self.pixel_scale, axis=1)
            else:
                scaled = self._small_framebuf
            #updates existing image without creating new object
            self.image.set_data('RGBA', self.width * 4, scaled.tobytes())
            display.should_draw = False

        self.clear()
        self.image.blit(0, 0)
        self.fps_label.draw()
        self.cps_label.draw()
        self._fps_counter += 1

    def on_deactivate(self):
        #@Override
        # release events are lost while unfocused, don't leave keys stuck down
        self.chip8.keypad.reset()
