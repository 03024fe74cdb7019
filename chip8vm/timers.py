class Timers:
    """Delay and sound timers.

    Instructions only ever set them. tick() is the one place they count
    down, and the host calls it once per 60Hz frame no matter how many
    instructions ran in that frame.
    """

    def __init__(self):
        self.delay_timer = 0
        self.sound_timer = 0

    def get_delay(self):
        return self.delay_timer

    def set_delay(self, value):
        self.delay_timer = value & 0xFF

    def get_sound(self):
        return self.sound_timer

    def set_sound(self, value):
        self.sound_timer = value & 0xFF

    def tick(self):
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1
