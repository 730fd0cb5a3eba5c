from enum import IntEnum, unique


@unique
class Action(IntEnum):

    # Same values as the evdev EV_KEY event value
    RELEASE, PRESS, HOLD = range(3)

    @property
    def just_pressed(self):
        return self == Action.PRESS

    @property
    def is_released(self):
        return self == Action.RELEASE

    @property
    def is_hold(self):
        return self == Action.HOLD

    def __str__(self):
        return self.name.lower()
