# src/keycombos/models/keyevent.py

from dataclasses import dataclass

from .action import Action


@dataclass(frozen=True)
class KeyEvent:
    # evdev code name of the physical key, e.g. "KEY_A" or "KEY_LEFTCTRL"
    key: str
    # RELEASE, PRESS or HOLD (kernel auto-repeat)
    action: Action

    @classmethod
    def press(cls, key):
        return cls(key, Action.PRESS)

    @classmethod
    def release(cls, key):
        return cls(key, Action.RELEASE)

    @classmethod
    def hold(cls, key):
        return cls(key, Action.HOLD)

    def __str__(self):
        return f"{self.key} {self.action}"

# End of file #
