from enum import Enum, unique
from typing import Optional

_ALIASES = {
    "CONTROL":  "CTRL",
    "SUPER":    "META",
    "WIN":      "META",
}


@unique
class Modifier(Enum):
    # Definition order is the canonical order of modifiers inside a combo
    CTRL    = ("KEY_LEFTCTRL", "KEY_RIGHTCTRL")
    ALT     = ("KEY_LEFTALT", "KEY_RIGHTALT")
    SHIFT   = ("KEY_LEFTSHIFT", "KEY_RIGHTSHIFT")
    META    = ("KEY_LEFTMETA", "KEY_RIGHTMETA")

    @property
    def keys(self):
        return self.value

    @property
    def rank(self):
        return _ORDER.index(self)

    @classmethod
    def from_key(cls, key: str) -> Optional["Modifier"]:
        """Modifier for an evdev code name like ``KEY_RIGHTALT``, or None."""
        for mod in cls:
            if key in mod.keys:
                return mod
        return None

    @classmethod
    def is_key_modifier(cls, key: str):
        return cls.from_key(key) is not None

    @classmethod
    def from_token(cls, token: str) -> Optional["Modifier"]:
        """
        Modifier for a combo token as a user would write it.

        Accepts the bare name (``ctrl``), either physical side (``LeftCtrl``,
        ``KEY_RIGHTCTRL``) and a few aliases (``control``, ``super``, ``win``).
        """
        name = token.strip().upper()
        if name.startswith("KEY_"):
            name = name[len("KEY_"):]
        for side in ("LEFT", "RIGHT"):
            if name.startswith(side) and len(name) > len(side):
                name = name[len(side):]
                break
        name = _ALIASES.get(name, name)
        return cls.__members__.get(name)


_ORDER = list(Modifier)
