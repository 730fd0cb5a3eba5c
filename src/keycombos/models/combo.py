"""
Combo strings.

A combo is written as ``+`` separated tokens, any case, in any order, e.g.
``"alt+Ctrl+t"``. Its normalized form is what the manager matches against:
uppercase, modifiers collapsed to CTRL, ALT, SHIFT or META and listed in
that order, then the single non-modifier key with any ``KEY_`` prefix
removed, e.g. ``"CTRL+ALT+T"``.
"""

from typing import Iterable

from .key import resolve_name
from .modifier import Modifier

SEPARATOR = "+"


class InvalidCombo(ValueError):
    pass


def key_name(key: str) -> str:
    """
    Display/match name of a key: ``KEY_PAGEUP`` -> ``PAGEUP``.

    Aliases collapse to one name, so ``SCREENLOCK`` and ``KEY_COFFEE`` are
    the same key.
    """
    name = resolve_name(key)
    if name.startswith("KEY_"):
        name = name[len("KEY_"):]
    return name


def canonical_name(key: str) -> str:
    mod = Modifier.from_key(key)
    if mod is not None:
        return mod.name
    return key_name(key)


def build_combo(modifiers: Iterable[Modifier], key: str) -> str:
    mods = sorted(set(modifiers), key=lambda m: m.rank)
    return SEPARATOR.join([m.name for m in mods] + [key_name(key)])


def trailing_key(combo: str) -> str:
    return combo.rsplit(SEPARATOR, 1)[-1]


def normalize_combo(text: str) -> str:
    if not text or not text.strip():
        raise InvalidCombo("Combo cannot be empty")

    tokens = [t.strip() for t in text.split(SEPARATOR)]
    if not all(tokens):
        raise InvalidCombo(f"Empty key name in combo '{text}'")

    modifiers = []
    keys = []
    for token in tokens:
        mod = Modifier.from_token(token)
        if mod is not None:
            modifiers.append(mod)
        else:
            keys.append(token)

    if not keys:
        raise InvalidCombo(f"Combo '{text}' has no non-modifier key")
    if len(set(key_name(k) for k in keys)) > 1:
        raise InvalidCombo(f"Combo '{text}' has more than one non-modifier key")

    return build_combo(modifiers, keys[0])
