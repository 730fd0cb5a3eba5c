from typing import Optional

from evdev import ecodes


def _is_marker(name):
    # range markers like KEY_MIN_INTERESTING, KEY_MAX, KEY_CNT
    return "_MIN_" in name or name.endswith(("_MAX", "_CNT"))


def code_name(code: int) -> Optional[str]:
    """
    The one evdev name used for a key code, None for unknown codes.

    evdev lists every alias of a code (KEY_MUTE is also KEY_MIN_INTERESTING,
    KEY_SCREENLOCK is also KEY_COFFEE). Markers are skipped, then the first
    remaining name wins.
    """
    names = ecodes.keys.get(code)
    if names is None:
        return None
    if isinstance(names, str):
        return names
    real = [n for n in names if not _is_marker(n)]
    return (real or list(names))[0]


def resolve_name(name: str) -> str:
    """
    Map any alias of a key to its ``code_name``: ``KEY_SCREENLOCK`` and
    ``SCREENLOCK`` both give ``KEY_COFFEE``. Names evdev doesn't know are
    returned unchanged, uppercased.
    """
    name = name.strip().upper()
    for candidate in (name, f"KEY_{name}"):
        if not candidate.startswith(("KEY_", "BTN_")):
            continue
        code = ecodes.ecodes.get(candidate)
        if code is not None and code in ecodes.keys:
            return code_name(code)
    return name
