"""
Functions available to a keycombos config file.

The config file is plain Python executed with this module's namespace, so
a config looks like::

    suppress_repeats()
    bind("Ctrl+Alt+T", launch(["gnome-terminal"]))
    bind("Meta+L", lambda: print("lock"))
"""

import subprocess

from typing import Callable, List, NamedTuple, Tuple

from .lib.logger import debug, error
from .models.combo import InvalidCombo, normalize_combo


class ConfigError(Exception):
    pass


class Configuration(NamedTuple):
    bindings: Tuple[Tuple[str, Callable[[], None]], ...]
    suppress_repeats: bool
    devices: Tuple[str, ...]


_BINDINGS: List[Tuple[str, Callable[[], None]]] = []
_SUPPRESS_REPEATS = False
_DEVICES: List[str] = []


def reset_configuration():
    global _BINDINGS
    global _SUPPRESS_REPEATS
    global _DEVICES
    _BINDINGS           = []
    _SUPPRESS_REPEATS   = False
    _DEVICES            = []


def get_configuration():
    return Configuration(tuple(_BINDINGS), _SUPPRESS_REPEATS, tuple(_DEVICES))


def apply_configuration(manager, config: Configuration = None):
    config = config or get_configuration()
    if config.suppress_repeats:
        manager.suppress_repeats()
    for combo, fn in config.bindings:
        manager.register_binding(combo, fn)
    return manager


def load_config(path):
    """Execute a config file, collecting what it declares."""
    reset_configuration()
    try:
        with open(path, "rb") as file:
            source = file.read()
    except OSError as e:
        raise ConfigError(f"Can't read config '{path}': {e}") from e
    try:
        exec(compile(source, path, "exec"), globals())
    except ConfigError:
        raise
    except InvalidCombo as e:
        raise ConfigError(f"Bad combo in '{path}': {e}") from e
    except Exception as e:
        raise ConfigError(f"Error running config '{path}': {e!r}") from e
    return get_configuration()


# ─── CONFIG API ─────────────────────────────────────────────────────────────


def bind(combo, fn):
    """Bind a zero-argument function to a combo like "Ctrl+Alt+T"."""
    norm = normalize_combo(combo)
    if not callable(fn):
        raise ConfigError(f"Binding for {norm} is not callable: {fn!r}")
    _BINDINGS.append((norm, fn))
    return norm


def suppress_repeats():
    global _SUPPRESS_REPEATS
    _SUPPRESS_REPEATS = True


def devices_api(matches):
    """Restrict the keyboard to a device path or name (first match wins)."""
    if isinstance(matches, str):
        matches = [matches]
    _DEVICES.extend(matches)


def launch(command):
    """Return a function that starts ``command`` (a list) in the background."""

    def _launch():
        debug(f"Launching {command}")
        try:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            error(f"Failed to launch {command}: {e}")

    return _launch
