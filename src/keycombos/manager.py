import threading
import traceback

from typing import Callable, Dict, Optional, Set

from .lib import logger
from .lib.logger import debug, error
from .models.action import Action
from .models.combo import (build_combo, canonical_name, normalize_combo,
                            trailing_key)
from .models.keyevent import KeyEvent
from .models.modifier import Modifier

Callback = Callable[[], None]


def spawn_thread(fn: Callback):
    threading.Thread(target=fn, name="keycombos-callback", daemon=True).start()


class ComboManager:
    """
    Matches a stream of key events against registered combos.

    Keeps the set of keys currently down and calls the bound function when a
    non-modifier key is pressed while exactly the bound modifiers are held.
    Callbacks never run on the caller's thread: they are handed to
    ``dispatch`` (a new daemon thread per call by default) after the state
    lock is released, so a slow callback can't stall the event stream and a
    callback may register more bindings.
    """

    def __init__(self, dispatch: Optional[Callable[[Callback], None]] = None):
        self._bindings: Dict[str, Callback] = {}
        self._pressed: Set[str] = set()
        self._fired: Set[str] = set()
        self._suppress_repeats = False
        self._dispatch = dispatch or spawn_thread
        self._lock = threading.Lock()

    def suppress_repeats(self):
        """Fire each combo once until its trailing key is released."""
        with self._lock:
            self._suppress_repeats = True

    def register_binding(self, combo: str, callback: Callback) -> str:
        """
        Bind ``callback`` to ``combo`` (e.g. "CTRL+ALT+T", "meta+l").

        Replaces any binding with the same normalized combo and returns the
        normalized form. Raises InvalidCombo for empty or modifier-only
        combos.
        """
        norm = normalize_combo(combo)
        with self._lock:
            replaced = norm in self._bindings
            self._bindings[norm] = callback
        debug(f"{'Rebound' if replaced else 'Bound'} combo {norm}")
        return norm

    def handle_event(self, event: KeyEvent):
        callback = None
        with self._lock:
            combo = self._update(event)
            if combo is not None:
                callback = self._bindings.get(combo)

        if callback is not None:
            if logger.VERBOSE:
                debug(f"Firing {combo}")
            self._dispatch(lambda: self._run(combo, callback))

    def _update(self, event: KeyEvent):
        """Apply one event to the key state, returning the combo to fire."""
        key = event.key
        try:
            action = Action(event.action)
        except ValueError:
            return None

        if action.is_hold:
            return None
        elif action.just_pressed:
            self._pressed.add(key)
        elif action.is_released:
            self._pressed.discard(key)
            if self._suppress_repeats:
                suffix = canonical_name(key)
                self._fired = {c for c in self._fired if trailing_key(c) != suffix}
            return None

        if Modifier.is_key_modifier(key):
            return None

        mods = [Modifier.from_key(k) for k in self._pressed]
        combo = build_combo([m for m in mods if m is not None], key)

        if self._suppress_repeats:
            if combo in self._fired:
                return None
            # tracked even when nothing is bound to it
            self._fired.add(combo)

        return combo

    @staticmethod
    def _run(combo: str, callback: Callback):
        try:
            callback()
        except Exception:
            error(f"Callback for {combo} raised:")
            traceback.print_exc()

    @property
    def repeats_suppressed(self):
        with self._lock:
            return self._suppress_repeats

    @property
    def pressed_keys(self):
        with self._lock:
            return frozenset(self._pressed)

    @property
    def fired_combos(self):
        with self._lock:
            return frozenset(self._fired)

    @property
    def bindings(self):
        with self._lock:
            return tuple(self._bindings)
