__name__ = "keycombos"

__version__ = "0.3.0"

__description__ = "Fire callbacks on global key combinations under Linux (evdev)."

__doc__ = """
``keycombos`` watches a physical keyboard through ``evdev`` and runs your
Python functions when a key combination like ``Ctrl+Alt+T`` goes down.

- Works from the console, X11 or Wayland, since it reads ``/dev/input``
  directly (read-only, the keyboard is never grabbed).
- Bindings live in a plain Python config file: ``bind("Ctrl+Alt+T", fn)``.
- Left and right modifiers are interchangeable, ``LeftCtrl`` is ``Ctrl``.
- Optional repeat suppression: a held combo fires once until its key is
  released.
"""
