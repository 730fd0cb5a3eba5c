import asyncio
import os
import signal

from evdev import ecodes
from lib.device_stub import DeviceStub, key, syn

from keycombos.input import async_pump, key_events, main_loop, pump, translate
from keycombos.manager import ComboManager
from keycombos.models.action import Action
from keycombos.models.keyevent import KeyEvent


def collecting_manager(combo):
    fired = []
    manager = ComboManager(dispatch=lambda fn: fn())
    manager.register_binding(combo, lambda: fired.append(combo))
    return manager, fired


def test_translate_key_events():
    assert KeyEvent("KEY_A", Action.PRESS) == translate(key(ecodes.KEY_A, 1))
    assert KeyEvent("KEY_A", Action.RELEASE) == translate(key(ecodes.KEY_A, 0))
    assert KeyEvent("KEY_LEFTCTRL", Action.HOLD) == translate(key(ecodes.KEY_LEFTCTRL, 2))

def test_translate_skips_non_key_events():
    assert translate(syn()) is None

def test_translate_skips_unknown_values():
    assert translate(key(ecodes.KEY_A, 3)) is None

def test_translate_skips_unknown_codes():
    assert translate(key(1000, 1)) is None

def test_translate_skips_range_markers():
    assert "KEY_MUTE" == translate(key(ecodes.KEY_MUTE, 1)).key

def test_translate_is_stable_across_aliases():
    assert translate(key(ecodes.KEY_SCREENLOCK, 1)) == translate(key(ecodes.KEY_COFFEE, 1))

def test_aliased_keys_fire_their_bindings():
    for combo, code in [("meta+mute", ecodes.KEY_MUTE),
                        ("meta+screenlock", ecodes.KEY_SCREENLOCK),
                        ("meta+coffee", ecodes.KEY_SCREENLOCK),
                        ("meta+brightness_zero", ecodes.KEY_BRIGHTNESS_ZERO)]:
        manager, fired = collecting_manager(combo)
        device = DeviceStub([key(ecodes.KEY_LEFTMETA, 1), key(code, 1)])
        pump(manager, key_events(device))
        assert [combo] == fired

def test_key_events_filters_and_closes():
    device = DeviceStub([key(ecodes.KEY_A, 1), syn(), key(ecodes.KEY_A, 0), syn()])
    events = list(key_events(device))
    assert [KeyEvent.press("KEY_A"), KeyEvent.release("KEY_A")] == events
    assert device.closed

def test_key_events_end_when_device_unplugged():
    device = DeviceStub([key(ecodes.KEY_B, 1)], unplug=True)
    assert [KeyEvent.press("KEY_B")] == list(key_events(device))
    assert device.closed

def test_pump_drives_manager():
    manager, fired = collecting_manager("ctrl+alt+t")
    device = DeviceStub([
        key(ecodes.KEY_LEFTCTRL, 1), syn(),
        key(ecodes.KEY_LEFTALT, 1), syn(),
        key(ecodes.KEY_T, 1), syn(),
        key(ecodes.KEY_T, 2), syn(),
        key(ecodes.KEY_T, 0), syn(),
    ], unplug=True)
    assert 5 == pump(manager, key_events(device))
    assert ["ctrl+alt+t"] == fired
    assert {"KEY_LEFTCTRL", "KEY_LEFTALT"} == manager.pressed_keys

async def test_async_pump_stops_on_unplug():
    manager, fired = collecting_manager("meta+l")
    device = DeviceStub([
        key(ecodes.KEY_RIGHTMETA, 1),
        key(ecodes.KEY_L, 1),
    ], unplug=True)
    assert 2 == await async_pump(manager, device)
    assert ["meta+l"] == fired
    assert device.closed

def test_main_loop_ends_when_device_lost(capsys):
    manager, fired = collecting_manager("ctrl+t")
    device = DeviceStub([
        key(ecodes.KEY_LEFTCTRL, 1),
        key(ecodes.KEY_T, 1),
        key(ecodes.KEY_T, 0),
    ], unplug=True)
    main_loop(manager, device)
    asyncio.set_event_loop(None)
    assert device.closed
    assert ["ctrl+t"] == fired
    assert {"KEY_LEFTCTRL"} == manager.pressed_keys
    out = capsys.readouterr().out
    assert "(-K) Lost 'Stub Keyboard'" in out
    assert "(--) Input device closed, stopping." in out

def test_main_loop_stops_on_signal(capsys):
    manager, fired = collecting_manager("ctrl+t")
    device = DeviceStub([key(ecodes.KEY_LEFTCTRL, 1)],
                        idle=lambda: os.kill(os.getpid(), signal.SIGINT))
    main_loop(manager, device)
    asyncio.set_event_loop(None)
    assert device.closed
    assert [] == fired
    assert {"KEY_LEFTCTRL"} == manager.pressed_keys
    assert "(--) Signal received, stopping." in capsys.readouterr().out
    # handlers removed again
    assert signal.default_int_handler == signal.getsignal(signal.SIGINT)
    assert signal.SIG_DFL == signal.getsignal(signal.SIGTERM)
