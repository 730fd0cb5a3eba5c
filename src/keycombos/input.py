import signal
import asyncio

from typing import Iterable, Optional

from evdev import InputDevice, InputEvent, ecodes

from .lib import logger
from .lib.asyncio_utils import get_or_create_event_loop
from .lib.logger import debug, info
from .manager import ComboManager
from .models.action import Action
from .models.key import code_name
from .models.keyevent import KeyEvent


def translate(event: InputEvent) -> Optional[KeyEvent]:
    """KeyEvent for an evdev EV_KEY event, None for anything else."""
    if event.type != ecodes.EV_KEY:
        return None
    try:
        action = Action(event.value)
    except ValueError:
        return None
    name = code_name(event.code)
    if name is None:
        return None
    return KeyEvent(name, action)


def key_events(device: InputDevice):
    """Blocking generator of KeyEvents, ends when the device goes away."""
    try:
        for event in device.read_loop():
            key_event = translate(event)
            if key_event is not None:
                yield key_event
    except OSError as e:
        info(f"Lost '{device.name}': {e}", ctx="-K")
    finally:
        device.close()


async def async_key_events(device: InputDevice):
    try:
        async for event in device.async_read_loop():
            key_event = translate(event)
            if key_event is not None:
                yield key_event
    except OSError as e:
        info(f"Lost '{device.name}': {e}", ctx="-K")
    finally:
        device.close()


def pump(manager: ComboManager, events: Iterable[KeyEvent]):
    count = 0
    for event in events:
        if logger.VERBOSE:
            debug(f"IN: {event}")
        manager.handle_event(event)
        count += 1
    return count


async def async_pump(manager: ComboManager, device: InputDevice):
    count = 0
    async for event in async_key_events(device):
        if logger.VERBOSE:
            debug(f"IN: {event}")
        manager.handle_event(event)
        count += 1
    return count


def shutdown(task):
    task.cancel()


def main_loop(manager: ComboManager, device: InputDevice):
    loop = get_or_create_event_loop()
    task = loop.create_task(async_pump(manager, device))
    loop.add_signal_handler(signal.SIGINT, shutdown, task)
    loop.add_signal_handler(signal.SIGTERM, shutdown, task)
    info("Ready to process input.")
    try:
        loop.run_until_complete(task)
        info("Input device closed, stopping.")
    except asyncio.CancelledError:
        info("Signal received, stopping.")
    finally:
        loop.remove_signal_handler(signal.SIGINT)
        loop.remove_signal_handler(signal.SIGTERM)
        loop.close()
