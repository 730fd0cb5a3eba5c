import asyncio
import errno

from evdev import ecodes
from evdev.events import InputEvent


def key(code, value):
    return InputEvent(0, 0, ecodes.EV_KEY, code, value)


def syn():
    return InputEvent(0, 0, ecodes.EV_SYN, ecodes.SYN_REPORT, 0)


class DeviceStub:
    """
    Stands in for evdev.InputDevice: replays a fixed list of events, then
    either stops, fails like an unplugged device (ENODEV), or calls ``idle``
    and waits forever like a keyboard nobody is typing on.
    """
    def __init__(self, events=(), name="Stub Keyboard", path="/dev/input/event99",
                 capabilities=None, unplug=False, idle=None):
        self.name = name
        self.path = path
        self.phys = "stub/input0"
        self._events = list(events)
        self._capabilities = capabilities if capabilities is not None else {
            ecodes.EV_SYN: [], ecodes.EV_KEY: [ecodes.KEY_A], ecodes.EV_REP: []
        }
        self._unplug = unplug
        self._idle = idle
        self.closed = False

    def capabilities(self, verbose=False):
        return self._capabilities

    def read_loop(self):
        yield from self._events
        if self._unplug:
            raise OSError(errno.ENODEV, "No such device")

    async def async_read_loop(self):
        for event in self._events:
            yield event
        if self._unplug:
            raise OSError(errno.ENODEV, "No such device")
        if self._idle is not None:
            self._idle()
            await asyncio.Event().wait()

    def close(self):
        self.closed = True
