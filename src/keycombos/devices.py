import os

from evdev import InputDevice, ecodes, list_devices

from .lib.logger import debug, error, info, warn


def check_input_permissions():
    """Check if user can read at least one event device under /dev/input/"""

    if not os.path.exists('/dev/input'):
        return False, "'/dev/input/' directory does not exist"

    try:
        device_files = sorted(f for f in os.listdir('/dev/input') if f.startswith('event'))
        if not device_files:
            return True, "No event devices found, but '/dev/input/' is accessible"

        for file in device_files:
            # Read access is all we need, the keyboard is never grabbed
            if os.access(f'/dev/input/{file}', os.R_OK):
                return True, None

        return False, f"No read permission on any of {len(device_files)} event devices"

    except PermissionError as e:
        return False, f"Permission error accessing '/dev/input/': {e}"


class Devices:
    @staticmethod
    def is_keyboard(device: InputDevice):
        """Guess the device is a keyboard or not"""
        capabilities = device.capabilities(verbose=False)
        # Real keyboards report key repeat, most buttons and switches don't
        if ecodes.EV_KEY not in capabilities or ecodes.EV_REP not in capabilities:
            return False
        return "keyboard" in (device.name or "").lower()

    @staticmethod
    def all():
        devices = []
        for path in list_devices():
            try:
                devices.append(InputDevice(path))
            except OSError as e:
                # unplugged mid-scan or no permission on this node
                warn(f"Skipping '{path}': {e}")
        return devices

    @staticmethod
    def print_list():
        devices = Devices.all()

        DEVICE_WIDTH = 20
        NAME_WIDTH = 35

        max_phys_length = max([len(device.phys or "") for device in devices], default=4)
        total_width = DEVICE_WIDTH + NAME_WIDTH + max_phys_length + 3

        print("-" * total_width)
        print(f"{'Device':<{DEVICE_WIDTH}} {'Name':<{NAME_WIDTH}} {'Phys'}")
        print("-" * total_width)

        for device in devices:
            if len(device.name) > NAME_WIDTH:
                print(f"{device.path:<{DEVICE_WIDTH}} {device.name[:NAME_WIDTH]:<{NAME_WIDTH}}")
                print(f"{'':<{DEVICE_WIDTH + NAME_WIDTH}} {device.phys}")
            else:
                print(f"{device.path:<{DEVICE_WIDTH}} {device.name:<{NAME_WIDTH}} {device.phys}")
            device.close()

        print()


class KeyboardNotFound(IOError):
    pass


class DeviceFilter:
    def __init__(self, matches=None):
        self.matches = list(matches or [])
        if not self.matches:
            info("Autodetecting keyboard (no '--devices' option or 'devices_api' used)")

    def filter(self, device: InputDevice):
        # Match by device path or name, if no devices specified,
        # picks up keyboard-ish devices.
        if self.matches:
            for match in self.matches:
                if device.path == match or device.name == match:
                    return True
            return False

        return Devices.is_keyboard(device)


def find_first_keyboard(filterer: DeviceFilter = None) -> InputDevice:
    """Open the first input device the filter accepts, closing the rest."""
    filterer = filterer or DeviceFilter()

    perms_ok, perms_msg = check_input_permissions()
    if not perms_ok:
        error(f"Input permission issue: {perms_msg}")
        error("Please ensure you have read permission on /dev/input/*")
        raise KeyboardNotFound(perms_msg)

    candidates = Devices.all()
    if not candidates:
        raise KeyboardNotFound("No input devices found at all in /dev/input/*")

    found = None
    for device in candidates:
        if found is None and filterer.filter(device):
            found = device
            continue
        device.close()

    if found is None:
        if filterer.matches:
            raise KeyboardNotFound(f"Specified device(s) not found: {', '.join(filterer.matches)}")
        debug(f"Found {len(candidates)} non-keyboard input devices")
        raise KeyboardNotFound("No keyboard devices detected among available input devices")

    info(f"Using '{found.name}' ({found.path})", ctx="+K")
    return found
