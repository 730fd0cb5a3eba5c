import argparse
import os
import sys

from . import config_api, version
from .config_api import ConfigError
from .devices import DeviceFilter, Devices, KeyboardNotFound, find_first_keyboard
from .input import main_loop
from .lib import logger
from .lib.logger import error, info
from .manager import ComboManager


def default_config_path():
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return os.path.join(config_home, "keycombos", "config.py")


def build_parser():
    parser = argparse.ArgumentParser(prog="keycombos", description=version.__description__)
    parser.add_argument("-c", "--config", dest="config", metavar="config.py",
                        default=default_config_path(),
                        help="config file (default: %(default)s)")
    parser.add_argument("-d", "--devices", dest="devices", metavar="device", nargs="+",
                        help="keyboard device path or name to use instead of autodetecting")
    parser.add_argument("--list-devices", dest="list_devices", action="store_true",
                        help="list input devices and exit")
    parser.add_argument("--check", dest="check", action="store_true",
                        help="load the config, print its bindings and exit")
    parser.add_argument("-v", "--verbose", dest="verbose", action="store_true",
                        help="print key events and firings")
    parser.add_argument("--version", action="version",
                        version=f"{version.__name__} v{version.__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger.VERBOSE = args.verbose

    if args.list_devices:
        Devices.print_list()
        return 0

    try:
        config = config_api.load_config(args.config)
    except ConfigError as e:
        error(e)
        return 1

    manager = config_api.apply_configuration(ComboManager(), config)
    info(f"Loaded {len(manager.bindings)} binding(s) from {args.config}")

    if args.check:
        for combo in manager.bindings:
            print(combo)
        return 0

    try:
        device = find_first_keyboard(DeviceFilter(args.devices or config.devices))
    except KeyboardNotFound as e:
        error(e)
        return 1

    main_loop(manager, device)
    return 0


if __name__ == "__main__":
    sys.exit(main())
