#!/usr/bin/env python3
"""config-lite: inspect and edit INI-style configuration files

Usage:
    config-lite dump settings.ini
    config-lite get settings.ini db host --default localhost
    config-lite get settings.ini app debug --bool
    config-lite set settings.ini db port 5432
    config-lite remove settings.ini db port
    config-lite remove settings.ini db
"""

import argparse
import logging
import sys

from .config import config
from .core.store import ConfigStore
from .core.values import parse_bool
from .errors import ConfigLiteError, InvalidBooleanError


def _open_existing(path: str) -> ConfigStore:
    store = ConfigStore()
    store.load(path)
    return store


def cmd_dump(args) -> int:
    print(_open_existing(args.path).to_text(), end="")
    return 0


def cmd_get(args) -> int:
    store = _open_existing(args.path)
    if args.bool:
        default = None
        if args.default is not None:
            default = parse_bool(args.default)
            if default is None:
                raise InvalidBooleanError(f"Not a boolean default: {args.default}")
        print(store.to("bool", store.get_bool(args.section, args.key, default)))
    else:
        print(store.get_string(args.section, args.key, args.default))
    return 0


def cmd_set(args) -> int:
    # Missing files are created on save
    store = ConfigStore(args.path)
    if args.string:
        store.set_string(args.section, args.key, args.value)
    else:
        store.set(args.section, args.key, args.value)
    store.save()
    return 0


def cmd_remove(args) -> int:
    store = _open_existing(args.path)
    if args.key is None:
        store.remove_section(args.section)
    else:
        store.remove(args.section, args.key)
    store.save()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="config-lite",
        description="Inspect and edit INI-style configuration files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    dump_parser = subparsers.add_parser("dump", help="Print the configuration")
    dump_parser.add_argument("path")
    dump_parser.set_defaults(func=cmd_dump)

    get_parser = subparsers.add_parser("get", help="Print a single value")
    get_parser.add_argument("path")
    get_parser.add_argument("section")
    get_parser.add_argument("key")
    get_parser.add_argument("--default", help="Value printed when the key is missing")
    get_parser.add_argument("--bool", action="store_true", help="Read the value as yes/no")
    get_parser.set_defaults(func=cmd_get)

    set_parser = subparsers.add_parser("set", help="Set a value and save")
    set_parser.add_argument("path")
    set_parser.add_argument("section")
    set_parser.add_argument("key")
    set_parser.add_argument("value")
    set_parser.add_argument("--string", action="store_true", help="Escape quotes in the value")
    set_parser.set_defaults(func=cmd_set)

    remove_parser = subparsers.add_parser("remove", help="Remove a key or a whole section and save")
    remove_parser.add_argument("path")
    remove_parser.add_argument("section")
    remove_parser.add_argument("key", nargs="?")
    remove_parser.set_defaults(func=cmd_remove)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if (args.verbose or config.DEBUG) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except ConfigLiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
