#!/usr/bin/env python3
"""Thin entrypoint for dpick."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from _version import __version__
from config import load_config
from models import ValidationError, format_date, parse_date
from orchestrator import Orchestrator


def _print_help() -> None:
    print(
        "dpick - terminal date picker\n\n"
        "Usage:\n"
        "  dpick                  Launch curses picker, print the picked date on exit\n"
        "  dpick -h               Show this help\n"
        "  dpick -v               Show installed version\n"
        '  dpick -s "<YYYY-MM-DD>"  Start with this date selected\n'
        '  dpick -e "<path>"        Use this events file instead of the configured one\n'
        '  dpick -t "<YYYY-MM-DD>"  Treat this date as today\n'
    )


def parse_args(argv: Sequence[str]) -> tuple[dict[str, str], bool, bool]:
    flags: dict[str, str] = {}
    show_version = False
    show_help = False

    value_flags = {
        "-s": "a date argument",
        "-e": "a path argument",
        "-t": "a date argument",
    }

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
            idx += 1
            continue
        if arg == "-v":
            show_version = True
            idx += 1
            continue
        if arg in value_flags:
            idx += 1
            if idx >= len(argv):
                raise ValidationError(f"{arg} requires {value_flags[arg]}")
            flags[arg[1:]] = argv[idx]
            idx += 1
            continue
        raise ValidationError(f"Unknown flag '{arg}'")
    return flags, show_version, show_help


def main(argv: list[str] | None = None) -> int:
    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")

    if argv is None:
        argv = sys.argv[1:]

    try:
        flag_values, show_version, show_help = parse_args(argv)
        selected = parse_date(flag_values["s"]) if "s" in flag_values else None
        pinned_today = parse_date(flag_values["t"]) if "t" in flag_values else None
    except ValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if show_version:
        print(__version__)
        return 0

    if show_help:
        _print_help()
        return 0

    try:
        config = load_config(flag_values.get("e"))
    except OSError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1

    if pinned_today is not None:
        fixed = pinned_today.to_date()
        orchestrator = Orchestrator(config, selected=selected, today=lambda: fixed)
    else:
        orchestrator = Orchestrator(config, selected=selected)

    code = orchestrator.run()

    if code == 0 and orchestrator.selection is not None:
        print(format_date(orchestrator.selection))
    return code


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
