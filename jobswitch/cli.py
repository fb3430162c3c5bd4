"""Fast Job Switcher – unified CLI dispatcher.

All subcommands live in ``jobswitch/commands/*.py`` and expose a
``register(subparsers)`` function that adds themselves to argparse.
"""
from __future__ import annotations

import argparse
import logging
import sys

from shared.runtime_settings import load_runtime_settings


def _configure_logging(verbose: int) -> None:
    level = load_runtime_settings().log_level
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="jobswitch",
        description="Fast Job Switcher — switch class/job and Phantom Job by short chat commands",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (-vv for debug)")
    sub = parser.add_subparsers(dest="command")

    from jobswitch.commands.registry import register_all

    register_all(sub)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    _configure_logging(args.verbose)

    # Each command stores a ``func`` on the namespace
    rc = args.func(args)
    sys.exit(rc or 0)
