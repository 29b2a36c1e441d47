"""CLI command dispatch wiring extracted from packguard_cli."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers
from packguard.logging import configure_cli_logging


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler.

    No subcommand means ``check`` with defaults.
    """
    quiet = getattr(args, "quiet", False)
    verbose = getattr(args, "verbose", False)
    configure_cli_logging(quiet=quiet, verbose=verbose)

    if args.command is None:
        return handlers.handle_check(args)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "check": lambda: handlers.handle_check(args),
    }
    if args.command in dispatch:
        return dispatch[args.command]()

    parser.print_help()
    return 1
