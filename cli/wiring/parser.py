"""Parser wiring extracted from packguard_cli entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path

from packguard.policy import DEFAULT_BASE_PATH


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="packguard",
        description="packguard: validate image assets in pack directories",
        epilog="Run without arguments to check the default packs directory.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    subparsers = parser.add_subparsers(dest="command")

    _add_check_command(subparsers)
    subparsers.add_parser("help", help="Show packguard command overview")

    return parser


def _add_check_command(subparsers: argparse._SubParsersAction) -> None:
    check_parser = subparsers.add_parser(
        "check",
        help="Run image count, file size and extension checks",
    )
    check_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        type=Path,
        help=f"Packs directory (default: {DEFAULT_BASE_PATH})",
    )
    check_parser.add_argument("--json", action="store_true", help="Print JSON report to stdout (machine-readable)")
    check_parser.add_argument(
        "--color",
        action="store_true",
        default=None,
        dest="color",
        help="Force rich summary table (default: auto from TTY)",
    )
    check_parser.add_argument("--no-color", action="store_false", dest="color", help="Plain text summary")
    check_parser.add_argument("--quiet", "-q", action="store_true", help="Only violations and errors")
    check_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
