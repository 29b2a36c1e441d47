"""
packguard CLI

Entry point: environment loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from cli.wiring.dispatch import dispatch_command
from cli.wiring.parser import build_parser
from packguard import __version__


def _load_environment(env_file: Path | None = None) -> bool:
    """Load .env (default: working directory); values override the shell environment."""
    path = env_file if env_file is not None else Path.cwd() / ".env"
    if not path.is_file():
        return False
    return load_dotenv(path, override=True)


def _build_parser() -> argparse.ArgumentParser:
    return build_parser(version=__version__)


def main(argv: list[str] | None = None) -> int:
    _load_environment()
    parser = _build_parser()
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    raise SystemExit(main())
