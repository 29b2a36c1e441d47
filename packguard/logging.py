"""Centralized logging helpers for the CLI and check pipeline."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PACKGUARD_LOG_LEVEL"

_configured = False


def _resolve_level() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def _stderr_handler() -> logging.Handler:
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("%(message)s"))
    return h


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set packguard.* logger level from CLI flags; flags override the env.

    Rebinds the handler to the current sys.stderr on every call.
    """
    global _configured
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _resolve_level()
    root = logging.getLogger("packguard")
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(_stderr_handler())
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return packguard.<name>; writes plain messages to stderr via the package logger."""
    root = logging.getLogger("packguard")
    if not _configured and not root.handlers:
        root.setLevel(_resolve_level())
        root.addHandler(_stderr_handler())
        root.propagate = False
    return logging.getLogger(f"packguard.{name}")
