"""CLI command handlers (check, help)."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from packguard import __version__
from packguard.logging import get_logger
from packguard.pipeline import run_checks
from packguard.policy import DEFAULT_POLICY, ImagePolicy
from packguard.reporting.signal import ActionsSignal, PipelineSignal, default_signal
from packguard.reporting.summary import format_summary_text, render_summary


def _clog() -> Any:
    return get_logger("cli")


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("packguard: %s", msg)


def _check_path(path: Path, must_be_dir: bool = True) -> int:
    """Return 0 if path is valid, 1 and log error otherwise."""
    if not path.exists():
        _err(f"path does not exist: {path}")
        return 1
    if must_be_dir and (not path.is_dir()):
        _err(f"not a directory: {path}")
        return 1
    return 0


def _policy_from_args(args: Any) -> ImagePolicy:
    raw = getattr(args, "path", None)
    if raw is None:
        return DEFAULT_POLICY
    return DEFAULT_POLICY.with_base_path(str(raw))


def _use_rich(args: Any) -> bool:
    color = getattr(args, "color", None)
    if color is not None:
        return color
    return sys.stderr.isatty()


def _signal_for(args: Any) -> PipelineSignal:
    """Keep stdout clean for --json: workflow commands go to stderr."""
    signal = default_signal()
    if getattr(args, "json", False) and isinstance(signal, ActionsSignal):
        return ActionsSignal(stream=sys.stderr)
    return signal


def handle_help(parser: Any) -> int:
    """Print command overview and detailed argparse help."""
    print(f"packguard {__version__}: image asset policy checks for pack directories")
    print()
    print("Commands:")
    print("  check [path]   image count, file size and extension checks")
    print(f"                 (default path: {DEFAULT_POLICY.base_path})")
    print("  help           this overview")
    print()
    print("Policy:")
    print(f"  max images per directory: {DEFAULT_POLICY.max_images_per_dir}")
    print(f"  max image size: {DEFAULT_POLICY.max_file_size} bytes")
    print(f"  allowed extensions: {', '.join(DEFAULT_POLICY.allowed_extensions)}")
    print()
    parser.print_help()
    return 0


def handle_check(args: Any) -> int:
    """Run all checks; 0 when every check passes, 1 otherwise."""
    policy = _policy_from_args(args)
    if _check_path(Path(policy.base_path)) != 0:
        return 1

    _clog().info("packguard: checking %s", policy.base_path)
    try:
        report = run_checks(policy, signal=_signal_for(args))
    except OSError as exc:
        _err(f"cannot read {exc.filename or policy.base_path}: {exc.strerror or exc}")
        return 1

    if getattr(args, "json", False):
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    elif _use_rich(args):
        render_summary(report, Console(file=sys.stderr))
    else:
        _clog().info(format_summary_text(report))

    return 0 if report.passed else 1
