"""Pipeline failure signal: marks the hosting CI step as failed."""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

from packguard.logging import get_logger


class PipelineSignal(Protocol):
    failures: list[str]

    def set_failed(self, message: str) -> None: ...


def escape_command_data(message: str) -> str:
    """Escape a workflow command payload (%, CR, LF)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsSignal:
    """Emit ``::error::`` workflow commands for GitHub Actions."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.failures: list[str] = []

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
        stream = self._stream or sys.stdout
        stream.write(f"::error::{escape_command_data(message)}\n")
        stream.flush()


class LogSignal:
    """Local runs: report failures through the packguard logger."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def set_failed(self, message: str) -> None:
        self.failures.append(message)
        get_logger("signal").error("error: %s", message)


def default_signal() -> PipelineSignal:
    """ActionsSignal inside GitHub Actions (GITHUB_ACTIONS=true), LogSignal otherwise."""
    if os.environ.get("GITHUB_ACTIONS", "").strip().lower() == "true":
        return ActionsSignal()
    return LogSignal()
