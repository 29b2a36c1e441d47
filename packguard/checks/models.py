"""Result types shared by the pack checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from packguard.policy import format_megabytes

IMAGE_COUNT = "image_count"
FILE_SIZE = "file_size"
EXTENSION = "extension"


@dataclass(frozen=True)
class Violation:
    """One offending path and the measured value that failed."""

    kind: str
    path: str
    value: int | float | None = None

    def describe(self) -> str:
        if self.kind == IMAGE_COUNT:
            return f"{self.path}: {self.value} images"
        if self.kind == FILE_SIZE and self.value is not None:
            return f"{self.path}: {format_megabytes(self.value)}"
        return self.path

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "path": self.path, "value": self.value}


@dataclass
class CheckResult:
    """Outcome of a single check."""

    name: str
    message: str
    violations: list[Violation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def subject(self) -> str:
        """What the diagnostic header refers to."""
        return "directories" if self.name == IMAGE_COUNT else "images"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "message": self.message,
            "violations": [v.to_dict() for v in self.violations],
        }
