"""Run every pack check against one enumeration of the base path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from packguard.checks import (
    CheckResult,
    check_file_sizes,
    check_image_counts,
    check_image_extensions,
)
from packguard.fs import FileInspector, LocalFileInspector
from packguard.logging import get_logger
from packguard.policy import DEFAULT_POLICY, ImagePolicy
from packguard.reporting.signal import PipelineSignal, default_signal

CHECKS = (check_image_counts, check_file_sizes, check_image_extensions)


@dataclass
class PipelineReport:
    """Aggregated outcome of one run."""

    base_path: str
    entries: int
    results: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed_checks(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_path": self.base_path,
            "entries": self.entries,
            "passed": self.passed,
            "checks": [r.to_dict() for r in self.results],
        }


def report_failure(result: CheckResult, signal: PipelineSignal) -> None:
    """Signal one failed check and list its violations on the warning stream."""
    log = get_logger("pipeline")
    signal.set_failed(result.message)
    log.warning("\nPlease check the following %s:", result.subject)
    for v in result.violations:
        log.warning(v.describe())


def run_checks(
    policy: ImagePolicy = DEFAULT_POLICY,
    inspector: FileInspector | None = None,
    signal: PipelineSignal | None = None,
) -> PipelineReport:
    """Enumerate policy.base_path once and run all checks (no short-circuit).

    Each failing check raises its own pipeline signal. Filesystem errors from
    the inspector propagate.
    """
    inspector = inspector or LocalFileInspector()
    signal = signal or default_signal()
    log = get_logger("pipeline")

    paths = inspector.list_entries(policy.base_path)
    log.debug("packguard: %d entries under %s", len(paths), policy.base_path)

    report = PipelineReport(base_path=policy.base_path, entries=len(paths))
    for check in CHECKS:
        result = check(paths, inspector, policy)
        log.debug("packguard: %s -> %s", result.name, "PASS" if result.passed else "FAIL")
        if not result.passed:
            report_failure(result, signal)
        report.results.append(result)
    return report
