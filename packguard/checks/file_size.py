"""Image file size limit.

Rule: an image larger than ``max_file_size`` bytes fails; the reported value
is the size in megabytes (bytes / 1,000,000). Non-images are never checked.
"""

from __future__ import annotations

from typing import Iterable

from packguard.fs import FileInspector
from packguard.policy import BYTES_PER_MB, DEFAULT_POLICY, ImagePolicy, format_megabytes

from .models import FILE_SIZE, CheckResult, Violation


def check_file_sizes(
    paths: Iterable[str],
    inspector: FileInspector,
    policy: ImagePolicy = DEFAULT_POLICY,
) -> CheckResult:
    violations: list[Violation] = []
    for path in paths:
        if not inspector.is_image(path):
            continue
        size = inspector.file_size(path)
        if size > policy.max_file_size:
            violations.append(Violation(FILE_SIZE, path, size / BYTES_PER_MB))
    return CheckResult(
        name=FILE_SIZE,
        message=f"Images should be under {format_megabytes(policy.max_file_size_mb)}:",
        violations=violations,
    )
