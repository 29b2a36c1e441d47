"""Per-directory image count limit.

Rule: a directory holding more than ``max_images_per_dir`` images fails.
Exactly at the limit passes.
"""

from __future__ import annotations

from typing import Iterable

from packguard.fs import FileInspector
from packguard.policy import DEFAULT_POLICY, ImagePolicy

from .models import IMAGE_COUNT, CheckResult, Violation


def check_image_counts(
    paths: Iterable[str],
    inspector: FileInspector,
    policy: ImagePolicy = DEFAULT_POLICY,
) -> CheckResult:
    """Return every directory in paths whose image count exceeds the limit."""
    violations: list[Violation] = []
    for path in paths:
        if not inspector.is_directory(path):
            continue
        count = inspector.image_count(path)
        if count > policy.max_images_per_dir:
            violations.append(Violation(IMAGE_COUNT, path, count))
    return CheckResult(
        name=IMAGE_COUNT,
        message=f"Components should contain less than {policy.max_images_per_dir} images",
        violations=violations,
    )
