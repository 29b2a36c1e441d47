"""Allowed image extensions check."""

from __future__ import annotations

from typing import Iterable

from packguard.fs import FileInspector
from packguard.policy import DEFAULT_POLICY, ImagePolicy

from .models import EXTENSION, CheckResult, Violation


def check_image_extensions(
    paths: Iterable[str],
    inspector: FileInspector,
    policy: ImagePolicy = DEFAULT_POLICY,
) -> CheckResult:
    """Images whose extension is not in the allow-list.

    Comparison is exact: ``.PNG`` does not match ``.png``.
    """
    allowed = set(policy.allowed_extensions)
    violations = [
        Violation(EXTENSION, path)
        for path in paths
        if inspector.is_image(path) and inspector.file_extension(path) not in allowed
    ]
    return CheckResult(
        name=EXTENSION,
        message=f"Images should be of format {','.join(policy.allowed_extensions)}:",
        violations=violations,
    )
