"""Tests for packguard.checks.file_size."""

from packguard.checks import FILE_SIZE, Violation, check_file_sizes
from packguard.policy import ImagePolicy


def test_check_file_sizes_empty(make_inspector) -> None:
    """Empty input has no violations."""
    result = check_file_sizes([], make_inspector())
    assert result.passed


def test_small_image_is_not_reported(make_inspector) -> None:
    inspector = make_inspector({"packs/A/small.png": 1024})
    assert check_file_sizes(inspector.list_entries("packs"), inspector).passed


def test_image_exactly_at_limit_passes(make_inspector) -> None:
    """4,000,000 bytes is allowed."""
    inspector = make_inspector({"packs/A/edge.jpg": 4_000_000})
    assert check_file_sizes(inspector.list_entries("packs"), inspector).passed


def test_oversized_image_reports_megabytes(make_inspector) -> None:
    """5,000,000 bytes is reported as 5MB."""
    inspector = make_inspector({"packs/C/big.jpg": 5_000_000})
    result = check_file_sizes(inspector.list_entries("packs"), inspector)
    assert result.violations == [Violation(FILE_SIZE, "packs/C/big.jpg", 5.0)]
    assert result.violations[0].describe() == "packs/C/big.jpg: 5MB"
    assert result.message == "Images should be under 4MB:"


def test_megabytes_are_not_rounded(make_inspector) -> None:
    inspector = make_inspector({"packs/C/big.png": 4_000_001})
    result = check_file_sizes(inspector.list_entries("packs"), inspector)
    assert result.violations[0].value == 4_000_001 / 1_000_000
    assert result.violations[0].describe() == "packs/C/big.png: 4.000001MB"


def test_non_images_are_exempt(make_inspector) -> None:
    """A huge non-image file never fails the size check."""
    inspector = make_inspector({"packs/A/video.mp4": 50_000_000, "packs/A/data.json": 9_000_000})
    assert check_file_sizes(inspector.list_entries("packs"), inspector).passed


def test_custom_limit_in_message(make_inspector) -> None:
    inspector = make_inspector({"packs/A/a.png": 2_000_000})
    policy = ImagePolicy(max_file_size=1_500_000)
    result = check_file_sizes(inspector.list_entries("packs"), inspector, policy)
    assert result.message == "Images should be under 1.5MB:"
    assert [v.value for v in result.violations] == [2.0]
