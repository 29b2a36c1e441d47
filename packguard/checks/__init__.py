"""Pack image policy checks."""

from .extensions import check_image_extensions
from .file_size import check_file_sizes
from .image_count import check_image_counts
from .models import EXTENSION, FILE_SIZE, IMAGE_COUNT, CheckResult, Violation

__all__ = [
    "check_file_sizes",
    "check_image_counts",
    "check_image_extensions",
    "CheckResult",
    "Violation",
    "EXTENSION",
    "FILE_SIZE",
    "IMAGE_COUNT",
]
