"""Image asset policy: fixed thresholds applied by the pack checks."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_PATH = "../packs/"
MAX_NUM_IMG = 6
MAX_SIZE = 4_000_000  # bytes
ALLOWED_IMG_EXT: tuple[str, ...] = (".png", ".jpeg", ".jpg", ".svg")

BYTES_PER_MB = 1_000_000


@dataclass(frozen=True)
class ImagePolicy:
    """Thresholds for one validation run.

    Not read from any file or environment; tests build their own instances
    to exercise alternate limits.
    """

    base_path: str = DEFAULT_BASE_PATH
    max_images_per_dir: int = MAX_NUM_IMG
    max_file_size: int = MAX_SIZE
    allowed_extensions: tuple[str, ...] = ALLOWED_IMG_EXT

    def __post_init__(self) -> None:
        if self.max_images_per_dir < 0:
            raise ValueError(f"max_images_per_dir must be >= 0, got {self.max_images_per_dir}")
        if self.max_file_size <= 0:
            raise ValueError(f"max_file_size must be > 0, got {self.max_file_size}")
        for ext in self.allowed_extensions:
            if not ext.startswith("."):
                raise ValueError(f"allowed extension must start with '.': {ext!r}")

    @property
    def max_file_size_mb(self) -> float:
        return self.max_file_size / BYTES_PER_MB

    def with_base_path(self, base_path: str) -> "ImagePolicy":
        """Same thresholds, different root (CLI path override)."""
        return ImagePolicy(
            base_path=base_path,
            max_images_per_dir=self.max_images_per_dir,
            max_file_size=self.max_file_size,
            allowed_extensions=self.allowed_extensions,
        )


DEFAULT_POLICY = ImagePolicy()


def format_megabytes(value: float) -> str:
    """Render an MB value like ``5MB`` or ``4.5MB`` (no rounding)."""
    if float(value).is_integer():
        return f"{int(value)}MB"
    return f"{value!r}MB"
