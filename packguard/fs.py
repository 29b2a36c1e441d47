"""Filesystem enumeration and per-path inspectors used by the pack checks."""

from __future__ import annotations

import glob
import os
from typing import Protocol

# Extensions recognised as images (compared lowercased). Raster and vector
# formats commonly committed to asset repos.
IMAGE_EXTENSIONS = frozenset(
    {
        ".ai", ".apng", ".avif", ".bmp", ".cur", ".dds", ".emf", ".eps",
        ".gif", ".heic", ".heif", ".icns", ".ico", ".jfif", ".jp2", ".jpe",
        ".jpeg", ".jpg", ".jxl", ".jxr", ".pbm", ".pcx", ".pgm", ".pict",
        ".png", ".pnm", ".ppm", ".psd", ".raw", ".svg", ".tga", ".tif",
        ".tiff", ".wdp", ".webp", ".wmf", ".xbm", ".xcf", ".xpm",
    }
)


class FileInspector(Protocol):
    """Capabilities the checks need from the filesystem."""

    def list_entries(self, base_path: str) -> list[str]: ...

    def is_directory(self, path: str) -> bool: ...

    def is_image(self, path: str) -> bool: ...

    def file_size(self, path: str) -> int: ...

    def file_extension(self, path: str) -> str: ...

    def image_count(self, directory: str) -> int: ...


def has_image_extension(path: str) -> bool:
    """Extension-based image predicate, case-insensitive."""
    _, ext = os.path.splitext(path)
    return ext.lower() in IMAGE_EXTENSIONS


def glob_files(base_path: str) -> list[str]:
    """Every file and directory under base_path (base included), sorted.

    Hidden entries are skipped, as with the glob default.
    """
    if not os.path.isdir(base_path):
        return []
    pattern = os.path.join(base_path, "**")
    return sorted(glob.glob(pattern, recursive=True))


class LocalFileInspector:
    """FileInspector backed by the real filesystem."""

    def list_entries(self, base_path: str) -> list[str]:
        return glob_files(base_path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_image(self, path: str) -> bool:
        return has_image_extension(path) and not os.path.isdir(path)

    def file_size(self, path: str) -> int:
        return os.path.getsize(path)

    def file_extension(self, path: str) -> str:
        return os.path.splitext(path)[1]

    def image_count(self, directory: str) -> int:
        """Number of image files directly inside directory (not recursive).

        Hidden entries are skipped, matching glob_files.
        """
        count = 0
        with os.scandir(directory) as it:
            for entry in it:
                if entry.name.startswith("."):
                    continue
                if entry.is_file() and has_image_extension(entry.name):
                    count += 1
        return count
