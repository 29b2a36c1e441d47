"""Pytest configuration. Puts the project root on sys.path and provides an in-memory FileInspector."""
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packguard.fs import has_image_extension


class FakeInspector:
    """FileInspector over synthetic paths: files map to sizes, dirs are listed explicitly."""

    def __init__(self, files: dict[str, int] | None = None, dirs: list[str] | None = None) -> None:
        self.files = dict(files or {})
        self.dirs = set(dirs or [])
        for path in self.files:
            parent = os.path.dirname(path)
            while parent:
                self.dirs.add(parent)
                parent = os.path.dirname(parent)

    def list_entries(self, base_path: str) -> list[str]:
        return sorted(self.dirs | set(self.files))

    def is_directory(self, path: str) -> bool:
        return path in self.dirs

    def is_image(self, path: str) -> bool:
        return path in self.files and has_image_extension(path)

    def file_size(self, path: str) -> int:
        return self.files[path]

    def file_extension(self, path: str) -> str:
        return os.path.splitext(path)[1]

    def image_count(self, directory: str) -> int:
        return sum(1 for p in self.files if os.path.dirname(p) == directory and self.is_image(p))


@pytest.fixture
def make_inspector():
    return FakeInspector


@pytest.fixture
def write_file():
    """Create a file of the given size (parents included)."""

    def _write(path: Path, size: int = 1024) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * size)
        return path

    return _write


@pytest.fixture(autouse=True)
def _no_ci_env(monkeypatch):
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.delenv("PACKGUARD_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Bind the packguard handler to this test's stderr."""
    from packguard.logging import configure_cli_logging

    configure_cli_logging()
