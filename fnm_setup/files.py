# fnm_setup/files.py
from __future__ import annotations

from pathlib import Path


class FileAccess:
    """
    The filesystem operations the configurators need. Swapped for an
    in-memory fake in tests so nothing touches a real profile.
    """

    def exists(self, path: Path) -> bool:
        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    def write_text(self, path: Path, content: str) -> None:
        raise NotImplementedError

    def make_dirs(self, path: Path) -> None:
        raise NotImplementedError


class LocalFiles(FileAccess):
    """UTF-8, LF-only access to the real filesystem. Errors propagate as OSError."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_text(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)
