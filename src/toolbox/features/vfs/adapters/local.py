"""Filesystem adapter backed by the local host."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..domain.errors import FilesystemError

# "Nothing there" as opposed to "could not look"
_MISSING = (FileNotFoundError, NotADirectoryError)


class LocalFileSystemGateway:
    """Thin wrapper around ``os.stat`` and ``os.mkdir``.

    Satisfies the ``FileSystemGateway`` protocol structurally.

    Unlike ``Path.exists`` it only treats a missing entry as ``False``;
    permission and I/O faults surface as ``FilesystemError``.
    """

    def _mode(self, path: Path) -> int | None:
        try:
            return os.stat(path).st_mode
        except _MISSING:
            return None
        except (OSError, ValueError) as exc:
            raise FilesystemError(f"Cannot stat {path}: {exc}", path) from exc

    def exists(self, path: Path) -> bool:
        return self._mode(path) is not None

    def is_dir(self, path: Path) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISDIR(mode)

    def is_file(self, path: Path) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def create_dir(self, path: Path) -> None:
        try:
            os.mkdir(path)
        except (OSError, ValueError) as exc:
            raise FilesystemError(f"Cannot create directory {path}: {exc}", path) from exc


__all__ = ["LocalFileSystemGateway"]
