"""Ports for the virtual file system.

Where: features/vfs/usecases.
What: Protocol describing the host filesystem calls the VFS delegates to.
Why: Keep resolution logic testable without touching the real disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemGateway(Protocol):
    """Host filesystem operations on already-resolved absolute paths.

    Implementations report host failures as ``FilesystemError``; a missing
    entry is not a failure for the query methods.
    """

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when the path points to a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True when the path points to a regular file."""
        ...

    def create_dir(self, path: Path) -> None:
        """Create a single directory; the parent must already exist."""
        ...


__all__ = ["FileSystemGateway"]
