"""
Summary: Error taxonomy for the relative-path virtual file system.
Why: Let callers tell sandbox violations apart from host filesystem faults.
"""

from __future__ import annotations

from pathlib import Path

from toolbox.shared.errors import ToolboxError


class VfsError(ToolboxError):
    """Base class for virtual file system errors."""


class InvalidRootError(VfsError):
    """Raised when a root directory cannot be established."""


class PathEscapeError(VfsError, ValueError):
    """Raised when a path would resolve above the root under the deny policy."""


class NotRelativePathError(VfsError, ValueError):
    """Raised when an anchored path is passed where a relative one is required."""


class NotAbsolutePathError(VfsError, ValueError):
    """Raised when a relative path is passed where an absolute one is required."""


class FilesystemError(VfsError):
    """Raised when the host filesystem rejects an operation.

    The originating ``OSError`` is attached as ``__cause__``.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "FilesystemError",
    "InvalidRootError",
    "NotAbsolutePathError",
    "NotRelativePathError",
    "PathEscapeError",
    "VfsError",
]
