# Path: `src/toolbox/features/vfs/__init__.py`
# Summary: Export the virtual file system, its path model, and its errors.
# Why: Provide a stable import surface for callers and tests.

from .domain import (
    SEPARATORS,
    EscapePolicy,
    FilesystemError,
    InvalidRootError,
    NotAbsolutePathError,
    NotRelativePathError,
    PathEscapeError,
    RelativePath,
    VfsError,
    split_native,
)
from .usecases import FileSystemGateway, PathInput, VirtualFileSystem
from .adapters import LocalFileSystemGateway

__all__ = [
    "SEPARATORS",
    "EscapePolicy",
    "FileSystemGateway",
    "FilesystemError",
    "InvalidRootError",
    "LocalFileSystemGateway",
    "NotAbsolutePathError",
    "NotRelativePathError",
    "PathEscapeError",
    "PathInput",
    "RelativePath",
    "VfsError",
    "VirtualFileSystem",
    "split_native",
]
