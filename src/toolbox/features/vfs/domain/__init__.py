from .errors import (
    FilesystemError,
    InvalidRootError,
    NotAbsolutePathError,
    NotRelativePathError,
    PathEscapeError,
    VfsError,
)
from .policy import EscapePolicy
from .relative_path import RelativePath
from .separators import SEPARATORS, split_native

__all__ = [
    "EscapePolicy",
    "FilesystemError",
    "InvalidRootError",
    "NotAbsolutePathError",
    "NotRelativePathError",
    "PathEscapeError",
    "RelativePath",
    "SEPARATORS",
    "VfsError",
    "split_native",
]
