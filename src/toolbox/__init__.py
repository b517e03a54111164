"""
toolbox: search and sort algorithms, small data structures, and a
root-relative virtual file system.

Usage:
    from toolbox import quicksort, binary_search, Matrix, VirtualFileSystem

    items = [5, 3, 5, 1, 5, 2]
    quicksort(items)                      # [1, 2, 3, 5, 5, 5]
    binary_search(items, 5)               # 3 (leftmost match)

    vfs = VirtualFileSystem("/data/project")
    vfs.resolve("assets\\\\img.png")      # /data/project/assets/img.png
"""

from .features.alg import (
    CompareFunc,
    EmptyInputError,
    binary_search,
    find_max,
    find_min,
    key_order,
    longest_common_substring,
    max_index,
    min_index,
    natural_order,
    quicksort,
    reverse_order,
    selection_sort,
)
from .features.ds import Graph, Matrix, MatrixSizeError
from .features.vfs import (
    EscapePolicy,
    FilesystemError,
    InvalidRootError,
    NotAbsolutePathError,
    NotRelativePathError,
    PathEscapeError,
    RelativePath,
    VfsError,
    VirtualFileSystem,
)
from .shared.errors import ToolboxError

__version__ = "0.3.0"
__all__ = [
    # Algorithms
    "CompareFunc",
    "natural_order",
    "reverse_order",
    "key_order",
    "max_index",
    "min_index",
    "find_max",
    "find_min",
    "binary_search",
    "selection_sort",
    "quicksort",
    "longest_common_substring",
    # Data structures
    "Matrix",
    "Graph",
    # Virtual file system
    "VirtualFileSystem",
    "RelativePath",
    "EscapePolicy",
    # Errors
    "ToolboxError",
    "EmptyInputError",
    "MatrixSizeError",
    "VfsError",
    "InvalidRootError",
    "PathEscapeError",
    "NotRelativePathError",
    "NotAbsolutePathError",
    "FilesystemError",
]
