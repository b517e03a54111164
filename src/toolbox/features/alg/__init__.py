# Path: `src/toolbox/features/alg/__init__.py`
# Summary: Export comparator helpers, searches, and sorts.
# Why: Provide a stable import surface for callers and tests.

from .domain import (
    CompareFunc,
    EmptyInputError,
    SupportsLessThan,
    key_order,
    natural_order,
    reverse_order,
)
from .usecases import (
    binary_search,
    common_run_lengths,
    find_max,
    find_min,
    longest_common_substring,
    max_index,
    min_index,
    quicksort,
    selection_sort,
)

__all__ = [
    "CompareFunc",
    "EmptyInputError",
    "SupportsLessThan",
    "key_order",
    "natural_order",
    "reverse_order",
    "binary_search",
    "common_run_lengths",
    "find_max",
    "find_min",
    "longest_common_substring",
    "max_index",
    "min_index",
    "quicksort",
    "selection_sort",
]
