from .search import binary_search, find_max, find_min, max_index, min_index
from .sort import quicksort, selection_sort
from .lcs import common_run_lengths, longest_common_substring

__all__ = [
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
