"""
Summary: Longest common substring of two sequences via a run-length table.
Why: Find the longest contiguous run shared by two inputs of any element type.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from toolbox.features.ds.domain.matrix import Matrix

T = TypeVar("T")


def common_run_lengths(a: Sequence[T], b: Sequence[T]) -> Matrix[int]:
    """Build the ``(len(a) + 1) x (len(b) + 1)`` table of shared run lengths.

    Cell ``[i + 1, j + 1]`` holds the length of the common run ending at
    ``a[i]`` and ``b[j]``; row 0 and column 0 stay zero.
    """
    table = Matrix[int](len(a) + 1, len(b) + 1, default=0)
    for i, left in enumerate(a):
        for j, right in enumerate(b):
            if left == right:
                table[i + 1, j + 1] = table[i, j] + 1
    return table


def longest_common_substring(a: Sequence[T], b: Sequence[T]) -> list[T] | None:
    """Return the longest contiguous run present in both ``a`` and ``b``.

    Ties go to the run that ends first in ``a``.

    Returns:
        list[T] | None: Elements of the run, or None when nothing is shared.
    """
    table = common_run_lengths(a, b)
    best_length = 0
    best_end = 0
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if table[i, j] > best_length:
                best_length = table[i, j]
                best_end = i
    if best_length == 0:
        return None
    return list(a[best_end - best_length : best_end])


__all__ = ["common_run_lengths", "longest_common_substring"]
