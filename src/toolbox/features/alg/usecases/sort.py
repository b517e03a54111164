"""
Summary: In-place selection sort and quicksort over mutable sequences.
Why: Sort caller-owned sequences under an injected comparator without copying.
"""

# Both sorts are unstable. If ``compare`` raises mid-sort, the sequence is left
# as a valid permutation of its input in partially sorted order.

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

from ..domain.ordering import CompareFunc, natural_order

T = TypeVar("T")


def _swap(seq: MutableSequence[T], i: int, j: int) -> None:
    if i != j:
        seq[i], seq[j] = seq[j], seq[i]


def selection_sort(seq: MutableSequence[T], compare: CompareFunc[T] = natural_order) -> None:
    """Sort ``seq`` ascending in place with selection sort.

    O(n²) comparisons and at most n - 1 swaps. The swap into position ``i``
    can jump an element past its equals, so the sort is not stable.
    """
    n = len(seq)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if compare(seq[j], seq[smallest]) < 0:
                smallest = j
        _swap(seq, i, smallest)


def _median_of_three(seq: MutableSequence[T], lo: int, hi: int, compare: CompareFunc[T]) -> T:
    """Median of the first, middle and last elements of ``seq[lo:hi + 1]``."""
    first, middle, last = seq[lo], seq[lo + (hi - lo) // 2], seq[hi]
    if compare(first, middle) > 0:
        first, middle = middle, first
    if compare(middle, last) > 0:
        middle = last if compare(first, last) < 0 else first
    return middle


def _partition(
    seq: MutableSequence[T], lo: int, hi: int, compare: CompareFunc[T]
) -> tuple[int, int]:
    """Three-way partition ``seq[lo:hi + 1]`` around a median-of-three pivot.

    Returns:
        tuple[int, int]: Bounds ``(lt, gt)`` such that ``seq[lo:lt]`` is less
        than the pivot, ``seq[lt:gt + 1]`` equals it and ``seq[gt + 1:hi + 1]``
        is greater. The equal band is never empty because the pivot is taken
        from the range.
    """
    pivot = _median_of_three(seq, lo, hi, compare)
    lt, i, gt = lo, lo, hi
    while i <= gt:
        cmp = compare(seq[i], pivot)
        if cmp < 0:
            _swap(seq, lt, i)
            lt += 1
            i += 1
        elif cmp > 0:
            _swap(seq, i, gt)
            gt -= 1
        else:
            i += 1
    return lt, gt


def quicksort(seq: MutableSequence[T], compare: CompareFunc[T] = natural_order) -> None:
    """Sort ``seq`` ascending in place with quicksort.

    Pivots are the median of three; partitioning is three-way, so runs of
    duplicates collapse in one pass and an all-equal input costs O(n).
    Pending ranges live on an explicit stack. The smaller side of each split
    is handled first and the larger one is pushed, which bounds the stack at
    O(log n) entries regardless of input order.
    """
    if len(seq) < 2:
        return

    pending: list[tuple[int, int]] = [(0, len(seq) - 1)]
    while pending:
        lo, hi = pending.pop()
        while lo < hi:
            lt, gt = _partition(seq, lo, hi, compare)
            if lt - lo < hi - gt:
                pending.append((gt + 1, hi))
                hi = lt - 1
            else:
                pending.append((lo, lt - 1))
                lo = gt + 1


__all__ = ["quicksort", "selection_sort"]
