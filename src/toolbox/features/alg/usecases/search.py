"""
Summary: Linear extrema finders and binary search over sorted sequences.
Why: Provide comparator-driven lookups that behave the same for any total order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ..domain.errors import EmptyInputError
from ..domain.ordering import CompareFunc, natural_order

T = TypeVar("T")


def _extremum_index(seq: Sequence[T], compare: CompareFunc[T], sign: int) -> int:
    """Index of the element that wins ``sign * compare(candidate, best) > 0``.

    Only a strict win replaces the current best, so ties keep the first
    occurrence.
    """
    if len(seq) == 0:
        raise EmptyInputError("Cannot take the extremum of an empty sequence")

    best = 0
    for idx in range(1, len(seq)):
        if sign * compare(seq[idx], seq[best]) > 0:
            best = idx
    return best


def max_index(seq: Sequence[T], compare: CompareFunc[T] = natural_order) -> int:
    """Return the index of the first maximal element of ``seq``.

    Raises:
        EmptyInputError: If ``seq`` is empty.
    """
    return _extremum_index(seq, compare, 1)


def min_index(seq: Sequence[T], compare: CompareFunc[T] = natural_order) -> int:
    """Return the index of the first minimal element of ``seq``.

    Raises:
        EmptyInputError: If ``seq`` is empty.
    """
    return _extremum_index(seq, compare, -1)


def find_max(seq: Sequence[T], compare: CompareFunc[T] = natural_order) -> T:
    """Return the first maximal element of ``seq``."""
    return seq[max_index(seq, compare)]


def find_min(seq: Sequence[T], compare: CompareFunc[T] = natural_order) -> T:
    """Return the first minimal element of ``seq``."""
    return seq[min_index(seq, compare)]


def binary_search(
    seq: Sequence[T],
    target: T,
    compare: CompareFunc[T] = natural_order,
) -> int | None:
    """Find ``target`` in ``seq`` sorted ascending under ``compare``.

    Uses inclusive bounds and keeps halving after a hit, so the result is the
    leftmost matching index when duplicates exist. Every iteration shrinks
    ``[lo, hi]``, so an unsorted ``seq`` still terminates without reading out
    of bounds; the answer is then meaningless.

    Args:
        seq: Sequence sorted ascending under ``compare``.
        target: Value to look for.
        compare: Three-way comparator.

    Returns:
        int | None: Leftmost index ``i`` with ``compare(seq[i], target) == 0``,
        or None when absent.
    """
    lo = 0
    hi = len(seq) - 1
    found: int | None = None
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        cmp = compare(seq[mid], target)
        if cmp < 0:
            lo = mid + 1
        elif cmp > 0:
            hi = mid - 1
        else:
            found = mid
            hi = mid - 1
    return found


__all__ = ["binary_search", "find_max", "find_min", "max_index", "min_index"]
