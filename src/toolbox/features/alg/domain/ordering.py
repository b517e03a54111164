"""
Summary: Comparator type and the stock orderings used by the algorithms.
Why: Every search and sort takes the same three-way compare function.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")

CompareFunc = Callable[[T, T], int]
"""Return negative if ``a < b``, positive if ``a > b``, zero if equal."""


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison built on the elements' own ``<``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(compare: CompareFunc[T]) -> CompareFunc[T]:
    """Return a comparator that orders elements opposite to ``compare``.

    Example:
        selection_sort(items, reverse_order(natural_order))  # descending
    """

    def reversed_compare(a: T, b: T) -> int:
        return compare(b, a)

    return reversed_compare


def key_order(key: Callable[[T], SupportsLessThan]) -> CompareFunc[T]:
    """Compare elements by a derived key, like ``sorted(..., key=...)``."""

    def keyed_compare(a: T, b: T) -> int:
        return natural_order(key(a), key(b))

    return keyed_compare


__all__ = ["CompareFunc", "SupportsLessThan", "key_order", "natural_order", "reverse_order"]
