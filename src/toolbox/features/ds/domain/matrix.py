"""
Summary: Fixed-size two-dimensional table stored in row-major order.
Why: Back dynamic-programming tables and small grids with bounds-checked access.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar, final, overload

from toolbox.shared.errors import ToolboxError

T = TypeVar("T")


class MatrixSizeError(ToolboxError, ValueError):
    """Raised when an element-wise operation gets operands of different shapes."""


@final
class Matrix(Generic[T]):
    """Rectangular table of ``rows x cols`` elements.

    Every cell starts as ``default``. Pass ``factory`` instead when cells need
    their own mutable value (e.g. ``Matrix(2, 2, factory=list)``).

    Example:
        m = Matrix[int](2, 3, default=0)
        m[1, 1] = 777
        m.row(1)  # [0, 777, 0]
    """

    __slots__ = ("_rows", "_cols", "_cells", "_make_default")

    @overload
    def __init__(self, rows: int, cols: int, default: T) -> None: ...

    @overload
    def __init__(self, rows: int, cols: int, *, factory: Callable[[], T]) -> None: ...

    def __init__(
        self,
        rows: int,
        cols: int,
        default: Any = None,
        *,
        factory: Callable[[], T] | None = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Matrix dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._make_default: Callable[[], T] = factory if factory is not None else (lambda: default)
        self._cells: list[T] = [self._make_default() for _ in range(rows * cols)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def __len__(self) -> int:
        return len(self._cells)

    def _linear_index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"Index ({row}, {col}) out of range for {self._rows}x{self._cols} matrix")
        return row * self._cols + col

    def get(self, row: int, col: int) -> T:
        return self._cells[self._linear_index(row, col)]

    def set(self, row: int, col: int, value: T) -> None:
        self._cells[self._linear_index(row, col)] = value

    def __getitem__(self, index: tuple[int, int]) -> T:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: tuple[int, int], value: T) -> None:
        row, col = index
        self.set(row, col, value)

    def nth(self, index: int) -> T:
        """Element at ``index`` in row-major traversal order."""
        if not 0 <= index < len(self._cells):
            raise IndexError(f"Element {index} out of range for {len(self._cells)} elements")
        return self._cells[index]

    def row(self, row: int) -> list[T]:
        """Copy of the given row."""
        start = self._linear_index(row, 0)
        return self._cells[start : start + self._cols]

    def fill(self, value: T) -> None:
        for idx in range(len(self._cells)):
            self._cells[idx] = value

    def clear(self) -> None:
        """Reset every cell to the default value."""
        for idx in range(len(self._cells)):
            self._cells[idx] = self._make_default()

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def copy(self) -> Matrix[T]:
        """Shallow copy: a new table holding the same element objects."""
        clone: Matrix[T] = Matrix(self._rows, self._cols, factory=self._make_default)
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def _combine(self, other: Matrix[T], op: Callable[[T, T], T], symbol: str) -> Matrix[T]:
        if self.shape != other.shape:
            raise MatrixSizeError(
                f"Cannot apply '{symbol}' to {self._rows}x{self._cols} and "
                f"{other.rows}x{other.cols} matrices"
            )
        result = self.copy()
        result._cells = [op(a, b) for a, b in zip(self._cells, other._cells)]
        return result

    def __add__(self, other: Matrix[T]) -> Matrix[T]:
        return self._combine(other, lambda a, b: a + b, "+")  # pyright: ignore[reportOperatorIssue, reportUnknownLambdaType]

    def __sub__(self, other: Matrix[T]) -> Matrix[T]:
        return self._combine(other, lambda a, b: a - b, "-")  # pyright: ignore[reportOperatorIssue, reportUnknownLambdaType]

    def __mul__(self, scalar: Any) -> Matrix[T]:
        result = self.copy()
        result._cells = [cell * scalar for cell in self._cells]  # pyright: ignore[reportOperatorIssue]
        return result

    def __repr__(self) -> str:
        rendered = " ".join(
            "{" + ",".join(str(cell) for cell in self.row(r)) + "}" for r in range(self._rows)
        )
        return "{" + rendered + "}"


__all__ = ["Matrix", "MatrixSizeError"]
