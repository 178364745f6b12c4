"""
Matrix: two-dimensional dense container.

A Matrix owns a Row count, a Column count and a row-major list of rows,
each holding exactly Column elements. Instances are only built through
Matrix.create(); copies are deep, and every operator returns a new Matrix
(compound operators rebind the result into self).

Shape handling in arithmetic is loose and never raises on its own:

    A + B, A - B   accepted when rows match OR columns match; otherwise
                   an unchanged copy of A. The loop runs over A's extents,
                   so a B that is smaller in the unmatched dimension hits
                   checked access and raises IndexOutOfRangeError, and a
                   larger B is silently truncated.
    A * B          A.cols == B.rows -> matrix product
                   else A == B      -> elementwise square of A
                   else             -> empty 0x0 matrix

The inclusive-or check in + and - is a latent defect kept for
compatibility; callers wanting strict behavior should compare
get_rows()/get_cols() first, and use multiply() / square() instead of *.
"""

from __future__ import annotations

import copy
import logging
import numbers
from collections.abc import Callable, Sequence
from typing import Any, Generic

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.precision import (
    DEFAULT_ELEMENT_TYPE,
    infer_element_type,
    is_scalar,
    zero,
)
from pylinalg.core.protocols import T
from pylinalg.core.validation import (
    check_index,
    check_kind,
    check_rectangular,
    check_sequence,
)
from pylinalg.types.dimensions import Column, Row
from pylinalg.vector.engine import Vector

logger = logging.getLogger(__name__)


def _is_row_like(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, np.ndarray, Vector))


def _cell(grid: list[list[T]], i: int, j: int, name: str) -> T:
    row = grid[check_index(i, len(grid), f"{name} row")]
    return row[check_index(j, len(row), f"{name} column")]


class Matrix(Generic[T]):
    """
    Dense row-major matrix of elements of type T.

    Construction:
        Matrix.create()                                    0 x 0
        Matrix.create(Row(r), Column(c), element_type=int) r x c default values
        Matrix.create([1, 2, 3])                           3 x 1 column
        Matrix.create([[1, 2], [3, 4]])                    2 x 2
        Matrix.create(other_matrix)                        deep copy

    Row and Column are not interchangeable: ``Matrix.create(Column(2), Row(3))``
    raises DimensionTypeError.
    """

    # numpy scalars must defer to our reflected operators
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Row, cols: Column, grid: list[list[T]], element_type: type):
        # Internal: use Matrix.create()
        self._rows = rows
        self._cols = cols
        self._grid = grid
        self._element_type = element_type

    # --- Construction ---

    @classmethod
    def create(
        cls,
        source: Row | Sequence[Any] | NDArray[Any] | Vector[T] | Matrix[T] | None = None,
        cols: Column | None = None,
        *,
        element_type: type | None = None,
    ) -> Matrix[T]:
        """
        Build a Matrix.

        Parameters
        ----------
        source : Row, sequence, ndarray, Vector, Matrix, or None
            None gives an empty 0x0 matrix. A Row (with cols) gives a
            matrix of default values. A flat sequence or Vector becomes a
            single column. A sequence of sequences (or 2D array) is copied
            row by row; empty input gives 0x0. A Matrix is deep-copied.
        cols : Column, optional
            Column count; required with a Row, rejected otherwise.
        element_type : type, optional
            Element type for default values. Inferred from the first
            element when omitted, float otherwise.

        Raises
        ------
        DimensionTypeError
            If the dimensions are not exactly (Row, Column).
        DimensionError
            If nested input is ragged or an array has more than 2 dimensions.
        ValidationError
            If source is not usable as matrix data.
        """
        if isinstance(source, (Row, Column, numbers.Integral)) or cols is not None:
            check_kind(source, Row, "rows")
            check_kind(cols, Column, "cols")
            element_type = element_type or DEFAULT_ELEMENT_TYPE
            grid = [
                [zero(element_type) for _ in range(cols.get())]
                for _ in range(source.get())
            ]
            return cls(source.copy(), cols.copy(), grid, element_type)

        if source is None:
            return cls(Row(0), Column(0), [], element_type or DEFAULT_ELEMENT_TYPE)

        if isinstance(source, Matrix):
            return cls(
                source._rows.copy(),
                source._cols.copy(),
                [list(row) for row in source._grid],
                source._element_type,
            )

        if isinstance(source, Vector):
            return cls._from_column(source.get_data(), element_type)

        check_sequence(source, "source")
        ndim = getattr(source, 'ndim', None)
        if ndim is not None and ndim > 2:
            raise DimensionError(
                f"source: expected 1D or 2D data, got {ndim}D", expected=2, actual=ndim
            )
        if len(source) == 0:
            return cls(Row(0), Column(0), [], element_type or DEFAULT_ELEMENT_TYPE)
        if _is_row_like(source[0]):
            return cls._from_rows(source, element_type)
        return cls._from_column(list(source), element_type)

    @classmethod
    def _from_column(cls, values: list[T], element_type: type | None) -> Matrix[T]:
        return cls(
            Row(len(values)),
            Column(1),
            [[value] for value in values],
            element_type or infer_element_type(values),
        )

    @classmethod
    def _from_rows(cls, source: Sequence[Any], element_type: type | None) -> Matrix[T]:
        grid = []
        for i, row in enumerate(source):
            if not _is_row_like(row):
                raise ValidationError(
                    f"source[{i}]: expected a row sequence, got {type(row).__name__}"
                )
            grid.append(list(row))
        check_rectangular(grid, "source")
        if element_type is None:
            first = next((row for row in grid if row), [])
            element_type = infer_element_type(first)
        return cls._from_grid(grid, element_type)

    @classmethod
    def _from_grid(cls, grid: list[list[T]], element_type: type) -> Matrix[T]:
        """Wrap an owned rectangular grid, inferring the extents from it."""
        cols = len(grid[0]) if grid else 0
        return cls(Row(len(grid)), Column(cols), grid, element_type)

    def copy(self) -> Matrix[T]:
        """Copy with its own storage (same as Matrix.create(self))."""
        return Matrix.create(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Matrix[T]:
        return Matrix(
            self._rows.copy(),
            self._cols.copy(),
            copy.deepcopy(self._grid, memo),
            self._element_type,
        )

    def take(self) -> Matrix[T]:
        """
        Transfer ownership of the storage to a new Matrix.

        The new Matrix takes over the rows; self is left erased (0x0).
        """
        moved = Matrix(self._rows, self._cols, self._grid, self._element_type)
        self._rows = Row(0)
        self._cols = Column(0)
        self._grid = []
        return moved

    # --- Inspection ---

    @property
    def element_type(self) -> type:
        """Type used for default and zero values."""
        return self._element_type

    def get_rows(self) -> Row:
        """Row count (a copy; mutating it does not reshape)."""
        return self._rows.copy()

    def get_cols(self) -> Column:
        """Column count (a copy; mutating it does not reshape)."""
        return self._cols.copy()

    def get_matrix(self) -> list[list[T]]:
        """
        Live row-major storage.

        Writes through the returned lists are seen by the matrix. Changing
        their lengths breaks the shape invariant and is on the caller.
        """
        return self._grid

    def at(self, row: int, col: int) -> T:
        """Checked element read."""
        return _cell(self._grid, row, col, "matrix")

    def to_array(self, dtype: Any = None) -> NDArray[Any]:
        """Elements as a new (rows, cols) numpy array."""
        array = np.array(self._grid, dtype=dtype)
        return array.reshape(self._rows.get(), self._cols.get())

    def to_string(self) -> str:
        """
        Debug rendering, one line per row: `` | e1 | e2 | ... | ``.

        Not a parseable format.
        """
        lines = []
        for row in self._grid:
            lines.append(" | " + "".join(f"{element} | " for element in row) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows.get()}, cols={self._cols.get()}, "
            f"data={self._grid!r})"
        )

    # --- Reshaping ---

    def transpose(self) -> bool:
        """
        Transpose in place.

        Swaps the Row and Column counts and rebuilds the storage with
        ``new[i][j] = old[j][i]``. Always returns True.
        """
        old = self._grid
        new_rows, new_cols = self._cols.get(), self._rows.get()
        self._grid = [[old[j][i] for j in range(new_cols)] for i in range(new_rows)]
        self._rows, self._cols = Row(new_rows), Column(new_cols)
        logger.debug("transpose: now %d x %d", new_rows, new_cols)
        return True

    def erase(self) -> None:
        """Drop all rows and reset both dimensions to 0."""
        self._grid = []
        self._rows = Row(0)
        self._cols = Column(0)

    # --- Arithmetic ---

    def _elementwise(self, other: Matrix[T], op: Callable[[T, T], T], name: str) -> Matrix[T]:
        if self._rows.get() != other._rows.get() and self._cols.get() != other._cols.get():
            logger.debug(
                "%s: shapes %dx%d and %dx%d share no extent, returning left operand",
                name, self._rows.get(), self._cols.get(),
                other._rows.get(), other._cols.get(),
            )
            return self.copy()
        grid = [
            [op(element, _cell(other._grid, i, j, "right operand")) for j, element in enumerate(row)]
            for i, row in enumerate(self._grid)
        ]
        return Matrix(self._rows.copy(), self._cols.copy(), grid, self._element_type)

    def _map(self, op: Callable[[T], T]) -> Matrix[T]:
        grid = [[op(element) for element in row] for row in self._grid]
        return Matrix(self._rows.copy(), self._cols.copy(), grid, self._element_type)

    def _product(self, other: Matrix[T]) -> Matrix[T]:
        inner = self._cols.get()
        grid = []
        for i in range(self._rows.get()):
            mine = self._grid[i]
            row = []
            for j in range(other._cols.get()):
                total = zero(self._element_type)
                for k in range(inner):
                    total = total + mine[k] * other._grid[k][j]
                row.append(total)
            grid.append(row)
        return Matrix._from_grid(grid, self._element_type)

    def multiply(self, other: Matrix[T]) -> Matrix[T]:
        """
        Strict matrix product.

        Raises:
            DimensionError: If self's column count differs from other's row count
        """
        if self._cols.get() != other._rows.get():
            raise DimensionError(
                f"multiply: left has {self._cols.get()} columns, "
                f"right has {other._rows.get()} rows",
                expected=self._cols.get(),
                actual=other._rows.get(),
            )
        return self._product(other)

    def square(self) -> Matrix[T]:
        """Elementwise (Hadamard) square, same shape as self."""
        return self._map(lambda element: element * element)

    def __add__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self._elementwise(other, lambda a, b: a + b, "add")
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda element: element + other)

    def __radd__(self, other: Any) -> Matrix[T]:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda element: other + element)

    def __sub__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            return self._elementwise(other, lambda a, b: a - b, "sub")
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda element: element - other)

    def __mul__(self, other: Any) -> Matrix[T]:
        if isinstance(other, Matrix):
            if self._cols.get() == other._rows.get():
                return self._product(other)
            if self == other:
                return Matrix._from_grid(self.square()._grid, self._element_type)
            logger.debug(
                "mul: %dx%d and %dx%d neither conform nor are equal, returning empty matrix",
                self._rows.get(), self._cols.get(),
                other._rows.get(), other._cols.get(),
            )
            return Matrix(Row(0), Column(0), [], self._element_type)
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda element: element * other)

    def __rmul__(self, other: Any) -> Matrix[T]:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda element: other * element)

    def __iadd__(self, other: Any) -> Matrix[T]:
        return self._assign(self.__add__(other))

    def __isub__(self, other: Any) -> Matrix[T]:
        return self._assign(self.__sub__(other))

    def __imul__(self, other: Any) -> Matrix[T]:
        return self._assign(self.__mul__(other))

    def _assign(self, result: Any) -> Any:
        if result is NotImplemented:
            return NotImplemented
        self._rows = result._rows
        self._cols = result._cols
        self._grid = result._grid
        self._element_type = result._element_type
        return self

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows.get() != other._rows.get() or self._cols.get() != other._cols.get():
            return False
        return all(
            mine == theirs
            for my_row, their_row in zip(self._grid, other._grid)
            for mine, theirs in zip(my_row, their_row)
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result
