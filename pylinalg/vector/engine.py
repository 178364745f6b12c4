"""
Vector: one-dimensional dense container with geometry operations.

A Vector owns a list of elements of one element type; its Row count is
always the list length. Instances are only built through Vector.create();
copies are deep, and every operator returns a new Vector.

Shape mismatches in arithmetic do not raise. Each operator degrades in
its own way, so callers that care must compare sizes first:

    v + w   sizes differ -> zero-filled vector of len(v)
    v - w   sizes differ -> unchanged copy of v
    v.dot_product(w)     -> additive identity
    v.cross_product(w)   -> empty vector unless both have length 3

The only error raised by a constructed Vector is IndexOutOfRangeError
from checked element access.
"""

from __future__ import annotations

import copy
import logging
import numbers
from collections.abc import Iterator, Sequence
from typing import Any, Generic

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import DimensionError, DimensionTypeError
from pylinalg.core.precision import (
    DEFAULT_ELEMENT_TYPE,
    divide,
    epsilon,
    infer_element_type,
    is_scalar,
    sqrt,
    zero,
)
from pylinalg.core.protocols import T
from pylinalg.core.validation import check_index, check_sequence
from pylinalg.types.dimensions import Column, Row

logger = logging.getLogger(__name__)


class Vector(Generic[T]):
    """
    Dense vector of elements of type T.

    Construction:
        Vector.create()                           empty
        Vector.create(Row(n), element_type=float) n default-valued elements
        Vector.create([1.0, 2.0, 3.0])            copy of a sequence
        Vector.create(other_vector)               deep copy

    Element access ``v[i]`` / ``v.at(i)`` is bounds-checked. ``v.data`` is
    the unchecked escape hatch: the live backing list, shared with the
    vector (writes through it are seen by the vector).
    """

    # numpy scalars must defer to our reflected operators
    __array_ufunc__ = None

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: list[T], element_type: type):
        # Internal: use Vector.create()
        self._data: list[T] = data
        self._element_type = element_type

    # --- Construction ---

    @classmethod
    def create(
        cls,
        source: Row | Sequence[T] | NDArray[Any] | Vector[T] | None = None,
        *,
        element_type: type | None = None,
    ) -> Vector[T]:
        """
        Build a Vector.

        Parameters
        ----------
        source : Row, sequence, 1D ndarray, Vector, or None
            None gives an empty vector. A Row gives that many
            default-valued elements. A sequence or array is copied.
            A Vector is deep-copied (its element type is kept).
        element_type : type, optional
            Element type for default values. Inferred from the first
            element of a sequence when omitted, float otherwise.

        Raises
        ------
        DimensionTypeError
            If source is a Column or a raw int (use Row(n)).
        DimensionError
            If source is an array with more than one dimension.
        ValidationError
            If source is not a sequence.
        """
        if source is None:
            return cls([], element_type or DEFAULT_ELEMENT_TYPE)

        if isinstance(source, Vector):
            return cls(list(source._data), source._element_type)

        if isinstance(source, Row):
            element_type = element_type or DEFAULT_ELEMENT_TYPE
            return cls([zero(element_type) for _ in range(source.get())], element_type)

        if isinstance(source, (Column, numbers.Integral)):
            raise DimensionTypeError(
                f"source: a Vector is sized by Row, got {type(source).__name__} {source!r}"
            )

        check_sequence(source, "source")
        ndim = getattr(source, 'ndim', 1)
        if ndim != 1:
            raise DimensionError(
                f"source: expected 1D data, got {ndim}D", expected=1, actual=ndim
            )
        data = list(source)
        return cls(data, element_type or infer_element_type(data))

    def copy(self) -> Vector[T]:
        """Copy with its own storage (same as Vector.create(self))."""
        return Vector.create(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Vector[T]:
        return Vector(copy.deepcopy(self._data, memo), self._element_type)

    def take(self) -> Vector[T]:
        """
        Transfer ownership of the elements to a new Vector.

        The new Vector takes over the backing storage; self is left erased.
        """
        moved = Vector(self._data, self._element_type)
        self._data = []
        return moved

    # --- Inspection ---

    @property
    def element_type(self) -> type:
        """Type used for default and zero values."""
        return self._element_type

    @property
    def data(self) -> list[T]:
        """Live backing list (unchecked access)."""
        return self._data

    def get_data(self) -> list[T]:
        """Copy of the elements."""
        return list(self._data)

    def get_rows(self) -> Row:
        """Element count as a Row (a fresh value; mutating it does not resize)."""
        return Row(len(self._data))

    def size(self) -> int:
        """Current element count."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def at(self, index: int) -> T:
        """Checked element read."""
        return self._data[check_index(index, len(self._data), "index")]

    def __getitem__(self, index: int) -> T:
        return self._data[check_index(index, len(self._data), "index")]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[check_index(index, len(self._data), "index")] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def to_array(self, dtype: Any = None) -> NDArray[Any]:
        """Elements as a new 1D numpy array."""
        return np.array(self._data, dtype=dtype)

    def erase(self) -> None:
        """Discard all elements; the vector becomes empty."""
        self._data = []

    # --- Geometry ---

    def magnitude(self) -> T:
        """
        Euclidean norm, sqrt(sum(x_i ** 2)).

        The square root matches the element precision (float32 stays
        float32, Decimal uses Decimal.sqrt, ints truncate).
        """
        total = zero(self._element_type)
        for element in self._data:
            total = total + element * element
        return sqrt(total)

    def normalize(self) -> None:
        """
        Divide every element by the magnitude, in place.

        There is no zero guard: a zero float or Decimal vector becomes all
        NaN, and a zero vector of an exact type (int, Fraction) raises
        ZeroDivisionError.
        """
        length = self.magnitude()
        self._data = [divide(element, length) for element in self._data]

    def opposite(self, other: Vector[T]) -> bool:
        """True if other has the same size and other[i] == -self[i] everywhere."""
        if other.size() != self.size():
            return False
        return all(-mine == theirs for mine, theirs in zip(self._data, other._data))

    def parallel(self, other: Vector[T]) -> bool:
        """
        True if self[i] / other[i] equals self[0] / other[0] for every i.

        Ratios are compared within one epsilon of the ratio's type. The
        division is unguarded: a zero in other yields inf/NaN ratios and
        an implementation-defined answer. Raises IndexOutOfRangeError on
        empty vectors.
        """
        if other.size() != self.size():
            return False
        return self._ratios_match(other, sign=1)

    def anti_parallel(self, other: Vector[T]) -> bool:
        """
        Like parallel(), with both ratios negated.

        With a symmetric tolerance the negation cancels, so this accepts
        exactly the pairs parallel() accepts.
        """
        if other.size() != self.size():
            return False
        return self._ratios_match(other, sign=-1)

    def _ratios_match(self, other: Vector[T], sign: int) -> bool:
        reference = divide(self.at(0), other.at(0)) * sign
        tolerance = epsilon(type(reference))
        for i in range(1, self.size()):
            ratio = divide(self._data[i], other._data[i]) * sign
            if abs(ratio - reference) > tolerance:
                return False
        return True

    def dot_product(self, other: Vector[T]) -> T:
        """Sum of pairwise products; the additive identity if sizes differ."""
        result = zero(self._element_type)
        if other.size() != self.size():
            logger.debug(
                "dot_product: size mismatch %d vs %d, returning zero",
                self.size(), other.size(),
            )
            return result
        for mine, theirs in zip(self._data, other._data):
            result = result + theirs * mine
        return result

    def cross_product(self, other: Vector[T]) -> Vector[T]:
        """3D cross product; an empty vector unless both sizes are 3."""
        if self.size() != other.size() or self.size() != 3:
            logger.debug(
                "cross_product: needs two 3-vectors, got %d and %d, returning empty",
                self.size(), other.size(),
            )
            return Vector([], self._element_type)
        a, b = self._data, other._data
        return Vector(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ],
            self._element_type,
        )

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Vector[T]:
        if isinstance(other, Vector):
            if other.size() != self.size():
                logger.debug(
                    "add: size mismatch %d vs %d, returning zero vector",
                    self.size(), other.size(),
                )
                return Vector.create(self.get_rows(), element_type=self._element_type)
            return Vector(
                [mine + theirs for mine, theirs in zip(self._data, other._data)],
                self._element_type,
            )
        if not is_scalar(other):
            return NotImplemented
        return Vector([element + other for element in self._data], self._element_type)

    def __radd__(self, other: Any) -> Vector[T]:
        if not is_scalar(other):
            return NotImplemented
        return Vector([other + element for element in self._data], self._element_type)

    def __sub__(self, other: Any) -> Vector[T]:
        if isinstance(other, Vector):
            if other.size() != self.size():
                logger.debug(
                    "sub: size mismatch %d vs %d, returning left operand",
                    self.size(), other.size(),
                )
                return self.copy()
            return Vector(
                [mine - theirs for mine, theirs in zip(self._data, other._data)],
                self._element_type,
            )
        if not is_scalar(other):
            return NotImplemented
        return Vector([element - other for element in self._data], self._element_type)

    def __mul__(self, other: Any) -> Vector[T]:
        if not is_scalar(other):
            return NotImplemented
        return Vector([element * other for element in self._data], self._element_type)

    def __rmul__(self, other: Any) -> Vector[T]:
        if not is_scalar(other):
            return NotImplemented
        return Vector([other * element for element in self._data], self._element_type)

    def __iadd__(self, other: Any) -> Vector[T]:
        return self._assign(self.__add__(other))

    def __isub__(self, other: Any) -> Vector[T]:
        return self._assign(self.__sub__(other))

    def __imul__(self, other: Any) -> Vector[T]:
        return self._assign(self.__mul__(other))

    def _assign(self, result: Any) -> Any:
        if result is NotImplemented:
            return NotImplemented
        self._data = result._data
        self._element_type = result._element_type
        return self

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(mine == theirs for mine, theirs in zip(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __repr__(self) -> str:
        return f"Vector(rows={len(self._data)}, data={self._data!r})"
