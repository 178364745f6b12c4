"""
Row and Column: strong dimension types.

Both wrap a non-negative int and compose the same capabilities, but they
are distinct classes: a Row is never equal to, ordered against, added to
or accepted in place of a Column. Comparisons against a raw int work
in both directions (``Row(3) == 3``, ``2 < Row(3)``).

Python integers do not wrap around, so a result below zero (for example
``Row(0) - Row(1)`` or ``Row(0).decrement()``) raises ValidationError
from the constructor instead of wrapping. Callers are expected to avoid
underflow; it is not a supported operation.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.validation import check_dimension_value
from pylinalg.types.capabilities import (
    Addable,
    BinarySubtractable,
    Comparable,
    PostDecrementable,
    PostIncrementable,
    PreDecrementable,
    PreIncrementable,
)
from pylinalg.types.strong_type import StrongType


class Dimension(
    StrongType,
    Addable,
    BinarySubtractable,
    PreIncrementable,
    PostIncrementable,
    PreDecrementable,
    PostDecrementable,
    Comparable,
):
    """Non-negative count. Use Row or Column, never Dimension directly."""
    __slots__ = ()

    @classmethod
    def _validate(cls, value: Any) -> int:
        return check_dimension_value(value, cls.__name__)


class Row(Dimension):
    """Number of rows (or the length of a Vector)."""
    __slots__ = ()


class Column(Dimension):
    """Number of columns."""
    __slots__ = ()
