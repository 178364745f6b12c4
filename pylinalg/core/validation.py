"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion: a Row is never accepted as a Column
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Arithmetic on already-constructed containers does not validate shapes;
see the engines for their degrade-not-fail fallbacks.
"""

import numbers
from collections.abc import Sequence
from typing import Any

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionTypeError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_dimension_value(value: Any, name: str) -> int:
    """
    Validate the raw value wrapped by a dimension.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_kind(value: Any, kind: type, name: str) -> None:
    """
    Verify a dimension argument is of exactly the expected kind.

    Args:
        value: The dimension argument
        kind: Required dimension class (Row or Column)
        name: Parameter name for error messages

    Raises:
        DimensionTypeError: If value is not an instance of kind
    """
    if not isinstance(value, kind):
        raise DimensionTypeError(
            f"{name}: expected {kind.__name__}, got {type(value).__name__} {value!r}"
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify a position lies inside a container extent.

    Negative positions are rejected rather than counted from the end.

    Args:
        index: Position to check
        size: Current extent
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If index is not in [0, size)
        TypeError: If index is not an integer
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"{name}: indices must be integers, got {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for extent {size}",
            index=int(index),
            size=size,
        )
    return int(index)


def check_sequence(value: Any, name: str) -> None:
    """
    Verify input is an ordered, sized collection (list, tuple, ndarray).

    Strings and bytes are rejected even though they are sequences.

    Raises:
        ValidationError: If value cannot be used as container data
    """
    if isinstance(value, (str, bytes)):
        raise ValidationError(f"{name}: text is not valid container data")
    if not isinstance(value, Sequence) and not hasattr(value, '__array__'):
        raise ValidationError(
            f"{name}: expected a sequence, got {type(value).__name__}"
        )


def check_rectangular(rows: list[list[Any]], name: str) -> None:
    """
    Verify every row of nested input has the length of the first row.

    Args:
        rows: Outer sequence of row lists
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row has a different length
    """
    if not rows:
        return
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise DimensionError(
                f"{name}: ragged input, row {i} has {len(row)} elements, expected {width}",
                expected=width,
                actual=len(row),
            )
