"""
Core infrastructure for pylinalg.

This module provides shared abstractions and utilities used by the
strong dimension types and by both engines (vector, matrix).

Key components:
    protocols: HasEpsilon, HasSqrt, Shaped structural interfaces
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Per-element-type epsilon, square root and division
"""

from pylinalg.core.protocols import HasEpsilon, HasSqrt, Shaped
from pylinalg.core.exceptions import (
    LinalgError,
    ValidationError,
    DimensionError,
    DimensionTypeError,
    IndexOutOfRangeError,
)

__all__ = [
    # Protocols
    "HasEpsilon",
    "HasSqrt",
    "Shaped",
    # Exceptions
    "LinalgError",
    "ValidationError",
    "DimensionError",
    "DimensionTypeError",
    "IndexOutOfRangeError",
]
