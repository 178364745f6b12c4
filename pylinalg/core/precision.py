"""
Numerical precision constants and utilities.

Maps an element type to its numeric behavior: machine epsilon, a
precision-matched square root, IEEE-style division, and the additive
identity. Every engine goes through this module instead of calling
math or numpy directly, so single, double and extended precision
elements keep their own precision end to end.
"""

import cmath
import math
import numbers
from collections.abc import Sequence
from decimal import Decimal, DivisionByZero, InvalidOperation, localcontext
from fractions import Fraction
from typing import Any

import numpy as np

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import HasEpsilon, HasSqrt, Shaped


# Element type used when a container is created without any data to infer from
DEFAULT_ELEMENT_TYPE: type = float

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def is_scalar(value: Any) -> bool:
    """
    True if value can be used as the scalar operand of an engine operator.

    Containers (engines, sequences, arrays) and text are not scalars.
    """
    if isinstance(value, (str, bytes, Sequence, np.ndarray)):
        return False
    return not isinstance(value, Shaped)


def infer_element_type(values: Sequence[Any]) -> type:
    """Element type of the first value, or DEFAULT_ELEMENT_TYPE if empty."""
    if len(values) == 0:
        return DEFAULT_ELEMENT_TYPE
    return type(values[0])


def zero(element_type: type = DEFAULT_ELEMENT_TYPE) -> Any:
    """
    Additive identity of an element type (its default-constructed value).

    Args:
        element_type: Type whose zero is wanted (float, np.float32, Decimal, ...)

    Returns:
        element_type() -- 0.0, 0, Decimal('0'), Fraction(0), ...
    """
    return element_type()


def epsilon(element_type: type) -> Any:
    """
    Comparison tolerance for an element type.

    Floating types (Python float, complex and numpy inexact scalars) use
    machine epsilon; integral types and Fraction are exact and use 0;
    Decimal derives epsilon from the active context precision; any other
    type must implement HasEpsilon.

    Args:
        element_type: The element type

    Returns:
        Epsilon as a value comparable with element_type

    Raises:
        ValidationError: If no epsilon is known for the type
    """
    if isinstance(element_type, type):
        if issubclass(element_type, np.inexact):
            return np.finfo(element_type).eps
        if issubclass(element_type, float):
            return EPSILON_64
        if issubclass(element_type, complex):
            return EPSILON_64
        if issubclass(element_type, numbers.Integral):
            return element_type(0)
        if issubclass(element_type, Decimal):
            with localcontext() as ctx:
                return Decimal(1).scaleb(1 - ctx.prec)
        if issubclass(element_type, Fraction):
            return Fraction(0)
        if issubclass(element_type, HasEpsilon):
            return element_type.epsilon()
    raise ValidationError(
        f"element type {getattr(element_type, '__name__', element_type)!r}: "
        f"no epsilon known; implement a classmethod epsilon()"
    )


def sqrt(value: Any) -> Any:
    """
    Square root that keeps the precision of its argument.

    numpy scalars go through np.sqrt and are cast back to their own type
    (float32 stays float32, longdouble stays longdouble, integers are
    truncated). Python ints use math.isqrt, which truncates the same way.
    Python complex values use cmath.sqrt. Types with a sqrt() method
    (Decimal) use it. Everything else goes through math.sqrt and is
    converted back to its own type.

    Args:
        value: Non-negative value

    Returns:
        Square root in the same type as value
    """
    if isinstance(value, np.generic):
        return type(value)(np.sqrt(value))
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral):
        return math.isqrt(value)
    if isinstance(value, complex):
        return cmath.sqrt(value)
    if isinstance(value, float):
        return math.sqrt(value)
    if isinstance(value, HasSqrt):
        return value.sqrt()
    return type(value)(math.sqrt(value))


def divide(numerator: Any, denominator: Any) -> Any:
    """
    Element division with the semantics of the element type.

    - Integral / Integral truncates toward zero (no float promotion).
    - Floating and Decimal operands follow IEEE rules: x/0 gives +-inf and
      0/0 gives NaN instead of raising.
    - Other types (Fraction, user types) use their own division, which
      may raise on a zero denominator.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The quotient
    """
    if isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
        return _truncating_divide(numerator, denominator)

    if isinstance(numerator, np.generic) or isinstance(denominator, np.generic):
        with np.errstate(divide='ignore', invalid='ignore'):
            return numerator / denominator

    if isinstance(numerator, Decimal) or isinstance(denominator, Decimal):
        with localcontext() as ctx:
            ctx.traps[DivisionByZero] = False
            ctx.traps[InvalidOperation] = False
            return numerator / denominator

    inexact = (float, complex)
    if (isinstance(numerator, inexact) or isinstance(denominator, inexact)) and denominator == 0:
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.divide(numerator, denominator).item()

    return numerator / denominator


def _truncating_divide(numerator: Any, denominator: Any) -> Any:
    """Integer division rounding toward zero (no float promotion)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
