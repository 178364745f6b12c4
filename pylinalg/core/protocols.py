"""
Core protocols for pylinalg.

These define structural interfaces that element types may satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any numeric type with the right operators can be stored in a
Vector or Matrix without registering anywhere.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class HasEpsilon(Protocol):
    """
    Element types that define their own comparison tolerance.

    Used by parallel()/anti_parallel() for user-defined element types
    that neither numpy nor the standard numeric tower know about.
    """

    def epsilon(self) -> Any:
        """
        Smallest meaningful difference between two values of this type.

        Implementations must make this callable on the class itself
        (a classmethod or staticmethod).
        """
        ...


@runtime_checkable
class Shaped(Protocol):
    """
    Any engine container (Vector, Matrix).

    Operators use this to tell a container operand from a scalar one.
    """

    def get_rows(self) -> Any: ...

    def erase(self) -> None: ...


@runtime_checkable
class HasSqrt(Protocol):
    """Element types that provide their own square root (e.g. Decimal)."""

    def sqrt(self) -> Any: ...
