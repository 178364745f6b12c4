"""
StrongType: nominal wrapper around a single value.

A StrongType exists only to keep semantically different values of the
same representation apart (a row count vs a column count). It exposes
the wrapped value through get() and nothing else; operators come from
the capability traits a subclass composes.

There is no __int__, __index__ or __float__: converting
back to the raw representation is always an explicit get() call.
"""

from __future__ import annotations

import numbers
from typing import Any, ClassVar

from pylinalg.types.capabilities import check_composition

_MISSING = object()


class StrongType:
    """
    Base host for capability traits.

    Subclasses set ``_underlying`` (the wrapped representation, used for
    default construction) and may override ``_validate`` to enforce an
    invariant on every value the instance ever holds.

    Examples:
        >>> class Meters(StrongType, Addable, Comparable):
        ...     _underlying = float
        ...     _raw_types = (float, int)
        >>> Meters(1.5) + Meters(2.0) == 3.5
        True
    """
    __slots__ = ('_value',)

    _underlying: ClassVar[type] = int
    _raw_types: ClassVar[tuple[type, ...]] = (numbers.Integral,)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        check_composition(cls)

    def __init__(self, value: Any = _MISSING):
        if value is _MISSING:
            value = self._underlying()
        self._value = self._validate(value)

    @classmethod
    def _validate(cls, value: Any) -> Any:
        return value

    def get(self) -> Any:
        """Return the wrapped value."""
        return self._value

    def _set(self, value: Any) -> None:
        self._value = self._validate(value)

    def _rewrap(self, value: Any) -> StrongType:
        return type(self)(value)

    def copy(self) -> StrongType:
        """Independent instance holding the same value."""
        return type(self)(self._value)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> StrongType:
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)
