"""
Capability traits for strong types.

Each trait is a mixin that adds exactly one operator family to a host
type, implemented purely through the host's own access to its wrapped
value. A strong type opts in by listing the traits it composes:

    class Row(StrongType, Addable, BinarySubtractable, Comparable):
        ...

Host contract (provided by StrongType):
    get()           -> wrapped value
    _set(value)     -> replace wrapped value in place
    _rewrap(value)  -> new instance of the host type around value
    _raw_types      -> raw types the host may be compared against

Every leaf trait declares the operator names it provides in
``_operators``. Aggregates (Addable, Subtractable, Arithmetic) declare
nothing themselves; they are unions of their leaves.
check_composition() enforces that no two distinct leaves composed into
one host provide the same operator.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.precision import divide


class Capability:
    """Marker base for all capability traits."""
    __slots__ = ()
    _operators: frozenset[str] = frozenset()


def leaf_capabilities(cls: type) -> list[type]:
    """Leaf traits composed into cls, in MRO order."""
    return [
        klass for klass in cls.__mro__
        if issubclass(klass, Capability) and klass.__dict__.get('_operators')
    ]


def provided_operators(cls: type) -> frozenset[str]:
    """All operator names contributed by the traits composed into cls."""
    ops: set[str] = set()
    for trait in leaf_capabilities(cls):
        ops |= trait._operators
    return frozenset(ops)


def check_composition(cls: type) -> None:
    """
    Verify the traits composed into cls do not overlap.

    Raises:
        TypeError: If two distinct leaf traits define the same operator
    """
    owners: dict[str, type] = {}
    for trait in leaf_capabilities(cls):
        for op in trait._operators:
            other = owners.setdefault(op, trait)
            if other is not trait:
                raise TypeError(
                    f"{cls.__name__}: capabilities {other.__name__} and "
                    f"{trait.__name__} both define {op}"
                )


# ═══════════════════════════════════════════════════════════════════════
# Increment / decrement
# ═══════════════════════════════════════════════════════════════════════


class PreIncrementable(Capability):
    __slots__ = ()
    _operators = frozenset({'increment'})

    def increment(self):
        """Add one in place and return self (++x)."""
        self._set(self.get() + 1)
        return self


class PostIncrementable(Capability):
    __slots__ = ()
    _operators = frozenset({'post_increment'})

    def post_increment(self):
        """Add one in place and return the previous value (x++)."""
        previous = self._rewrap(self.get())
        self._set(self.get() + 1)
        return previous


class PreDecrementable(Capability):
    __slots__ = ()
    _operators = frozenset({'decrement'})

    def decrement(self):
        """Subtract one in place and return self (--x)."""
        self._set(self.get() - 1)
        return self


class PostDecrementable(Capability):
    __slots__ = ()
    _operators = frozenset({'post_decrement'})

    def post_decrement(self):
        """Subtract one in place and return the previous value (x--)."""
        previous = self._rewrap(self.get())
        self._set(self.get() - 1)
        return previous


# ═══════════════════════════════════════════════════════════════════════
# Additive
# ═══════════════════════════════════════════════════════════════════════


class BinaryAddable(Capability):
    __slots__ = ()
    _operators = frozenset({'__add__', '__iadd__'})

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() + other.get())

    def __iadd__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() + other.get())
        return self


class UnaryAddable(Capability):
    __slots__ = ()
    _operators = frozenset({'__pos__'})

    def __pos__(self):
        return self._rewrap(+self.get())


class Addable(BinaryAddable, UnaryAddable):
    __slots__ = ()


class BinarySubtractable(Capability):
    __slots__ = ()
    _operators = frozenset({'__sub__', '__isub__'})

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() - other.get())

    def __isub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() - other.get())
        return self


class UnarySubtractable(Capability):
    __slots__ = ()
    _operators = frozenset({'__neg__'})

    def __neg__(self):
        return self._rewrap(-self.get())


class Subtractable(BinarySubtractable, UnarySubtractable):
    __slots__ = ()


# ═══════════════════════════════════════════════════════════════════════
# Multiplicative
# ═══════════════════════════════════════════════════════════════════════


class Multiplicable(Capability):
    __slots__ = ()
    _operators = frozenset({'__mul__', '__imul__'})

    def __mul__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() * other.get())

    def __imul__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() * other.get())
        return self


class Divisible(Capability):
    """
    Division with the semantics of the wrapped type.

    Integral values truncate toward zero, so ``/`` and ``//`` agree for
    them; both spellings belong to this one family.
    """
    __slots__ = ()
    _operators = frozenset({'__truediv__', '__itruediv__', '__floordiv__', '__ifloordiv__'})

    def __truediv__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(divide(self.get(), other.get()))

    def __itruediv__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(divide(self.get(), other.get()))
        return self

    def __floordiv__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() // other.get())

    def __ifloordiv__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() // other.get())
        return self


class Modulable(Capability):
    __slots__ = ()
    _operators = frozenset({'__mod__', '__imod__'})

    def __mod__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() % other.get())

    def __imod__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() % other.get())
        return self


# ═══════════════════════════════════════════════════════════════════════
# Bitwise
# ═══════════════════════════════════════════════════════════════════════


class BitwiseInvertible(Capability):
    __slots__ = ()
    _operators = frozenset({'__invert__'})

    def __invert__(self):
        return self._rewrap(~self.get())


class BitwiseAndable(Capability):
    __slots__ = ()
    _operators = frozenset({'__and__', '__iand__'})

    def __and__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() & other.get())

    def __iand__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() & other.get())
        return self


class BitwiseOrable(Capability):
    __slots__ = ()
    _operators = frozenset({'__or__', '__ior__'})

    def __or__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() | other.get())

    def __ior__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() | other.get())
        return self


class BitwiseXorable(Capability):
    __slots__ = ()
    _operators = frozenset({'__xor__', '__ixor__'})

    def __xor__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() ^ other.get())

    def __ixor__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() ^ other.get())
        return self


class BitwiseLeftShiftable(Capability):
    __slots__ = ()
    _operators = frozenset({'__lshift__', '__ilshift__'})

    def __lshift__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() << other.get())

    def __ilshift__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() << other.get())
        return self


class BitwiseRightShiftable(Capability):
    __slots__ = ()
    _operators = frozenset({'__rshift__', '__irshift__'})

    def __rshift__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rewrap(self.get() >> other.get())

    def __irshift__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._set(self.get() >> other.get())
        return self


# ═══════════════════════════════════════════════════════════════════════
# Ordering
# ═══════════════════════════════════════════════════════════════════════


class Comparable(Capability):
    """
    Full ordering and equality.

    Compares against another instance of the same host type or against a
    raw value of one of the host's ``_raw_types``. Anything else (including
    a different strong type wrapping the same representation) is
    NotImplemented, so ``==`` falls back to False and ordering raises
    TypeError.
    """
    __slots__ = ()
    _operators = frozenset({'__eq__', '__ne__', '__lt__', '__le__', '__gt__', '__ge__'})

    # Mutable hosts must not be hashed
    __hash__ = None  # type: ignore[assignment]

    def _comparand(self, other: Any) -> Any:
        if isinstance(other, type(self)):
            return other.get()
        if isinstance(other, bool) or isinstance(other, Capability):
            return NotImplemented
        if isinstance(other, self._raw_types):
            return other
        return NotImplemented

    def __eq__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() == value

    def __ne__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() != value

    def __lt__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() < value

    def __le__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() <= value

    def __gt__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() > value

    def __ge__(self, other):
        value = self._comparand(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() >= value


class Arithmetic(
    PreIncrementable,
    PostIncrementable,
    PreDecrementable,
    PostDecrementable,
    Addable,
    Subtractable,
    Multiplicable,
    Divisible,
    Modulable,
    BitwiseInvertible,
    BitwiseAndable,
    BitwiseOrable,
    BitwiseXorable,
    BitwiseLeftShiftable,
    BitwiseRightShiftable,
    Comparable,
):
    """Every operator family at once."""
    __slots__ = ()
