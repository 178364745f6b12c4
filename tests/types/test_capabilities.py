"""
Tests for capability traits and their composition.

Validates types/capabilities.py and types/strong_type.py:
    - check_composition: overlapping leaf traits are rejected at class creation
    - Each operator family on a strong type composing Arithmetic
    - Operators only accept the same strong type
    - StrongType construction, copy and representation
"""

import copy

import pytest

from pylinalg.types.capabilities import (
    Addable,
    Arithmetic,
    BinaryAddable,
    Capability,
    Comparable,
    Multiplicable,
    leaf_capabilities,
    provided_operators,
)
from pylinalg.types.strong_type import StrongType


class Counter(StrongType, Arithmetic):
    """Integer strong type carrying every operator family."""
    __slots__ = ()


class Tally(StrongType, Arithmetic):
    """Second integer strong type, nominally distinct from Counter."""
    __slots__ = ()


class Meters(StrongType, Addable, Comparable):
    __slots__ = ()
    _underlying = float
    _raw_types = (float, int)


# ═══════════════════════════════════════════════════════════════════════
# Composition
# ═══════════════════════════════════════════════════════════════════════


class TestComposition:
    """Traits compose freely as long as no operator is defined twice."""

    def test_overlapping_traits_rejected(self):
        class OtherPlus(Capability):
            __slots__ = ()
            _operators = frozenset({'__add__'})

            def __add__(self, other):
                return NotImplemented

        with pytest.raises(TypeError, match="both define __add__"):
            class Broken(StrongType, BinaryAddable, OtherPlus):
                __slots__ = ()

    def test_aggregate_with_its_own_leaf_is_fine(self):
        """Listing Addable and BinaryAddable reaches the same leaf once."""
        class Fine(StrongType, Addable, BinaryAddable):
            __slots__ = ()

        assert (Fine(2) + Fine(3)).get() == 5

    def test_aggregates_are_not_leaves(self):
        leaves = leaf_capabilities(Meters)
        assert Addable not in leaves
        assert BinaryAddable in leaves
        assert Comparable in leaves

    def test_provided_operators(self):
        ops = provided_operators(Meters)
        assert {'__add__', '__iadd__', '__pos__', '__eq__', '__lt__'} <= ops
        assert '__sub__' not in ops

    def test_arithmetic_covers_every_family(self):
        ops = provided_operators(Counter)
        for name in ('increment', 'post_decrement', '__neg__', '__mod__',
                     '__floordiv__', '__invert__', '__xor__', '__rshift__', '__ge__'):
            assert name in ops

    def test_missing_trait_means_missing_operator(self):
        with pytest.raises(TypeError):
            Meters(1.0) * Meters(2.0)


# ═══════════════════════════════════════════════════════════════════════
# Increment / decrement
# ═══════════════════════════════════════════════════════════════════════


class TestIncrementDecrement:

    def test_pre_increment_returns_self(self):
        c = Counter(1)
        assert c.increment() is c
        assert c == 2

    def test_post_increment_returns_previous(self):
        c = Counter(1)
        previous = c.post_increment()
        assert previous == 1
        assert c == 2
        assert previous is not c

    def test_pre_decrement(self):
        c = Counter(1)
        assert c.decrement() is c
        assert c == 0

    def test_post_decrement(self):
        c = Counter(1)
        assert c.post_decrement() == 1
        assert c == 0


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        assert Counter(2) + Counter(3) == 5
        assert Counter(2) - Counter(3) == -1
        assert isinstance(Counter(2) + Counter(3), Counter)

    def test_unary(self):
        assert +Counter(4) == 4
        assert -Counter(4) == -4

    def test_mul(self):
        assert Counter(6) * Counter(7) == 42

    def test_truediv_truncates_toward_zero(self):
        assert Counter(7) / Counter(2) == 3
        assert Counter(-7) / Counter(2) == -3

    def test_floordiv(self):
        assert Counter(-7) // Counter(2) == -4

    def test_mod(self):
        assert Counter(7) % Counter(3) == 1

    def test_in_place_keeps_identity(self):
        c = Counter(5)
        alias = c
        c += Counter(1)
        c *= Counter(2)
        c -= Counter(2)
        c //= Counter(3)
        c %= Counter(2)
        assert c is alias
        assert c == 1

    def test_float_underlying(self):
        assert Meters(1.5) + Meters(2.0) == 3.5

    def test_raw_operand_rejected(self):
        with pytest.raises(TypeError):
            Counter(1) + 1
        with pytest.raises(TypeError):
            1 + Counter(1)

    def test_other_strong_type_rejected(self):
        with pytest.raises(TypeError):
            Counter(1) + Tally(1)


# ═══════════════════════════════════════════════════════════════════════
# Bitwise
# ═══════════════════════════════════════════════════════════════════════


class TestBitwise:

    def test_invert(self):
        assert ~Counter(0) == -1

    def test_and_or_xor(self):
        assert Counter(6) & Counter(3) == 2
        assert Counter(6) | Counter(3) == 7
        assert Counter(6) ^ Counter(3) == 5

    def test_shifts(self):
        assert Counter(1) << Counter(4) == 16
        assert Counter(16) >> Counter(2) == 4

    def test_in_place(self):
        c = Counter(12)
        c &= Counter(10)
        c |= Counter(1)
        c ^= Counter(2)
        c <<= Counter(1)
        c >>= Counter(2)
        assert c == 5


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestComparable:

    def test_same_type_ordering(self):
        assert Counter(1) < Counter(2)
        assert Counter(2) <= Counter(2)
        assert Counter(3) > Counter(2)
        assert Counter(3) >= Counter(3)
        assert Counter(3) != Counter(4)

    def test_raw_value_both_directions(self):
        assert Counter(3) == 3
        assert 3 == Counter(3)
        assert 2 < Counter(3)
        assert Counter(3) > 2

    def test_bool_is_not_a_raw_value(self):
        assert not (Counter(1) == True)  # noqa: E712

    def test_other_strong_type_never_equal(self):
        assert Counter(1) != Tally(1)
        assert not (Counter(1) == Tally(1))

    def test_other_strong_type_unordered(self):
        with pytest.raises(TypeError):
            Counter(1) < Tally(2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Counter(1))


# ═══════════════════════════════════════════════════════════════════════
# StrongType basics
# ═══════════════════════════════════════════════════════════════════════


class TestStrongType:

    def test_default_is_underlying_default(self):
        assert Counter().get() == 0
        assert Meters().get() == 0.0

    def test_copy_is_independent(self):
        c = Counter(3)
        for duplicate in (c.copy(), copy.copy(c), copy.deepcopy(c)):
            duplicate.increment()
            assert c == 3
            assert duplicate == 4

    def test_repr_and_str(self):
        assert repr(Counter(3)) == "Counter(3)"
        assert str(Counter(3)) == "3"

    def test_no_implicit_int_conversion(self):
        with pytest.raises(TypeError):
            int(Counter(3))
        with pytest.raises(TypeError):
            range(Counter(3))

    def test_multiplicable_alone(self):
        class Scale(StrongType, Multiplicable):
            __slots__ = ()

        assert (Scale(3) * Scale(4)).get() == 12
