"""
Tests for Vector operators.

Covers elementwise and scalar arithmetic, the size-mismatch fallbacks
of + and -, compound assignment, and equality.
"""

import logging
from fractions import Fraction

import numpy as np
import pytest

from pylinalg import Row, Vector


# ═══════════════════════════════════════════════════════════════════════
# Vector-vector arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add(self):
        result = Vector.create([1.0, 2.0]) + Vector.create([10.0, 20.0])
        assert result.get_data() == [11.0, 22.0]

    def test_sub(self):
        result = Vector.create([5, 7]) - Vector.create([1, 2])
        assert result.get_data() == [4, 5]

    def test_operands_untouched(self):
        v = Vector.create([1.0, 2.0])
        w = Vector.create([3.0, 4.0])
        v + w
        v - w
        assert v.get_data() == [1.0, 2.0]
        assert w.get_data() == [3.0, 4.0]

    def test_add_random(self, random_vector):
        v, w = random_vector(5), random_vector(5)
        np.testing.assert_allclose((v + w).to_array(), v.to_array() + w.to_array())

    def test_exact_elements(self):
        v = Vector.create([Fraction(1, 3), Fraction(1, 6)])
        assert (v + v).get_data() == [Fraction(2, 3), Fraction(1, 3)]

    def test_vector_times_vector_unsupported(self):
        with pytest.raises(TypeError):
            Vector.create([1.0]) * Vector.create([1.0])


class TestSizeMismatch:
    """Mismatched sizes degrade instead of raising."""

    def test_add_gives_zero_vector_of_left_length(self):
        result = Vector.create([1.0, 2.0, 3.0]) + Vector.create([1.0])
        assert result.get_data() == [0.0, 0.0, 0.0]

    def test_add_keeps_left_element_type(self):
        result = Vector.create([1, 2]) + Vector.create([1, 2, 3])
        assert result.get_data() == [0, 0]
        assert result.element_type is int

    def test_sub_gives_copy_of_left(self):
        left = Vector.create([1.0, 2.0])
        result = left - Vector.create([1.0, 2.0, 3.0])
        assert result == left
        assert result is not left

    def test_mismatch_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pylinalg.vector.engine"):
            Vector.create([1.0]) + Vector.create([1.0, 2.0])
        assert "size mismatch" in caplog.text


# ═══════════════════════════════════════════════════════════════════════
# Scalar arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_add_scalar(self):
        assert (Vector.create([1.0, 2.0]) + 1.0).get_data() == [2.0, 3.0]
        assert (1.0 + Vector.create([1.0, 2.0])).get_data() == [2.0, 3.0]

    def test_sub_scalar(self):
        assert (Vector.create([1.0, 2.0]) - 1.0).get_data() == [0.0, 1.0]

    def test_mul_scalar(self):
        assert (Vector.create([1, 2]) * 3).get_data() == [3, 6]
        assert (3 * Vector.create([1, 2])).get_data() == [3, 6]

    def test_numpy_scalar_on_the_left(self):
        result = np.float64(2.0) * Vector.create([1.0, 2.0])
        assert isinstance(result, Vector)
        assert result.get_data() == [2.0, 4.0]

    def test_list_operand_unsupported(self):
        with pytest.raises(TypeError):
            Vector.create([1.0]) + [1.0]


# ═══════════════════════════════════════════════════════════════════════
# Compound assignment
# ═══════════════════════════════════════════════════════════════════════


class TestCompound:

    def test_iadd_keeps_identity(self):
        v = Vector.create([1.0, 2.0])
        alias = v
        v += Vector.create([1.0, 1.0])
        assert v is alias
        assert v.get_data() == [2.0, 3.0]

    def test_isub(self):
        v = Vector.create([1.0, 2.0])
        v -= 1.0
        assert v.get_data() == [0.0, 1.0]

    def test_imul(self):
        v = Vector.create([1.0, 2.0])
        v *= 2.0
        assert v.get_data() == [2.0, 4.0]

    def test_iadd_mismatch_zero_fills(self):
        v = Vector.create([1.0, 2.0])
        v += Vector.create([1.0])
        assert v.get_data() == [0.0, 0.0]

    def test_isub_mismatch_leaves_values(self):
        v = Vector.create([1.0, 2.0])
        v -= Vector.create([1.0])
        assert v.get_data() == [1.0, 2.0]


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal(self):
        assert Vector.create([1.0, 2.0]) == Vector.create([1.0, 2.0])

    def test_different_values(self):
        assert Vector.create([1.0, 2.0]) != Vector.create([1.0, 3.0])

    def test_different_sizes(self):
        assert Vector.create([1.0]) != Vector.create([1.0, 0.0])

    def test_empty_vectors_equal(self):
        assert Vector.create() == Vector.create(Row(0))

    def test_not_equal_to_list(self):
        assert Vector.create([1.0]) != [1.0]

    def test_reflexive(self, random_vector):
        v = random_vector(4)
        assert v == v
        assert not (v != v)

    @pytest.mark.parametrize("left, right", [
        ([1.0, 2.0], [1.0, 2.0]),
        ([1.0, 2.0], [1.0, 3.0]),
        ([1.0], [1.0, 0.0]),
        ([], [1.0]),
    ])
    def test_symmetric_and_ne_is_negation(self, left, right):
        v, w = Vector.create(left), Vector.create(right)
        assert (v == w) == (w == v)
        assert (v != w) == (w != v)
        assert (v != w) == (not (v == w))
