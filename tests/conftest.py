"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pylinalg import Column, Matrix, Row, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def _unique_unit_values(rng, n):
    """n distinct floats in (0, 1]."""
    values = set()
    while len(values) < n:
        values.add(float(1.0 - rng.random()))
    out = list(values)
    rng.shuffle(out)
    return out


@pytest.fixture
def random_matrix(rng):
    """Factory: rows x cols float Matrix filled with distinct values in (0, 1]."""
    def make(rows, cols):
        matrix = Matrix.create(Row(rows), Column(cols))
        values = iter(_unique_unit_values(rng, rows * cols))
        for row in matrix.get_matrix():
            for j in range(len(row)):
                row[j] = next(values)
        return matrix
    return make


@pytest.fixture
def random_vector(rng):
    """Factory: float Vector of length n filled with distinct values in (0, 1]."""
    def make(n):
        return Vector.create(_unique_unit_values(rng, n))
    return make
