"""
pylinalg: generic dense linear algebra with strongly typed dimensions.

Vectors and matrices over any numeric element type (int, float,
Fraction, Decimal, numpy scalars), sized by Row and Column counts that
cannot be swapped at call sites.

Submodules:
    types: Row, Column and the capability traits behind them
    vector: Vector engine
    matrix: Matrix engine
    core: exceptions, validation, per-element-type precision
"""

import logging

__version__ = "0.1.0"

from pylinalg.types import Row, Column
from pylinalg.vector import Vector
from pylinalg.matrix import Matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Row",
    "Column",
    "Vector",
    "Matrix",
]
