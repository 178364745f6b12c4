"""
Matrix engine.

Public API:
    Matrix.create(...)   - the only sanctioned constructor
    Matrix               - elementwise and scalar arithmetic, transpose,
                           the dual-mode * operator, strict multiply()
                           and square()
"""

from pylinalg.matrix.engine import Matrix

__all__ = [
    "Matrix",
]
