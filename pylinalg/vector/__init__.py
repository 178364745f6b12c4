"""
Vector engine.

Public API:
    Vector.create(...)   - the only sanctioned constructor
    Vector               - arithmetic, magnitude, normalize, dot/cross
                           product, parallelism tests
"""

from pylinalg.vector.engine import Vector

__all__ = [
    "Vector",
]
