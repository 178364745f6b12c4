"""
Strong types for pylinalg.

Public API:
    Row, Column     - nominally distinct dimension counts
    StrongType      - base host for building further strong scalars
    capabilities    - composable operator traits
"""

from pylinalg.types.strong_type import StrongType
from pylinalg.types.dimensions import Dimension, Row, Column
from pylinalg.types import capabilities

__all__ = [
    "StrongType",
    "Dimension",
    "Row",
    "Column",
    "capabilities",
]
