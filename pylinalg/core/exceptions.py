"""
Exception hierarchy for pylinalg.

All exceptions inherit from LinalgError to allow catching any
library-specific error. Engine-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Shape mismatches inside arithmetic are NOT errors (they degrade);
      only construction, checked access and Matrix.multiply raise
"""


class LinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(LinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs to a factory or constructor fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Container extents are incorrect or inconsistent.

    Raised when nested input is ragged, or when a strict operation
    (Matrix.multiply) is given operands of non-conformant shape.

    Attributes:
        expected: The extent that was required, if known
        actual: The extent that was found, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DimensionTypeError(ValidationError, TypeError):
    """
    A dimension of the wrong kind was supplied.

    Raised when a Column is passed where a Row is expected (or vice versa),
    or when a raw integer is passed where a strong dimension is required.
    """
    pass


class IndexOutOfRangeError(LinalgError, IndexError):
    """
    Checked element access outside the container's current extent.

    Attributes:
        index: The offending position
        size: The extent the position was checked against
    """

    def __init__(self, message: str, index: int, size: int):
        super().__init__(message)
        self.index = index
        self.size = size
