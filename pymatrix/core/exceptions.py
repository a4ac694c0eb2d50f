"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. The two failure classes of the container are
InvalidArgumentError (bad axis, mismatched shapes, bounds violations in
checked accessors) and OutOfRangeError (bad index for insert/erase/pop).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class InvalidArgumentError(MatrixError):
    """
    An argument is invalid for the requested operation.

    Raised for bounds violations in checked accessors (put, submatrix),
    unsupported element types and negative sizes.
    """
    pass


class DimensionError(InvalidArgumentError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when matrix shapes differ for an elementwise operation, when a
    broadcast vector or inserted row/column has the wrong length, or when
    the inner dimensions of a matrix product disagree.

    Attributes:
        expected: The dimension(s) the operation required
        actual: The dimension(s) that were supplied
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class AxisError(InvalidArgumentError):
    """
    Axis is not one of BY_ROW (0) or BY_COLUMN (1).

    Attributes:
        axis: The rejected axis value
    """

    def __init__(self, message: str, axis: object = None):
        super().__init__(message)
        self.axis = axis


class OutOfRangeError(MatrixError):
    """
    Index lies outside the valid range for a row/column operation.

    Attributes:
        index: The rejected index
        size: Size of the dimension the index refers to
        axis: Axis the index was applied to, if any
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        axis: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis
