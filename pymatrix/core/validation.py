"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. Shape-mutating operations run
them before touching storage, so a failed call leaves the matrix as it was.

Design principles:
    - Each function validates ONE thing
    - Clear, actionable error messages with actual values
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.axis import Axis
from pymatrix.core.exceptions import (
    AxisError,
    DimensionError,
    InvalidArgumentError,
    OutOfRangeError,
)


def check_axis(axis: Axis | int) -> Axis:
    """
    Validate an axis argument and return it as an Axis.

    Args:
        axis: Axis member, or the plain integers 0 / 1

    Returns:
        The matching Axis member

    Raises:
        AxisError: If axis is not 0 (rows) or 1 (columns)
    """
    if isinstance(axis, bool):
        raise AxisError(f"Invalid axis {axis!r}. Use 0 for rows and 1 for columns.", axis=axis)
    try:
        return Axis(axis)
    except (ValueError, TypeError) as e:
        raise AxisError(
            f"Invalid axis {axis!r}. Use 0 for rows and 1 for columns.", axis=axis
        ) from e


def check_size(value: int, name: str) -> None:
    """
    Verify a requested dimension is a non-negative integer.

    Raises:
        InvalidArgumentError: If value is negative
    """
    if value < 0:
        raise InvalidArgumentError(f"{name}: must be non-negative, got {value}")


def check_vector(data: ArrayLike, dtype: np.dtype, name: str) -> np.ndarray:
    """
    Convert a row/column/broadcast vector to a 1D array of the element type.

    Args:
        data: Sequence of values
        dtype: Element type of the receiving matrix
        name: Parameter name for error messages

    Returns:
        1D numpy array of dtype

    Raises:
        DimensionError: If data is not one-dimensional
        InvalidArgumentError: If data cannot be converted to the element type
    """
    try:
        vector = np.asarray(data, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to {dtype} vector: {e}") from e

    if vector.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D sequence, got {vector.ndim}D with shape {vector.shape}",
            expected=1,
            actual=vector.ndim,
        )
    return vector


def check_length(vector: np.ndarray, expected: int, name: str) -> None:
    """
    Verify a vector has exactly the expected number of elements.

    Raises:
        DimensionError: If the length differs
    """
    if len(vector) != expected:
        raise DimensionError(
            f"{name}: size {len(vector)} does not match the expected {expected}",
            expected=expected,
            actual=len(vector),
        )


def check_same_shape(
    shape: tuple[int, int],
    other: tuple[int, int],
    name: str,
) -> None:
    """
    Verify two matrices have identical (height, width).

    Raises:
        DimensionError: If the shapes differ
    """
    if shape != other:
        raise DimensionError(
            f"{name}: matrix dimensions must be the same, got {shape} and {other}",
            expected=shape,
            actual=other,
        )


def check_inner_dimension(width: int, height: int) -> None:
    """
    Verify the left operand's width matches the right operand's height.

    Raises:
        DimensionError: If the matrix product is not defined
    """
    if width != height:
        raise DimensionError(
            f"dot: product not compatible, left width {width} != right height {height}",
            expected=width,
            actual=height,
        )


def check_index(index: int, size: int, axis: Axis, *, inclusive: bool = False) -> None:
    """
    Verify a row/column index for insert (inclusive) or erase.

    Args:
        index: Row or column index
        size: Current number of rows or columns along axis
        axis: Axis the index refers to
        inclusive: Allow index == size (insertion at the end)

    Raises:
        OutOfRangeError: If index lies outside [0, size) or [0, size]
    """
    upper = size if inclusive else size - 1
    if index < 0 or index > upper:
        what = "row" if axis is Axis.BY_ROW else "column"
        bound = f"[0, {size}]" if inclusive else f"[0, {size})"
        raise OutOfRangeError(
            f"Index {index} out of bounds for {what} operation, expected {bound}",
            index=index,
            size=size,
            axis=int(axis),
        )


def check_position(row: int, col: int, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses an existing element. Negative indices are rejected.

    Raises:
        InvalidArgumentError: If either index is out of bounds
    """
    height, width = shape
    if not (0 <= row < height and 0 <= col < width):
        raise InvalidArgumentError(
            f"Index ({row}, {col}) out of bounds for matrix of shape {shape}"
        )


def check_region(
    start_row: int,
    start_col: int,
    height: int,
    width: int,
    shape: tuple[int, int],
) -> None:
    """
    Verify a rectangular region lies inside the matrix.

    Raises:
        InvalidArgumentError: If the region is negative-sized or leaves the matrix
    """
    n_rows, n_cols = shape
    if not (
        height >= 0 and width >= 0
        and 0 <= start_row and start_row + height <= n_rows
        and 0 <= start_col and start_col + width <= n_cols
    ):
        raise InvalidArgumentError(
            f"Region rows [{start_row}, {start_row + height}) x "
            f"cols [{start_col}, {start_col + width}) out of bounds for shape {shape}"
        )
