"""
Elementwise arithmetic and matrix product on raw buffers.

Operands come in three forms: a scalar applied to every element, a vector
with one value per column broadcast over every row, and a same-shape
matrix applied position by position. Every operand is converted to the
left-hand buffer's element type first, so results never change type.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.dtypes import is_integer_dtype
from pymatrix.core.exceptions import InvalidArgumentError
from pymatrix.core.validation import (
    check_inner_dimension,
    check_length,
    check_same_shape,
    check_vector,
)


def to_element(dtype: np.dtype, value: Any, name: str) -> np.generic:
    """
    Convert a scalar to ``dtype``, refusing values the type cannot hold.

    Floats converted to an integer type truncate toward zero.

    Raises:
        InvalidArgumentError: If value is not a real number, or is an
            integer outside the range of an integer ``dtype``
    """
    if not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    if is_integer_dtype(dtype) and isinstance(value, numbers.Integral):
        info = np.iinfo(dtype)
        if not info.min <= int(value) <= info.max:
            raise InvalidArgumentError(
                f"{name}: {value!r} is outside the range of {dtype} "
                f"[{info.min}, {info.max}]"
            )
    try:
        return dtype.type(value)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError(
            f"{name}: {value!r} is not representable as {dtype}: {e}"
        ) from e


def prepare_operand(
    array: NDArray[Any],
    other: Any,
    name: str,
    *,
    matrix: bool,
) -> NDArray[Any] | np.generic:
    """
    Validate an operand against ``array`` and convert it to its element type.

    Args:
        array: Left-hand buffer (height x width)
        other: Scalar, 1D sequence, or the buffer of another matrix
        name: Operation name for error messages
        matrix: True when ``other`` is the buffer of a Matrix

    Returns:
        Scalar or array ready to be combined with ``array`` by a ufunc

    Raises:
        DimensionError: If the vector length or matrix shape does not match
        InvalidArgumentError: If a scalar is not a real number of the element type
    """
    if matrix:
        check_same_shape(array.shape, other.shape, name)
        return other.astype(array.dtype, copy=False)

    if isinstance(other, numbers.Real):
        return to_element(array.dtype, other, name)

    vector = check_vector(other, array.dtype, name)
    check_length(vector, array.shape[1], name)
    return vector


def truncate_divide(
    a: NDArray[Any],
    b: NDArray[Any] | np.generic,
    out: NDArray[Any] | None = None,
) -> NDArray[Any]:
    """
    Integer division rounding toward zero, exact in the integer type.

    numpy's integer division floors, so quotients of operands with opposite
    signs and a nonzero remainder are moved up by one. A zero divisor gives
    0 with numpy's RuntimeWarning.
    """
    quotient, remainder = np.divmod(a, b)
    quotient += (remainder != 0) & ((a < 0) != (b < 0))
    if out is None:
        return quotient
    out[...] = quotient
    return out


def division_ufunc(dtype: np.dtype) -> Callable[..., NDArray[Any]]:
    """
    The element type's native division.

    Integers truncate toward zero, floating types divide exactly. Division
    by zero is not intercepted: numpy's result and RuntimeWarning propagate.
    """
    if is_integer_dtype(dtype):
        return truncate_divide
    return np.true_divide


def elementwise(
    ufunc: Callable[..., NDArray[Any]],
    array: NDArray[Any],
    operand: NDArray[Any] | np.generic,
    *,
    inplace: bool = False,
) -> NDArray[Any]:
    """Apply ``ufunc`` to ``array`` and a prepared operand, optionally in place."""
    if inplace:
        return ufunc(array, operand, out=array)
    return ufunc(array, operand)


def matmul(left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix product of two buffers, in the left buffer's element type.

    Raises:
        DimensionError: If left width != right height
    """
    check_inner_dimension(left.shape[1], right.shape[0])
    return np.matmul(left, right.astype(left.dtype, copy=False))


def transpose(array: NDArray[Any]) -> NDArray[Any]:
    """Row-major copy of the transposed buffer."""
    return np.ascontiguousarray(array.T)
