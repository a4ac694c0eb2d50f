"""
Element-type registry and numeric constants.

A Matrix is parameterized over one of a fixed set of numpy element types.
Everything that needs to know which types are legal, which one is the
default, or how far a double can represent integers exactly imports it
from here.
"""

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.exceptions import InvalidArgumentError


# Element types a Matrix may hold
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.int32),
    np.dtype(np.int64),
    np.dtype(np.float32),
    np.dtype(np.float64),
)

# Used when no dtype is requested and none can be inferred
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Largest magnitude for which every integer has an exact float64 representation
EXACT_INTEGER_LIMIT: int = 2 ** 53


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Normalize a dtype specification and check that it is supported.

    Python ``int`` and ``float`` resolve to int64 and float64.

    Args:
        dtype: Anything numpy accepts as a dtype

    Returns:
        The canonical numpy dtype

    Raises:
        InvalidArgumentError: If the dtype is not a supported element type
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise InvalidArgumentError(f"dtype: cannot interpret {dtype!r}: {e}") from e

    if resolved not in SUPPORTED_DTYPES:
        names = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise InvalidArgumentError(
            f"dtype: unsupported element type {resolved}, expected one of {names}"
        )
    return resolved


def infer_dtype(array: np.ndarray) -> np.dtype:
    """Pick the element type for data whose dtype numpy inferred."""
    if array.dtype in SUPPORTED_DTYPES:
        return array.dtype
    if np.issubdtype(array.dtype, np.bool_):
        raise InvalidArgumentError("data: boolean values are not a numeric element type")
    if np.issubdtype(array.dtype, np.integer):
        return np.dtype(np.int64)
    if np.issubdtype(array.dtype, np.floating):
        return np.dtype(np.float64)
    raise InvalidArgumentError(
        f"data: non-numeric dtype {array.dtype}, expected integer or floating values"
    )


def is_integer_dtype(dtype: np.dtype) -> bool:
    """True for the integer element types."""
    return np.issubdtype(dtype, np.integer)
