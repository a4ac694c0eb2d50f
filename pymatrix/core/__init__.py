"""
Core infrastructure for pymatrix.

This module provides the shared pieces the container and the codec are
built on.

Key components:
    exceptions: Exception hierarchy
    validation: Argument validators
    axis: Axis enumeration
    dtypes: Supported element types and numeric constants
"""

from pymatrix.core.axis import Axis
from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    EXACT_INTEGER_LIMIT,
    SUPPORTED_DTYPES,
)
from pymatrix.core.exceptions import (
    MatrixError,
    InvalidArgumentError,
    DimensionError,
    AxisError,
    OutOfRangeError,
)

__all__ = [
    # Axis
    "Axis",
    # Element types
    "DEFAULT_DTYPE",
    "EXACT_INTEGER_LIMIT",
    "SUPPORTED_DTYPES",
    # Exceptions
    "MatrixError",
    "InvalidArgumentError",
    "DimensionError",
    "AxisError",
    "OutOfRangeError",
]
