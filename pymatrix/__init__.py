"""
pymatrix: dense 2D numeric container for Python.

A generic row-major matrix with element access, shape mutation,
elementwise and linear-algebra arithmetic, reductions, and a protobuf
serialization format.

Submodules:
    core: Exceptions, validation, axis and element-type definitions
    matrix: The Matrix container
    io: Protobuf wire codec
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Axis,
    MatrixError,
    InvalidArgumentError,
    DimensionError,
    AxisError,
    OutOfRangeError,
)
from pymatrix.matrix import Matrix
from pymatrix import io

__all__ = [
    "__version__",
    "Axis",
    "Matrix",
    "MatrixError",
    "InvalidArgumentError",
    "DimensionError",
    "AxisError",
    "OutOfRangeError",
    "io",
]
