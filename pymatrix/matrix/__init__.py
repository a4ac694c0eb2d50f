"""
Dense matrix container.

Public API:
    Matrix  - Row-major 2D container over int32/int64/float32/float64
"""

from pymatrix.matrix.dense import Matrix

__all__ = [
    "Matrix",
]
