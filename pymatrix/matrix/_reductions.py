"""
Reductions: extremes, totals and running sums.

Axis convention for max/min/sum: BY_ROW yields one value per row (reduced
across that row's columns), BY_COLUMN one value per column. For cumsum the
axis names the direction of accumulation instead: BY_ROW runs down each
column, BY_COLUMN runs across each row.

All results keep the matrix's element type.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.axis import Axis
from pymatrix.core.exceptions import InvalidArgumentError


def _reduced_axis(axis: Axis) -> int:
    # BY_ROW reduces across columns
    return 1 if axis is Axis.BY_ROW else 0


def _check_nonempty(array: NDArray[Any], name: str, axis: Axis | None = None) -> None:
    if array.size == 0:
        where = "" if axis is None else f" along {axis.name}"
        raise InvalidArgumentError(
            f"{name}: no elements to compare{where} in a "
            f"{array.shape[0]} x {array.shape[1]} matrix"
        )


def _per_axis_extreme(
    reduce: Callable[..., NDArray[Any]],
    array: NDArray[Any],
    axis: Axis,
    name: str,
) -> NDArray[Any]:
    np_axis = _reduced_axis(axis)
    if array.shape[1 - np_axis] == 0:
        return np.empty(0, dtype=array.dtype)
    _check_nonempty(array, name, axis)
    return reduce(array, axis=np_axis)


def maximum(array: NDArray[Any], axis: Axis | None = None):
    """
    Largest element, or the largest per row/column.

    Raises:
        InvalidArgumentError: If there is nothing to compare: the buffer is
            empty, or the rows (columns) being reduced have no elements
    """
    if axis is None:
        _check_nonempty(array, 'max')
        return array.max()
    return _per_axis_extreme(np.max, array, axis, 'max')


def minimum(array: NDArray[Any], axis: Axis | None = None):
    """Smallest element, or the smallest per row/column. Same errors as maximum."""
    if axis is None:
        _check_nonempty(array, 'min')
        return array.min()
    return _per_axis_extreme(np.min, array, axis, 'min')


def total(array: NDArray[Any], axis: Axis | None = None):
    """Sum of all elements (zero when empty), or per-row/per-column sums."""
    if axis is None:
        return array.sum(dtype=array.dtype)
    return array.sum(axis=_reduced_axis(axis), dtype=array.dtype)


def cumulative(array: NDArray[Any], axis: Axis) -> NDArray[Any]:
    """Running sums along ``axis``; same shape as ``array``."""
    return np.cumsum(array, axis=int(axis), dtype=array.dtype)
