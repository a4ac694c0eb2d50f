"""
Matrix: dense row-major 2D container.

A Matrix owns a C-contiguous numpy buffer of shape (height, width) holding
one of the supported element types (int32, int64, float32, float64).

Access comes in two tiers:
    - ``get`` / ``m[i, j]`` / ``m[i]`` are the fast path. They add no checks
      of their own; an out-of-range index is a caller contract violation.
    - ``put`` is bounds-checked and raises InvalidArgumentError.

Copying is explicit. ``copy.copy`` and ``copy.deepcopy`` are refused; use
``duplicate()`` for an independent copy, or ``Matrix.take`` /
``from_rows(..., move=True)`` / ``from_array(..., copy=False)`` to hand a
buffer over without copying.

Construction:
    Matrix()                         empty
    Matrix(rows, cols, fill=None)    sized, zero-filled unless fill given
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.from_array(ndarray, copy=False)
    Matrix.take(other)
    Matrix.identity(n)
"""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.axis import Axis
from pymatrix.core.dtypes import DEFAULT_DTYPE, infer_dtype, resolve_dtype
from pymatrix.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    OutOfRangeError,
)
from pymatrix.core.validation import (
    check_axis,
    check_index,
    check_length,
    check_position,
    check_region,
    check_size,
    check_vector,
)
from pymatrix.matrix import _format, _ops, _reductions


def _as_2d(data: ArrayLike, dtype: DTypeLike | None, *, copy: bool) -> NDArray[Any]:
    """Convert row-major data to a 2D buffer of a supported element type."""
    try:
        array = np.array(data, copy=True) if copy else np.asarray(data)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"rows: cannot convert to a 2D matrix: {e}") from e

    if array.ndim == 1 and array.size == 0:
        array = array.reshape(0, 0)
    if array.ndim != 2:
        raise DimensionError(
            f"rows: expected 2D row-major data, got {array.ndim}D with shape {array.shape}",
            expected=2,
            actual=array.ndim,
        )

    resolved = infer_dtype(array) if dtype is None else resolve_dtype(dtype)
    try:
        array = np.ascontiguousarray(array.astype(resolved, copy=False))
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"rows: cannot convert to {resolved}: {e}") from e
    if array.shape[0] == 0:
        array = np.empty((0, 0), dtype=resolved)
    return array


class Matrix:
    """
    Dense 2D numeric container.

    Attributes are read through properties; the buffer itself is private.

    Examples:
        >>> m = Matrix(2, 2, 1)
        >>> str(m)
        '1 1 \\n1 1 \\n'
        >>> (m + Matrix(2, 2, 2)).shape
        (2, 2)
    """

    # numpy must defer to the reflected operators below instead of
    # broadcasting over the Matrix object.
    __array_ufunc__ = None
    __hash__ = None

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        fill: Any = None,
        *,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ):
        check_size(rows, 'rows')
        check_size(cols, 'cols')
        resolved = resolve_dtype(dtype)
        if rows == 0:
            cols = 0
        if fill is None:
            self._array = np.zeros((rows, cols), dtype=resolved)
        else:
            value = _ops.to_element(resolved, fill, 'fill')
            self._array = np.full((rows, cols), value, dtype=resolved)

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Matrix:
        """Adopt an already validated buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._array = array
        return matrix

    @classmethod
    def from_rows(
        cls,
        rows: ArrayLike,
        dtype: DTypeLike | None = None,
        *,
        move: bool = False,
    ) -> Matrix:
        """
        Build a matrix from row-major data (nested sequences or a 2D array).

        Parameters
        ----------
        rows : array-like
            Equal-length rows. An empty sequence gives the empty matrix.
        dtype : dtype, optional
            Element type. Inferred when omitted: integers become int64,
            floating values float64.
        move : bool
            Transfer ownership: a list source is emptied after the copy.
        """
        array = _as_2d(rows, dtype, copy=True)
        if move and isinstance(rows, list):
            rows.clear()
        return cls._wrap(array)

    @classmethod
    def from_array(
        cls,
        array: ArrayLike,
        dtype: DTypeLike | None = None,
        *,
        copy: bool = True,
    ) -> Matrix:
        """
        Build a matrix from a 2D array.

        With ``copy=False`` a C-contiguous array of a supported dtype is
        adopted as the buffer, so later writes through either are shared.
        Objects exposing ``.values`` (DataFrames) are unwrapped first.
        """
        if hasattr(array, 'values') and not isinstance(array, np.ndarray):
            array = array.values
        return cls._wrap(_as_2d(array, dtype, copy=copy))

    @classmethod
    def take(cls, other: Matrix) -> Matrix:
        """Move constructor: take ``other``'s buffer, leaving ``other`` empty."""
        if not isinstance(other, Matrix):
            raise InvalidArgumentError(
                f"take: expected a Matrix, got {type(other).__name__}"
            )
        result = cls._wrap(other._array)
        other._array = np.empty((0, 0), dtype=result.dtype)
        return result

    @classmethod
    def identity(cls, n: int, *, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
        """n x n matrix with ones on the diagonal."""
        check_size(n, 'n')
        return cls._wrap(np.eye(n, dtype=resolve_dtype(dtype)))

    def assign(self, source: ArrayLike | Matrix, *, move: bool = False) -> Matrix:
        """
        Replace contents and shape with ``source``, keeping the element type.

        ``source`` may be row-major data or another Matrix. With
        ``move=True`` the source is left empty (a list is cleared, a Matrix
        gives up its buffer).
        """
        if isinstance(source, Matrix):
            if source is self:
                return self
            array = source._array.astype(self.dtype, copy=not move)
            if move:
                source._array = np.empty((0, 0), dtype=source.dtype)
        else:
            array = _as_2d(source, self.dtype, copy=True)
            if move and isinstance(source, list):
                source.clear()
        self._array = array
        return self

    def __copy__(self):
        raise TypeError(
            "Matrix cannot be copied implicitly; use duplicate() for a deep copy"
        )

    def __deepcopy__(self, memo):
        raise TypeError(
            "Matrix cannot be copied implicitly; use duplicate() for a deep copy"
        )

    # ------------------------------------------------------------------
    # Storage & access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)."""
        return self._array.shape

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._array.shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._array.shape[1]

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._array.dtype

    def get(self, row: int, col: int | None = None):
        """
        Element at (row, col), or the whole row when ``col`` is omitted.

        The row is a writable view into the matrix. Negative row indices
        count from the end. No bounds checking: indices must be valid.
        """
        if col is None:
            return self._array[row]
        return self._array[row, col]

    def __getitem__(self, key):
        return self._array[key]

    def __setitem__(self, key, value) -> None:
        self._array[key] = value

    def put(self, row: int, col: int, value: Any) -> None:
        """
        Bounds-checked write.

        Raises:
            InvalidArgumentError: If row is outside [0, height), col is
                outside [0, width), or value does not fit the element type
        """
        check_position(row, col, self.shape)
        self._array[row, col] = _ops.to_element(self.dtype, value, 'put')

    def get_col(self, col: int) -> NDArray[Any]:
        """
        Copy of column ``col``; negative indices count from the end.

        Raises:
            OutOfRangeError: If col is outside [-width, width)
        """
        index = col + self.width if col < 0 else col
        check_index(index, self.width, Axis.BY_COLUMN)
        return self._array[:, index].copy()

    def to_array(self) -> NDArray[Any]:
        """Independent copy of the buffer."""
        return self._array.copy()

    def tolist(self) -> list[list[Any]]:
        return self._array.tolist()

    # ------------------------------------------------------------------
    # Shape mutation
    # ------------------------------------------------------------------

    def _normalize(self) -> None:
        # height 0 implies width 0
        if self._array.shape[0] == 0 and self._array.shape[1] != 0:
            self._array = np.empty((0, 0), dtype=self.dtype)

    def insert(self, index: int, data: ArrayLike, axis: Axis | int = Axis.BY_ROW) -> None:
        """
        Insert a row (BY_ROW) or column (BY_COLUMN) before ``index``.

        ``index`` may equal the current size (append). A row inserted into a
        zero-width matrix sets the width; a column inserted into the empty
        matrix sets the height.

        Raises:
            AxisError: If axis is not 0 or 1
            DimensionError: If len(data) does not match the orthogonal dimension
            OutOfRangeError: If index is outside [0, size]
        """
        axis = check_axis(axis)
        height, width = self.shape

        if axis is Axis.BY_ROW:
            row = check_vector(data, self.dtype, 'row')
            if width != 0:
                check_length(row, width, 'row')
            check_index(index, height, axis, inclusive=True)
            base = self._array if width != 0 else np.zeros((height, len(row)), dtype=self.dtype)
            self._array = np.insert(base, index, row, axis=0)
            return

        column = check_vector(data, self.dtype, 'column')
        if height == 0:
            check_index(index, width, axis, inclusive=True)
            self._array = np.ascontiguousarray(column.reshape(-1, 1))
            self._normalize()
            return
        check_length(column, height, 'column')
        check_index(index, width, axis, inclusive=True)
        self._array = np.insert(self._array, index, column, axis=1)

    def push_back(self, data: ArrayLike, axis: Axis | int = Axis.BY_ROW) -> None:
        """Append a row or column. Same errors as insert."""
        axis = check_axis(axis)
        size = self.height if axis is Axis.BY_ROW else self.width
        self.insert(size, data, axis)

    def pop_back(self, axis: Axis | int = Axis.BY_ROW) -> None:
        """
        Remove the last row or column.

        Raises:
            OutOfRangeError: If the matrix is empty along axis
        """
        axis = check_axis(axis)
        size = self.height if axis is Axis.BY_ROW else self.width
        if size == 0:
            raise OutOfRangeError(
                "Cannot pop from an empty matrix.", index=-1, size=0, axis=int(axis)
            )
        self.erase(size - 1, axis)

    def erase(self, index: int, axis: Axis | int = Axis.BY_ROW) -> None:
        """
        Remove the row or column at ``index``.

        Raises:
            AxisError: If axis is not 0 or 1
            OutOfRangeError: If index is outside [0, size)
        """
        axis = check_axis(axis)
        size = self.height if axis is Axis.BY_ROW else self.width
        check_index(index, size, axis)
        self._array = np.delete(self._array, index, axis=int(axis))
        self._normalize()

    def resize(self, rows: int, cols: int | None = None) -> None:
        """
        Change the dimensions, keeping the overlapping top-left block.

        With only ``rows`` the width is kept. Cells outside the old matrix
        are zero.
        """
        check_size(rows, 'rows')
        if cols is None:
            cols = self.width
        else:
            check_size(cols, 'cols')

        resized = np.zeros((rows, cols), dtype=self.dtype)
        h = min(rows, self.height)
        w = min(cols, self.width)
        resized[:h, :w] = self._array[:h, :w]
        self._array = resized
        self._normalize()

    def reserve(self, rows: int, cols: int) -> None:
        """
        Capacity hint.

        Buffers are sized exactly and reallocated on growth, so the hint
        is validated and has no observable effect.
        """
        check_size(rows, 'rows')
        check_size(cols, 'cols')

    def fill(self, value: Any) -> None:
        """Overwrite every element with ``value``; it must fit the element type."""
        self._array.fill(_ops.to_element(self.dtype, value, 'fill'))

    def clear(self) -> None:
        """Reset to the empty 0 x 0 matrix."""
        self._array = np.empty((0, 0), dtype=self.dtype)

    def submatrix(self, start_row: int, start_col: int, height: int, width: int) -> Matrix:
        """
        Independent copy of rows [start_row, start_row + height) and
        columns [start_col, start_col + width).

        Raises:
            InvalidArgumentError: If the region leaves the matrix
        """
        check_region(start_row, start_col, height, width, self.shape)
        block = self._array[start_row:start_row + height, start_col:start_col + width]
        result = Matrix._wrap(block.copy())
        result._normalize()
        return result

    def duplicate(self) -> Matrix:
        """Deep copy."""
        return Matrix._wrap(self._array.copy())

    # ------------------------------------------------------------------
    # Arithmetic & linear algebra
    # ------------------------------------------------------------------

    def _elementwise(self, ufunc: Callable[..., Any], other: Any, name: str, inplace: bool) -> Matrix:
        if isinstance(other, Matrix):
            operand = _ops.prepare_operand(self._array, other._array, name, matrix=True)
        else:
            operand = _ops.prepare_operand(self._array, other, name, matrix=False)

        result = _ops.elementwise(ufunc, self._array, operand, inplace=inplace)
        if inplace:
            return self
        return Matrix._wrap(result)

    def add(self, other: Any, *, inplace: bool = False) -> Matrix:
        """
        Elementwise sum with a scalar, a per-column vector or a same-shape matrix.

        Returns a new matrix, or ``self`` after updating it when ``inplace``.

        Raises:
            DimensionError: If the vector length or matrix shape does not match
        """
        return self._elementwise(np.add, other, 'add', inplace)

    def subtract(self, other: Any, *, inplace: bool = False) -> Matrix:
        """Elementwise difference. Same operand forms and errors as add."""
        return self._elementwise(np.subtract, other, 'subtract', inplace)

    def multiply(self, other: Any, *, inplace: bool = False) -> Matrix:
        """
        Scale by a scalar, multiply each row by a per-column vector, or take
        the elementwise (Hadamard) product with a same-shape matrix.

        This is not the matrix product; see dot.
        """
        return self._elementwise(np.multiply, other, 'multiply', inplace)

    def divide(self, other: Any, *, inplace: bool = False) -> Matrix:
        """
        Elementwise division, mirroring multiply.

        Integer matrices truncate toward zero, floating matrices divide exactly.
        Division by zero is not checked: integers give 0 and floats give
        inf/nan, with numpy's RuntimeWarning.
        """
        return self._elementwise(_ops.division_ufunc(self.dtype), other, 'divide', inplace)

    def dot(self, other: Matrix) -> Matrix:
        """
        Matrix product, shape (self.height, other.width).

        Raises:
            DimensionError: If self.width != other.height
        """
        if not isinstance(other, Matrix):
            raise InvalidArgumentError(
                f"dot: expected a Matrix, got {type(other).__name__}"
            )
        result = Matrix._wrap(_ops.matmul(self._array, other._array))
        result._normalize()
        return result

    def transpose(self) -> Matrix:
        """New matrix with result[j, i] == self[i, j]."""
        return Matrix._wrap(_ops.transpose(self._array))

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def __iadd__(self, other):
        return self.add(other, inplace=True)

    def __isub__(self, other):
        return self.subtract(other, inplace=True)

    def __imul__(self, other):
        return self.multiply(other, inplace=True)

    def __itruediv__(self, other):
        return self.divide(other, inplace=True)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._array, other._array))

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------

    def max(self, axis: Axis | int | None = None):
        """
        Largest element, or a 1D array of per-row (BY_ROW) or per-column
        (BY_COLUMN) maxima.

        Raises:
            InvalidArgumentError: If the matrix is empty, or the rows
                (columns) being reduced have no elements, as in a 3 x 0
                matrix reduced BY_ROW
        """
        if axis is None:
            return _reductions.maximum(self._array)
        return _reductions.maximum(self._array, check_axis(axis))

    def min(self, axis: Axis | int | None = None):
        """Smallest element, or per-row/per-column minima. Mirrors max."""
        if axis is None:
            return _reductions.minimum(self._array)
        return _reductions.minimum(self._array, check_axis(axis))

    def sum(self, axis: Axis | int | None = None):
        """
        Total of all elements (zero when empty), or a 1D array of per-row
        (BY_ROW, length height) or per-column (BY_COLUMN, length width) sums.
        """
        if axis is None:
            return _reductions.total(self._array)
        return _reductions.total(self._array, check_axis(axis))

    def cumsum(self, axis: Axis | int) -> Matrix:
        """
        Running sums. BY_ROW accumulates down each column, BY_COLUMN
        across each row.
        """
        return Matrix._wrap(_reductions.cumulative(self._array, check_axis(axis)))

    # ------------------------------------------------------------------
    # Rendering & serialization
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return _format.render(self._array)

    def __repr__(self) -> str:
        return f"Matrix(height={self.height}, width={self.width}, dtype={self.dtype})"

    def write(self, stream: TextIO | None = None) -> None:
        """Write the aligned text grid to ``stream`` (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(str(self))

    def dump(self, path) -> None:
        """Serialize to ``path`` in the protobuf wire format, overwriting it."""
        from pymatrix.io.proto import dump_to_proto
        dump_to_proto(self, path)

    @classmethod
    def load(cls, path, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
        """Read a matrix written by dump, converting values to ``dtype``."""
        from pymatrix.io.proto import load_from_proto
        return load_from_proto(path, dtype=dtype)
