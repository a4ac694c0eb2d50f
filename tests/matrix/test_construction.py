"""
Tests for Matrix construction, ownership transfer and copy semantics.
"""

import copy

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, InvalidArgumentError


class TestConstructors:

    def test_default_is_empty(self):
        m = Matrix()
        assert m.height == 0
        assert m.width == 0
        assert m.shape == (0, 0)

    def test_sized_is_zero_filled(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        assert m.sum() == 0

    def test_sized_with_fill(self):
        m = Matrix(2, 3, 5)
        assert m.get(0, 0) == 5
        assert m.get(1, 2) == 5

    def test_default_dtype_is_float64(self):
        assert Matrix(1, 1).dtype == np.float64

    @pytest.mark.parametrize("dtype", [np.int32, np.int64, np.float32, np.float64])
    def test_explicit_dtype(self, dtype):
        m = Matrix(2, 2, 7, dtype=dtype)
        assert m.dtype == dtype
        assert m[1, 1] == 7

    def test_zero_rows_is_canonical_empty(self):
        assert Matrix(0, 5).shape == (0, 0)

    def test_negative_size_rejected(self):
        with pytest.raises(InvalidArgumentError, match="rows"):
            Matrix(-1, 2)
        with pytest.raises(InvalidArgumentError, match="cols"):
            Matrix(2, -1)

    def test_unsupported_dtype_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Matrix(2, 2, dtype=np.complex128)

    def test_fill_out_of_range_for_int32(self):
        with pytest.raises(InvalidArgumentError, match="outside the range"):
            Matrix(2, 2, 2**40, dtype=np.int32)
        assert Matrix(1, 1, 2**31 - 1, dtype=np.int32)[0, 0] == 2**31 - 1

    def test_fill_float_truncates_into_integers(self):
        assert Matrix(1, 2, -2.7, dtype=np.int64).tolist() == [[-2, -2]]

    def test_fill_nan_into_integers_rejected(self):
        with pytest.raises(InvalidArgumentError, match="not representable"):
            Matrix(1, 1, float('nan'), dtype=np.int64)

    def test_non_numeric_fill_rejected(self):
        with pytest.raises(InvalidArgumentError, match="real number"):
            Matrix(1, 1, "x")

    def test_identity(self):
        eye = Matrix.identity(3)
        np.testing.assert_array_equal(eye.to_array(), np.eye(3))


class TestFromRows:

    def test_nested_lists(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.shape == (2, 2)
        assert m.get(0, 0) == 1
        assert m.get(1, 1) == 4

    def test_integer_data_infers_int64(self):
        assert Matrix.from_rows([[1, 2]]).dtype == np.int64

    def test_float_data_infers_float64(self):
        assert Matrix.from_rows([[1.5, 2]]).dtype == np.float64

    def test_explicit_dtype_converts(self):
        m = Matrix.from_rows([[1, 2]], dtype=np.float32)
        assert m.dtype == np.float32

    def test_empty_sequence(self):
        assert Matrix.from_rows([]).shape == (0, 0)

    def test_copy_is_independent(self):
        rows = [[1, 2], [3, 4]]
        m = Matrix.from_rows(rows)
        rows[0][0] = 100
        assert m[0, 0] == 1

    def test_array_source_is_copied(self):
        source = np.ones((2, 2))
        m = Matrix.from_rows(source)
        source[0, 0] = 5.0
        assert m[0, 0] == 1.0

    def test_move_empties_source(self):
        rows = [[1, 2], [3, 4]]
        m = Matrix.from_rows(rows, move=True)
        assert rows == []
        assert m.shape == (2, 2)
        assert m[1, 0] == 3

    def test_ragged_rows_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.from_rows([[1, 2], [3]])

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_rows([1, 2, 3])

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.from_rows([["a", "b"]])

    def test_bool_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.from_rows([[True, False]])


class TestFromArray:

    def test_copy_false_shares_buffer(self):
        source = np.zeros((2, 2))
        m = Matrix.from_array(source, copy=False)
        source[0, 1] = 3.0
        assert m[0, 1] == 3.0

    def test_copy_true_is_independent(self):
        source = np.zeros((2, 2))
        m = Matrix.from_array(source)
        source[0, 1] = 3.0
        assert m[0, 1] == 0.0

    def test_non_contiguous_input(self):
        source = np.arange(6.0).reshape(2, 3).T
        m = Matrix.from_array(source, copy=False)
        assert m.shape == (3, 2)
        assert m.tolist() == [[0.0, 3.0], [1.0, 4.0], [2.0, 5.0]]


class TestOwnership:

    def test_take_moves_buffer(self):
        source = Matrix(2, 2, 5)
        m = Matrix.take(source)
        assert m.shape == (2, 2)
        assert m[0, 0] == 5
        assert source.shape == (0, 0)

    def test_take_requires_matrix(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.take([[1, 2]])

    def test_assign_from_rows_keeps_dtype(self):
        m = Matrix(1, 1, dtype=np.int32)
        m.assign([[1.0, 2.0], [3.0, 4.0]])
        assert m.shape == (2, 2)
        assert m.dtype == np.int32
        assert m[1, 1] == 4

    def test_assign_move_from_rows(self):
        rows = [[1, 2]]
        Matrix().assign(rows, move=True)
        assert rows == []

    def test_assign_from_matrix_copies(self):
        source = Matrix(2, 2, 1)
        m = Matrix().assign(source)
        m[0, 0] = 9
        assert source[0, 0] == 1

    def test_assign_move_from_matrix(self):
        source = Matrix(2, 2, 1)
        m = Matrix().assign(source, move=True)
        assert m.shape == (2, 2)
        assert source.shape == (0, 0)

    def test_assign_self_is_noop(self):
        m = Matrix(2, 2, 1)
        assert m.assign(m, move=True) is m
        assert m.shape == (2, 2)


class TestCopySemantics:

    def test_copy_refused(self):
        with pytest.raises(TypeError, match="duplicate"):
            copy.copy(Matrix(2, 2))

    def test_deepcopy_refused(self):
        with pytest.raises(TypeError, match="duplicate"):
            copy.deepcopy(Matrix(2, 2))

    def test_duplicate_is_equal(self, square):
        assert square.duplicate() == square

    def test_duplicate_is_independent(self, square):
        dup = square.duplicate()
        dup[0, 0] = 100.0
        dup.push_back([0.0, 0.0, 0.0])
        assert square[0, 0] == 1.0
        assert square.shape == (3, 3)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix())
