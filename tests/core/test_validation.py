"""
Tests for argument validation utilities.

Validates every function in core/validation.py:
    - check_axis: Axis members, plain 0/1, rejection of everything else
    - check_size: non-negative dimensions
    - check_vector / check_length: 1D conversion and length matching
    - check_same_shape / check_inner_dimension: operand compatibility
    - check_index: exclusive and inclusive bounds
    - check_position / check_region: checked element and block access
"""

import numpy as np
import pytest

from pymatrix.core.axis import Axis
from pymatrix.core.exceptions import (
    AxisError,
    DimensionError,
    InvalidArgumentError,
    OutOfRangeError,
)
from pymatrix.core.validation import (
    check_axis,
    check_index,
    check_inner_dimension,
    check_length,
    check_position,
    check_region,
    check_same_shape,
    check_size,
    check_vector,
)


# ═══════════════════════════════════════════════════════════════════════
# check_axis
# ═══════════════════════════════════════════════════════════════════════


class TestCheckAxis:

    def test_members_pass_through(self):
        assert check_axis(Axis.BY_ROW) is Axis.BY_ROW
        assert check_axis(Axis.BY_COLUMN) is Axis.BY_COLUMN

    def test_plain_integers(self):
        assert check_axis(0) is Axis.BY_ROW
        assert check_axis(1) is Axis.BY_COLUMN

    @pytest.mark.parametrize("axis", [2, -1, "0", None, True])
    def test_rejects_other_values(self, axis):
        with pytest.raises(AxisError) as exc_info:
            check_axis(axis)
        assert exc_info.value.axis == axis

    def test_message_explains_valid_values(self):
        with pytest.raises(AxisError, match="0 for rows and 1 for columns"):
            check_axis(3)


# ═══════════════════════════════════════════════════════════════════════
# check_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    def test_zero_and_positive_pass(self):
        check_size(0, "rows")
        check_size(10, "rows")

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError, match="rows"):
            check_size(-1, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_vector / check_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckVector:

    def test_list_converted_to_dtype(self):
        result = check_vector([1, 2, 3], np.dtype(np.float32), "row")
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_empty_sequence(self):
        result = check_vector([], np.dtype(np.int64), "row")
        assert result.shape == (0,)

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_vector([[1, 2], [3, 4]], np.dtype(np.float64), "row")

    def test_rejects_non_numeric(self):
        with pytest.raises(InvalidArgumentError, match="row"):
            check_vector(["a", "b"], np.dtype(np.float64), "row")

    def test_length_matches(self):
        check_length(np.zeros(3), 3, "row")

    def test_length_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            check_length(np.zeros(2), 3, "row")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandShapes:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_different_shape_rejected(self):
        with pytest.raises(DimensionError, match="add"):
            check_same_shape((2, 3), (3, 2), "add")

    def test_inner_dimension_passes(self):
        check_inner_dimension(3, 3)

    def test_inner_dimension_rejected(self):
        with pytest.raises(DimensionError, match="not compatible"):
            check_inner_dimension(3, 2)


# ═══════════════════════════════════════════════════════════════════════
# Index and region checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_exclusive_bounds(self):
        check_index(0, 3, Axis.BY_ROW)
        check_index(2, 3, Axis.BY_ROW)
        with pytest.raises(OutOfRangeError):
            check_index(3, 3, Axis.BY_ROW)

    def test_inclusive_allows_end(self):
        check_index(3, 3, Axis.BY_COLUMN, inclusive=True)
        with pytest.raises(OutOfRangeError):
            check_index(4, 3, Axis.BY_COLUMN, inclusive=True)

    def test_negative_rejected(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            check_index(-1, 3, Axis.BY_COLUMN)
        assert exc_info.value.index == -1
        assert exc_info.value.size == 3
        assert exc_info.value.axis == 1

    def test_message_names_orientation(self):
        with pytest.raises(OutOfRangeError, match="column"):
            check_index(5, 3, Axis.BY_COLUMN)


class TestCheckPosition:

    def test_inside(self):
        check_position(1, 2, (2, 3))

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_outside(self, row, col):
        with pytest.raises(InvalidArgumentError, match="out of bounds"):
            check_position(row, col, (2, 3))


class TestCheckRegion:

    def test_full_matrix(self):
        check_region(0, 0, 4, 4, (4, 4))

    def test_empty_region(self):
        check_region(2, 2, 0, 0, (4, 4))

    @pytest.mark.parametrize(
        "start_row, start_col, height, width",
        [(3, 0, 2, 1), (0, 3, 1, 2), (-1, 0, 1, 1), (0, 0, -1, 2)],
    )
    def test_outside(self, start_row, start_col, height, width):
        with pytest.raises(InvalidArgumentError):
            check_region(start_row, start_col, height, width, (4, 4))
