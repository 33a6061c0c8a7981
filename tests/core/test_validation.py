"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_index / check_dimension: integer and non-negativity checks
    - check_capacity: element-count overflow
    - check_flat_data: flatness and length
    - check_in_bounds / check_range_in_bounds: index bounds
    - check_multipliable: inner-dimension agreement and message format
"""

import numpy as np
import pytest

from densematrix.core.dtypes import MAX_ELEMENTS
from densematrix.core.exceptions import (
    CapacityOverflowError,
    DimensionMismatchError,
    ElementTypeError,
    OutOfBoundsError,
    ValidationError,
)
from densematrix.core.validation import (
    check_capacity,
    check_dimension,
    check_flat_data,
    check_in_bounds,
    check_index,
    check_multipliable,
    check_range_in_bounds,
)


# ═══════════════════════════════════════════════════════════════════════
# check_index / check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_python_int(self):
        assert check_index(3, "row") == 3

    def test_numpy_int(self):
        result = check_index(np.int32(7), "row")
        assert result == 7
        assert type(result) is int

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="row: expected an integer, got bool"):
            check_index(True, "row")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="got float"):
            check_index(1.0, "col")

    def test_rejects_string(self):
        with pytest.raises(ValidationError, match="my_arg"):
            check_index("1", "my_arg")


class TestCheckDimension:

    def test_zero_allowed(self):
        assert check_dimension(0, "rows") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="rows: must be non-negative, got -1"):
            check_dimension(-1, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_capacity
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCapacity:

    def test_returns_size(self):
        assert check_capacity(3, 4) == 12

    def test_overflow(self):
        with pytest.raises(CapacityOverflowError) as exc_info:
            check_capacity(MAX_ELEMENTS, 2)
        assert exc_info.value.rows == MAX_ELEMENTS
        assert exc_info.value.cols == 2

    def test_zero_times_huge_is_fine(self):
        assert check_capacity(0, MAX_ELEMENTS * 4) == 0


# ═══════════════════════════════════════════════════════════════════════
# check_flat_data
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFlatData:

    def test_list_accepted(self):
        result = check_flat_data([1, 2, 3, 4], 4, "data")
        np.testing.assert_array_equal(result, [1, 2, 3, 4])

    def test_too_short(self):
        with pytest.raises(DimensionMismatchError, match="expected 9 values") as exc_info:
            check_flat_data([1, 2, 3], 9, "data")
        assert exc_info.value.expected == 9
        assert exc_info.value.actual == 3

    def test_too_long(self):
        with pytest.raises(DimensionMismatchError):
            check_flat_data(list(range(10)), 9, "data")

    def test_rejects_2d(self):
        with pytest.raises(DimensionMismatchError, match="flat 1D"):
            check_flat_data([[1, 2], [3, 4]], 4, "data")

    def test_rejects_scalar(self):
        with pytest.raises(DimensionMismatchError, match="0D"):
            check_flat_data(5, 1, "data")

    def test_ragged_input(self):
        with pytest.raises((ElementTypeError, DimensionMismatchError)):
            check_flat_data([[1, 2], [3]], 3, "data")


# ═══════════════════════════════════════════════════════════════════════
# Bounds
# ═══════════════════════════════════════════════════════════════════════


class TestBounds:

    def test_in_bounds(self):
        check_in_bounds(0, 3, "row")
        check_in_bounds(2, 3, "row")

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_bounds(self, index):
        with pytest.raises(OutOfBoundsError) as exc_info:
            check_in_bounds(index, 3, "row")
        assert exc_info.value.index == index
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "row"

    def test_empty_axis_has_no_valid_index(self):
        with pytest.raises(OutOfBoundsError):
            check_in_bounds(0, 0, "col")

    @pytest.mark.parametrize("start,stop", [(0, 4), (1, 4), (4, 4), (0, 0), (2, 3)])
    def test_valid_ranges(self, start, stop):
        check_range_in_bounds(start, stop, 4, "col")

    @pytest.mark.parametrize("start,stop", [(0, 5), (-1, 2), (3, 2), (5, 5)])
    def test_invalid_ranges(self, start, stop):
        with pytest.raises(OutOfBoundsError, match=f"col range {start}..{stop}"):
            check_range_in_bounds(start, stop, 4, "col")


# ═══════════════════════════════════════════════════════════════════════
# check_multipliable
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMultipliable:

    def test_conformant(self):
        # (2x3) x (3x2): dims are (cols, rows)
        check_multipliable((3, 2), (2, 3))

    def test_mismatch_carries_both_dims(self):
        # (2x3) x (4x2)
        with pytest.raises(DimensionMismatchError) as exc_info:
            check_multipliable((3, 2), (2, 4))
        err = exc_info.value
        assert err.left_dim == (3, 2)
        assert err.right_dim == (2, 4)
        assert err.expected == 3
        assert err.actual == 4

    def test_message_format(self):
        with pytest.raises(
            DimensionMismatchError,
            match=r"Try transposing one of matrix\.\nDims: mat1 - \(3, 2\) != mat2 - \(2, 4\)",
        ):
            check_multipliable((3, 2), (2, 4))
