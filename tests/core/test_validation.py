"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import (
    DimensionMismatchError,
    MatrixIndexError,
    RangeError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_nonempty,
    check_positive_size,
    check_same_shape,
    check_square,
    check_window,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a fresh float64 ndarray."""

    def test_int_list_promoted_to_float64(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_returns_copy(self):
        arr = np.array([[1.0, 2.0]])
        result = check_array(arr, "X")
        result[0, 0] = 99.0
        assert arr[0, 0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 2j]], "X")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionMismatchError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_check_nonempty_rejects_zero_rows(self):
        with pytest.raises(DimensionMismatchError, match="at least one row"):
            check_nonempty(np.zeros((0, 3)), "X")

    def test_check_positive_size(self):
        check_positive_size(1, "rows")
        with pytest.raises(DimensionMismatchError):
            check_positive_size(0, "rows")
        with pytest.raises(ValidationError):
            check_positive_size(2.5, "rows")

    def test_check_square(self):
        check_square(Matrix([[1.0, 2.0], [3.0, 4.0]]), "A")
        with pytest.raises(DimensionMismatchError, match="square"):
            check_square(Matrix([[1.0, 2.0, 3.0]]), "A")

    def test_check_same_shape(self):
        a = Matrix(np.zeros((2, 3)))
        b = Matrix(np.zeros((3, 2)))
        with pytest.raises(DimensionMismatchError, match="2x3"):
            check_same_shape(a, b, ("a", "b"))

    def test_check_finite(self):
        check_finite(np.ones((2, 2)), "X")
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([[np.nan, np.inf]]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Index and window checks
# ═══════════════════════════════════════════════════════════════════════


class TestIndexChecks:

    def test_valid_index(self):
        check_index(0, 3, "row")
        check_index(2, 3, "row")

    def test_index_at_size_rejected(self):
        with pytest.raises(MatrixIndexError, match="out of bounds"):
            check_index(3, 3, "row")

    def test_negative_index_rejected(self):
        with pytest.raises(MatrixIndexError):
            check_index(-1, 3, "row")

    def test_non_integer_rejected(self):
        with pytest.raises(MatrixIndexError, match="integer"):
            check_index(1.0, 3, "row")

    def test_numpy_integer_accepted(self):
        check_index(np.int64(1), 3, "row")


class TestWindowChecks:

    def test_full_window(self):
        check_window(0, 4, 4, "rows")

    def test_overrun(self):
        with pytest.raises(RangeError, match="exceeds"):
            check_window(2, 3, 4, "rows")

    def test_negative_start(self):
        with pytest.raises(RangeError, match="negative"):
            check_window(-1, 1, 4, "rows")

    def test_empty_extent(self):
        with pytest.raises(RangeError, match="extent"):
            check_window(0, 0, 4, "rows")

    @pytest.mark.parametrize("start, extent", [(0.5, 1), (0, 2.0), (True, 1)])
    def test_non_integer_window(self, start, extent):
        with pytest.raises(RangeError, match="integer"):
            check_window(start, extent, 4, "rows")

    def test_numpy_integers(self):
        check_window(np.int64(1), np.int32(2), 4, "rows")
