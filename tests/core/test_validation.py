"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from pydsur.core.exceptions import DimensionError, ValidationError
from pydsur.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_ndim,
    check_scalar,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_values_attribute_unwrapped(self):
        class Frame:
            values = np.array([[1.0, 2.0], [3.0, 4.0]])
            columns = ["a", "b"]

        result = check_array(Frame(), "data")
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    def test_int_to_float(self):
        assert check_scalar(3, "n") == 3.0
        assert isinstance(check_scalar(3, "n"), float)

    def test_numpy_scalar(self):
        assert check_scalar(np.float32(2.5), "t") == pytest.approx(2.5)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            check_scalar(float("nan"), "t")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            check_scalar(float("inf"), "t")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="real number"):
            check_scalar("abc", "t")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(True, "t")

    def test_min_inclusive(self):
        assert check_scalar(0.0, "sd", min_value=0.0) == 0.0
        with pytest.raises(ValidationError, match=">= 0"):
            check_scalar(-0.1, "sd", min_value=0.0)

    def test_min_exclusive(self):
        with pytest.raises(ValidationError, match="> 0"):
            check_scalar(0.0, "df", min_value=0.0, min_inclusive=False)


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_finite(self):
        check_finite(np.array([1.0, 2.0]), "x")
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_check_ndim(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "x")
        with pytest.raises(DimensionError, match="expected 3D"):
            check_ndim(np.zeros((2, 2)), 3, "x")

    def test_check_1d_and_2d(self):
        check_1d(np.zeros(3), "x")
        check_2d(np.zeros((3, 2)), "x")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 2)), "x")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "x")

    def test_check_square(self):
        check_square(np.eye(3), "m")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((3, 2)), "m")
        with pytest.raises(DimensionError):
            check_square(np.zeros(3), "m")

    def test_check_consistent_length(self):
        check_consistent_length(np.zeros(3), np.zeros((3, 2)), names=("a", "b"))
        with pytest.raises(DimensionError, match="a=3, b=4"):
            check_consistent_length(np.zeros(3), np.zeros(4), names=("a", "b"))

    def test_check_consistent_length_name_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))

    def test_check_min_samples(self):
        check_min_samples(np.zeros(2), 2, "x")
        with pytest.raises(ValidationError, match="at least 1"):
            check_min_samples(np.zeros(0), 1, "x")
