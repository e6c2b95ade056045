"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_1d: dimensionality check
    - check_rank: order-statistic rank bounds
    - check_lanes: lane count type and bounds
"""

import numpy as np
import pytest

from pysummary.core.exceptions import DimensionError, ValidationError
from pysummary.core.validation import (
    check_1d,
    check_array,
    check_lanes,
    check_rank,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "data")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "data")
        assert np.issubdtype(result.dtype, np.floating)

    def test_int_array_kept_without_promotion(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "data", promote=False)
        assert result.dtype == np.int32

    def test_bool_array_becomes_integer(self):
        result = check_array([True, False, True], "data", promote=False)
        assert np.issubdtype(result.dtype, np.integer)
        assert result.sum() == 2

    def test_float_array_passthrough(self):
        arr = np.array([1.0, 2.0, 3.0], dtype=np.float64)
        result = check_array(arr, "data")
        assert result.dtype == np.float64

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        result = check_array(arr, "data")
        assert result.dtype == np.float32

    def test_range_accepted(self):
        result = check_array(range(4), "data")
        np.testing.assert_array_equal(result, [0.0, 1.0, 2.0, 3.0])

    def test_rejects_mixed_types(self):
        """Mixed types (None + numeric) produce object dtype → ValidationError."""
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "data")

    def test_rejects_homogeneous_strings(self):
        """Homogeneous string arrays rejected as non-numeric dtype."""
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "data")

    def test_error_names_parameter(self):
        with pytest.raises(ValidationError, match="values"):
            check_array(["a"], "values")

    def test_empty_array(self):
        result = check_array([], "data")
        assert result.shape == (0,)


# ═══════════════════════════════════════════════════════════════════════
# check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "data")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.zeros((2, 2)), "data")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_1d(np.array(1.0), "data")


# ═══════════════════════════════════════════════════════════════════════
# check_rank / check_lanes
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRank:

    def test_bounds_inclusive_exclusive(self):
        check_rank(0, 5, "k")
        check_rank(4, 5, "k")

    def test_k_equal_n_rejected(self):
        with pytest.raises(ValidationError, match=r"\[0, 5\), got 5"):
            check_rank(5, 5, "k")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            check_rank(-1, 5, "k")

    def test_empty_rejects_everything(self):
        with pytest.raises(ValidationError):
            check_rank(0, 0, "k")


class TestCheckLanes:

    def test_positive_int_passes(self):
        check_lanes(1, "n_lanes")
        check_lanes(np.int64(8), "n_lanes")

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match=">= 1"):
            check_lanes(0, "n_lanes")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            check_lanes(2.0, "n_lanes")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_lanes(True, "n_lanes")
