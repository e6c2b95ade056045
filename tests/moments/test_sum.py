"""
Tests for the lane-batched sum.
"""

from fractions import Fraction

import numpy as np
import pytest

from pysummary.core.exceptions import ValidationError
from pysummary.moments import sum as lane_sum


class TestSumKnownValues:

    def test_range(self):
        assert lane_sum(range(1, 11)) == 55

    def test_generator(self):
        assert lane_sum(x for x in range(1, 11)) == 55

    def test_integers_stay_integers(self):
        total = lane_sum([1, 2, 3, 4, 5])
        assert total == 15
        assert isinstance(total, int)

    def test_floats(self):
        assert lane_sum([40.0, 40.1, 5.2]) == pytest.approx(85.3)

    def test_empty(self):
        assert lane_sum([]) == 0
        assert lane_sum(iter([])) == 0

    def test_long_integer_array(self):
        data = np.arange(1, 1001, dtype=np.int64)
        assert lane_sum(data) == 500500

    def test_long_float_array(self, normal_data):
        assert lane_sum(normal_data) == pytest.approx(np.sum(normal_data), rel=1e-12)


class TestSumDtype:

    def test_wider_accumulator_avoids_overflow(self):
        data = np.full(100, 100, dtype=np.int8)
        total = lane_sum(data, dtype=np.int64)
        assert total == 10000
        assert total.dtype == np.int64

    def test_float_accumulator_for_integers(self):
        total = lane_sum([1, 2, 3], dtype=np.float64)
        assert total == 6.0
        assert total.dtype == np.float64

    def test_dtype_on_generator(self):
        total = lane_sum((x for x in [1, 2, 3]), dtype=np.float64)
        assert isinstance(total, np.float64)
        assert total == 6.0


class TestSumLanes:

    @pytest.mark.parametrize("n_lanes", [1, 2, 5, 8, 16])
    def test_lane_count_does_not_change_integer_result(self, n_lanes):
        data = list(range(200))
        assert lane_sum(data, n_lanes=n_lanes) == 19900

    @pytest.mark.parametrize("n", [16, 17, 24, 25])
    def test_lane_boundaries(self, n):
        data = np.arange(n, dtype=np.int64)
        assert lane_sum(data) == n * (n - 1) // 2

    def test_bool_counts_true_values(self):
        assert lane_sum(np.array([True, False, True] * 10)) == 20

    def test_invalid_lane_count(self):
        with pytest.raises(ValidationError):
            lane_sum(np.arange(40), n_lanes=-2)

    def test_integers_beyond_int64_stay_exact(self):
        total = lane_sum([2 ** 64, 1])
        assert total == 2 ** 64 + 1
        assert isinstance(total, int)

    def test_fractions(self):
        assert lane_sum([Fraction(1, 3)] * 30) == 10

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            lane_sum(["a", "b"])
