"""
Tests for the online mean / variance accumulator.
"""

import math

import numpy as np
import pytest

from pysummary.core.compute.tolerances import APPROX, select_tolerance
from pysummary.moments import MeanSD, mean_stdev, merge, stdev, variance


class TestMeanSDKnownValues:

    def test_four_values(self):
        summ = mean_stdev([3, 1, 4, 5])
        assert summ.mean == pytest.approx(3.25)
        assert summ.stdev == pytest.approx(math.sqrt(8.75 / 3), rel=1e-12)
        assert summ.stdev == pytest.approx(1.7078, rel=APPROX.rtol, abs=APPROX.atol)

    def test_one_to_seven(self):
        assert stdev(range(1, 8)) == pytest.approx(2.160247, abs=1e-6)
        assert variance(range(1, 8)) == pytest.approx(28 / 6)

    def test_mse_is_population_variance(self):
        summ = mean_stdev([1, 2, 3, 4, 5])
        assert summ.mse == pytest.approx(2.0)
        assert summ.variance == pytest.approx(2.5)

    def test_sum_and_count(self):
        summ = mean_stdev([1.5, 2.5, 3.0])
        assert summ.sum == pytest.approx(7.0)
        assert summ.count == 3

    def test_matches_numpy(self, normal_data):
        summ = mean_stdev(normal_data)
        assert summ.mean == pytest.approx(np.mean(normal_data), rel=1e-12)
        assert summ.variance == pytest.approx(np.var(normal_data, ddof=1), rel=1e-10)

    def test_large_offset(self, shifted_data):
        # Naive sum-of-squares would lose every significant digit here
        assert variance(shifted_data) == pytest.approx(
            np.var(shifted_data, ddof=1), rel=1e-6,
        )


class TestMeanSDEdgeCases:

    def test_empty(self):
        summ = mean_stdev([])
        assert summ.count == 0
        assert math.isnan(summ.mean)
        assert math.isnan(summ.variance)
        assert math.isnan(summ.stdev)

    def test_single_value_variance_nan(self):
        summ = mean_stdev([2.0])
        assert summ.mean == 2.0
        assert math.isnan(summ.variance)
        assert math.isnan(summ.mse)

    def test_constant_input(self):
        assert variance([4.0] * 50) == 0.0

    def test_nan_propagates(self):
        assert math.isnan(stdev([1.0, float('nan'), 3.0]))


class TestMeanSDLanes:

    @pytest.mark.parametrize("n", [12, 13, 14, 50, 997])
    def test_lanes_match_sequential(self, rng, n):
        data = rng.normal(-1.0, 5.0, n)
        batched = mean_stdev(data)
        sequential = MeanSD().put_all(data)
        assert batched.count == sequential.count == n
        tol = select_tolerance(lane_batched=True)
        assert batched.mean == pytest.approx(sequential.mean, rel=tol.rtol, abs=tol.atol)
        assert batched.variance == pytest.approx(sequential.variance, rel=tol.rtol, abs=tol.atol)

    def test_float32_lanes_accumulate_in_double(self, rng):
        data = (1000.0 + rng.standard_normal(100_000)).astype(np.float32)
        batched = mean_stdev(data)
        sequential = MeanSD().put_all(data)
        tol = select_tolerance(lane_batched=True)
        assert batched.mean == pytest.approx(sequential.mean, rel=tol.rtol, abs=tol.atol)
        assert batched.variance == pytest.approx(sequential.variance, rel=tol.rtol, abs=tol.atol)

    def test_integers_beyond_int64(self):
        data = [2 ** 64, 2 ** 64 + 2 ** 12] * 10
        summ = mean_stdev(data)
        assert summ.count == 20
        assert summ.variance == pytest.approx(MeanSD().put_all(iter(data)).variance)

    def test_single_lane(self, normal_data):
        assert mean_stdev(normal_data, n_lanes=1).stdev == pytest.approx(
            np.std(normal_data, ddof=1), rel=1e-10,
        )


class TestMeanSDMerge:

    def test_merge_two_halves(self):
        a = MeanSD().put_all(range(5))
        b = MeanSD().put_all(range(5, 10))
        combined = merge(a, b)
        assert combined.count == 10
        assert combined.mean == pytest.approx(4.5)
        assert combined.stdev == pytest.approx(3.027650, abs=1e-6)

    def test_merge_matches_combined(self, rng):
        x = rng.normal(0, 1, 37)
        y = rng.normal(4, 3, 211)
        combined = merge(MeanSD().put_all(x), MeanSD().put_all(y))
        expected = MeanSD().put_all(np.concatenate([x, y]))
        assert combined.mean == pytest.approx(expected.mean, rel=1e-12)
        assert combined.variance == pytest.approx(expected.variance, rel=1e-10)

    def test_zero_count_is_identity(self):
        a = MeanSD().put_all([1.0, 5.0, 6.0])
        assert merge(a, MeanSD()) == a
        assert merge(MeanSD(), a) == a

    def test_to_mean(self):
        narrowed = MeanSD().put_all([2.0, 4.0]).to_mean()
        assert narrowed.mean == 3.0
        assert narrowed.count == 2
