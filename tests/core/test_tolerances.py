"""
Tests for tolerance tiers.
"""

from pysummary.core.compute.tolerances import (
    APPROX,
    CPU_FP64,
    LANE_REORDERED,
    select_tolerance,
)


class TestSelectTolerance:

    def test_sequential_is_cpu_fp64(self):
        assert select_tolerance() is CPU_FP64
        assert select_tolerance(lane_batched=False) is CPU_FP64

    def test_lane_batched(self):
        assert select_tolerance(lane_batched=True) is LANE_REORDERED


class TestTierOrdering:

    def test_tiers_loosen(self):
        assert CPU_FP64.rtol < LANE_REORDERED.rtol < APPROX.rtol
        assert CPU_FP64.atol < LANE_REORDERED.atol < APPROX.atol

    def test_names_unique(self):
        names = {CPU_FP64.name, LANE_REORDERED.name, APPROX.name}
        assert len(names) == 3
