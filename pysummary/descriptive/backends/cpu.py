"""
CPU backend for descriptive statistics.

Computes every statistic from the online accumulators and the order
statistic routines, timing each stage.
"""

from __future__ import annotations

import numpy as np

from pysummary.core.result import Result
from pysummary.core.compute.timing import timed
from pysummary.descriptive.design import DescriptiveDesign
from pysummary.descriptive.solution import DescriptiveParams
from pysummary.moments.solvers import geometric_mean, sum as lane_sum, summary
from pysummary.order._median import median_abs_dev


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """
        Compute all descriptive statistics for the design's data.

        Parameters
        ----------
        design : DescriptiveDesign

        Returns
        -------
        Result[DescriptiveParams]. Statistics that are undefined for this
        data are NaN and a warning explaining why is attached.
        """
        data = design.data
        warnings_list: list[str] = []

        with timed() as timer:
            with timer.section('moments'):
                summ = summary(data)

            with timer.section('sum'):
                total = lane_sum(data)

            with timer.section('median'):
                mad = median_abs_dev(data)

            with timer.section('geometric_mean'):
                geo = geometric_mean(data)

        if design.has_missing:
            warnings_list.append(
                f"data contains {design.n_missing} NaN value(s); moments and medians propagate NaN"
            )
        if summ.count < 2:
            warnings_list.append(
                f"variance undefined for fewer than 2 observations (n={summ.count})"
            )
        elif summ.variance == 0:
            warnings_list.append(
                "zero variance: skewness and kurtosis are not finite"
            )
        if np.any(data <= 0):
            warnings_list.append(
                "non-positive values: geometric mean is undefined"
            )

        params = DescriptiveParams(
            n=summ.count,
            mean=summ.mean,
            sum=float(total),
            variance=summ.variance,
            sd=summ.stdev,
            skewness=summ.skewness,
            kurtosis=summ.kurtosis,
            min=summ.min,
            max=summ.max,
            median=mad.median,
            mad=mad.median_abs_dev,
            geometric_mean=geo,
        )

        return Result(
            params=params,
            info={'n': design.n, 'n_missing': design.n_missing},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
