"""
Online moment accumulators.

Streaming statistics that keep O(1) state and never store the data,
plus batch convenience functions that feed a whole collection through
them.

Public API:
    Mean, GeometricMean, MeanSD, Summary  - accumulators
    merge(a, b)                           - parallel combination
    sum(x), mean(x), geometric_mean(x)
    mean_stdev(x), variance(x), stdev(x)
    skewness(x), kurtosis(x), summary(x)
"""

from pysummary.moments._common import merge
from pysummary.moments._mean import Mean, GeometricMean
from pysummary.moments._meansd import MeanSD
from pysummary.moments._summary import Summary
from pysummary.moments.solvers import (
    sum,
    mean,
    geometric_mean,
    mean_stdev,
    variance,
    stdev,
    skewness,
    kurtosis,
    summary,
)

__all__ = [
    "Mean",
    "GeometricMean",
    "MeanSD",
    "Summary",
    "merge",
    "sum",
    "mean",
    "geometric_mean",
    "mean_stdev",
    "variance",
    "stdev",
    "skewness",
    "kurtosis",
    "summary",
]
