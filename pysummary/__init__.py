"""
pysummary: online and batch descriptive statistics for Python.

Streaming accumulators keep O(1) state and merge across partitions;
batch functions feed whole collections through them. Medians are found
by partial partitioning in expected linear time.

Submodules:
    moments: Mean, MeanSD, Summary accumulators and batch functions
    order: median, median absolute deviation, partition by rank
    transform: lazy z-score view
    descriptive: describe(), every statistic at once
"""

__version__ = "0.1.0"

from pysummary import moments
from pysummary import order
from pysummary import transform
from pysummary import descriptive

from pysummary.moments import (
    Mean,
    GeometricMean,
    MeanSD,
    Summary,
    merge,
    mean,
    geometric_mean,
    mean_stdev,
    variance,
    stdev,
    skewness,
    kurtosis,
    summary,
)
from pysummary.order import MedianAbsDev, median, median_partition, median_abs_dev
from pysummary.transform import z_score
from pysummary.descriptive import describe

__all__ = [
    "__version__",
    "moments",
    "order",
    "transform",
    "descriptive",
    "Mean",
    "GeometricMean",
    "MeanSD",
    "Summary",
    "merge",
    "mean",
    "geometric_mean",
    "mean_stdev",
    "variance",
    "stdev",
    "skewness",
    "kurtosis",
    "summary",
    "MedianAbsDev",
    "median",
    "median_partition",
    "median_abs_dev",
    "z_score",
    "describe",
]
