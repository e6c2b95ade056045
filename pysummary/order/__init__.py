"""
Order statistics.

Public API:
    partition_k(data, k)     - in-place partition by rank (quickselect)
    median(x)                - median of a copy, input untouched
    median_partition(x)      - median, partitioning x in place
    median_abs_dev(x)        - median absolute deviation (MedianAbsDev)
    live_scratch_buffers()   - outstanding temporary buffers (0 at rest)
"""

from pysummary.order._select import partition_k
from pysummary.order._workspace import live_scratch_buffers
from pysummary.order._median import (
    MedianAbsDev,
    median,
    median_partition,
    median_abs_dev,
)

__all__ = [
    "partition_k",
    "median",
    "median_partition",
    "median_abs_dev",
    "MedianAbsDev",
    "live_scratch_buffers",
]
