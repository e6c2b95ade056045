"""
Median and median absolute deviation in expected O(N) time.

These are the only statistics here that cannot be computed online: an
online median would need a sorted or rank-indexed structure. Instead the
data is copied once and partitioned around the middle rank.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pysummary.core.validation import check_1d
from pysummary.order._select import partition_k
from pysummary.order._workspace import scratch_copy, scratch_empty


@dataclass(frozen=True)
class MedianAbsDev:
    """
    Median and median absolute deviation of a dataset.

    The median is kept because it is computed anyway.
    """
    median: float
    median_abs_dev: float


def median_partition(data: NDArray[Any] | MutableSequence) -> float:
    """
    Median of `data`, partitioning it in place.

    On return, elements smaller than the median sit at lower indices than
    it and larger elements at higher indices. Useful both for the
    partitioning itself and to avoid the copy median() makes.

    For an even number of elements the mean of the two middle elements is
    returned. The upper middle element is just the smallest element above
    the lower middle one once the data is partitioned, so it is found by a
    scan rather than a second partition.

    Args:
        data: 1D numpy array or mutable sequence of numbers

    Returns:
        The median, NaN if data is empty

    Raises:
        DimensionError: If data is a numpy array that is not 1D
    """
    if isinstance(data, np.ndarray):
        check_1d(data, 'data')

    n = len(data)
    if n == 0:
        return float('nan')
    if n == 1:
        return float(data[0])
    if n % 2 == 1:
        return float(partition_k(data, n // 2))

    half = n // 2
    lower = float(partition_k(data, half - 1))
    if isinstance(data, np.ndarray):
        upper = float(data[half:].min())
    else:
        upper = float(min(data[i] for i in range(half, n)))
    return lower * 0.5 + upper * 0.5


def median(data: Iterable[Any]) -> float:
    """
    Median of any iterable of numbers in expected O(N) time.

    For an even number of elements the mean of the two middle elements is
    returned. Works on a private copy: the input is not reordered. Use
    median_partition() to partition a mutable sequence in place instead.

    Returns:
        The median, NaN if data is empty
    """
    with scratch_copy(data) as buf:
        return median_partition(buf)


def median_abs_dev(data: Iterable[Any]) -> MedianAbsDev:
    """
    Median absolute deviation: the median of |x - median(data)|.

    No bias correction is applied, since one would require assumptions
    about the underlying distribution of the data.

    Returns:
        MedianAbsDev holding both the median and the deviation
    """
    with scratch_copy(data) as buf:
        med = median_partition(buf)
        with scratch_empty(len(buf)) as devs:
            np.subtract(buf, med, out=devs)
            np.abs(devs, out=devs)
            mad = median_partition(devs)

    return MedianAbsDev(median=med, median_abs_dev=mad)
