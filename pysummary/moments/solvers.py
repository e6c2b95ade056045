"""
Batch convenience functions for the moment accumulators.

Each function feeds every element of a finite or streamed collection into
the appropriate accumulator. For array-like input (random access with a
known length) sum(), mean() and mean_stdev() use lane-batched
accumulation; any other iterable is consumed one element at a time.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Iterable

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pysummary.core.capabilities import is_array_like
from pysummary.core.validation import check_1d, check_array
from pysummary.moments._common import merge
from pysummary.moments._lanes import MEAN_LANES, MEAN_SD_LANES, SUM_LANES, split_lanes
from pysummary.moments._mean import GeometricMean, Mean
from pysummary.moments._meansd import MeanSD
from pysummary.moments._summary import Summary


def _lane_input(data: Iterable[Any], *, promote: bool = True) -> NDArray[Any] | None:
    """
    Array view of `data` for lane-batched accumulation, or None.

    None means the data must be folded one element at a time: either it
    has no random access with a known length, or numpy can only hold it
    as objects (Python ints beyond int64, Fraction, Decimal), which are
    float-convertible but not numpy-numeric.

    With promote=True the array is always float64, so lanes accumulate in
    the same precision as the sequential accumulators.
    """
    if not is_array_like(data):
        return None

    try:
        raw = np.asarray(data)
    except (ValueError, TypeError):
        raw = data
    if isinstance(raw, np.ndarray) and raw.dtype == object:
        return None

    arr = check_array(raw, 'data', promote=promote)
    check_1d(arr, 'data')
    if promote:
        arr = arr.astype(np.float64, copy=False)
    return arr


def sum(
    data: Iterable[Any],
    *,
    dtype: DTypeLike | None = None,
    n_lanes: int = SUM_LANES,
) -> Any:
    """
    Sum of all elements.

    Parameters
    ----------
    data : iterable
        Values to add. Array-like input is summed lane by lane.
    dtype : dtype, optional
        Accumulator type, independent of the element type. Use a wider
        type to avoid overflow or precision loss on large reductions.
        Default keeps the element type (integers sum to an integer).
    n_lanes : int
        Number of independent partial sums for array-like input.

    Returns
    -------
    The total, as a Python scalar when dtype is None, otherwise as a
    numpy scalar of the requested dtype.
    """
    arr = _lane_input(data, promote=False)
    if arr is None:
        total = np.dtype(dtype).type(0) if dtype is not None else 0
        for element in data:
            total += element
        return total

    acc_dtype = np.dtype(dtype) if dtype is not None else arr.dtype
    block, remainder = split_lanes(arr, n_lanes)

    total = acc_dtype.type(0)
    if block is not None:
        lane_totals = block.sum(axis=0, dtype=acc_dtype)
        for lane_total in lane_totals:
            total += lane_total
    for element in remainder:
        total += acc_dtype.type(element)

    return total.item() if dtype is None else total


def mean(data: Iterable[Any], *, n_lanes: int = MEAN_LANES) -> Mean:
    """
    Arithmetic mean of any iterable of values convertible to float.

    Returns the Mean accumulator, so derived queries (mean, sum, count)
    are available and further data can be merged in.

    Examples:
        >>> mean([1, 2, 5, 10, 17]).mean
        7.0
        >>> mean([1, 2, 5, 10, 17]).sum
        35.0
    """
    arr = _lane_input(data)
    if arr is None:
        return Mean().put_all(data)

    block, remainder = split_lanes(arr, n_lanes)

    ret = Mean()
    if block is not None:
        rows = block.shape[0]
        lanes = [Mean(_mean=float(m), _k=rows) for m in block.mean(axis=0)]
        ret = reduce(merge, lanes)

    return ret.put_all(remainder)


def geometric_mean(data: Iterable[Any]) -> float:
    """
    Geometric mean, 2 ** mean(log2(x)).

    The logarithm dominates the cost, so no lane batching is done.
    """
    return GeometricMean().put_all(data).geo_mean


def mean_stdev(data: Iterable[Any], *, n_lanes: int = MEAN_SD_LANES) -> MeanSD:
    """
    Mean, variance and standard deviation in one pass.

    Array-like input is split into lanes; each lane's mean and sum of
    squared deviations are computed independently, then the lanes are
    combined with MeanSD.merge and the remainder folded in.

    Returns
    -------
    MeanSD accumulator.
    """
    arr = _lane_input(data)
    if arr is None:
        return MeanSD().put_all(data)

    block, remainder = split_lanes(arr, n_lanes)

    ret = MeanSD()
    if block is not None:
        rows = block.shape[0]
        lane_means = block.mean(axis=0)
        lane_m2 = np.sum((block - lane_means) ** 2, axis=0)
        lanes = [
            MeanSD(_mean=float(m), _m2=float(m2), _k=rows)
            for m, m2 in zip(lane_means, lane_m2)
        ]
        ret = reduce(merge, lanes)

    return ret.put_all(remainder)


def variance(data: Iterable[Any]) -> float:
    """Sample variance (Bessel-corrected, n-1). NaN for fewer than 2 values."""
    return mean_stdev(data).variance


def stdev(data: Iterable[Any]) -> float:
    """Sample standard deviation. NaN for fewer than 2 values."""
    return mean_stdev(data).stdev


def summary(data: Iterable[Any]) -> Summary:
    """
    Put all elements of data into a Summary and return it.

    The per-element update already has plenty of independent work, so
    there is no lane-batched variant.
    """
    arr = _lane_input(data)
    return Summary().put_all(data if arr is None else arr)


def skewness(data: Iterable[Any]) -> float:
    """
    Population skewness.

    Positive skewness means the right tail is longer or fatter than the
    left; negative means the left tail is; zero indicates symmetry.
    """
    return summary(data).skewness


def kurtosis(data: Iterable[Any]) -> float:
    """Excess kurtosis (normal distribution = 0)."""
    return summary(data).kurtosis
