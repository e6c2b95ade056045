"""
Partition-by-rank (quickselect).

Rearranges a mutable random-access sequence in place so that the element
at rank k is the k-th order statistic, everything before it is <= and
everything after it is >=. Expected O(N) time; the worst case is not
bounded.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pysummary.core.exceptions import ValidationError
from pysummary.core.validation import check_1d, check_rank


def partition_k(data: NDArray[Any] | MutableSequence, k: int) -> Any:
    """
    Partition `data` in place around rank `k` and return data[k].

    numpy arrays are partitioned with ndarray.partition (introselect);
    any other mutable sequence with a three-way quickselect.

    Args:
        data: 1D numpy array or mutable sequence of comparable elements
        k: 0-indexed target rank

    Returns:
        The k-th smallest element

    Raises:
        ValidationError: If k is outside [0, len(data)) or data is not
            mutable
        DimensionError: If data is a numpy array that is not 1D
    """
    if isinstance(data, np.ndarray):
        check_1d(data, 'data')

    n = len(data)
    check_rank(k, n, 'k')

    if isinstance(data, np.ndarray):
        data.partition(k)
        return data[k]

    if not isinstance(data, MutableSequence):
        raise ValidationError(
            f"data: partitioning requires a mutable sequence, got {type(data).__name__}"
        )

    _quickselect(data, k)
    return data[k]


def _median_of_three(data: MutableSequence, lo: int, hi: int) -> Any:
    a, b, c = data[lo], data[(lo + hi) // 2], data[hi]
    if a < b:
        if b < c:
            return b
        return c if a < c else a
    if a < c:
        return a
    return c if b < c else b


def _quickselect(data: MutableSequence, k: int) -> None:
    lo, hi = 0, len(data) - 1

    while lo < hi:
        pivot = _median_of_three(data, lo, hi)

        # Three-way partition: [lo, lt) < pivot, [lt, gt] == pivot, (gt, hi] > pivot
        lt, i, gt = lo, lo, hi
        while i <= gt:
            value = data[i]
            if value < pivot:
                data[lt], data[i] = data[i], data[lt]
                lt += 1
                i += 1
            elif pivot < value:
                data[i], data[gt] = data[gt], data[i]
                gt -= 1
            else:
                i += 1

        if k < lt:
            hi = lt - 1
        elif k > gt:
            lo = gt + 1
        else:
            return
