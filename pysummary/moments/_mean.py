"""
Online arithmetic and geometric mean.

Mean uses Welford's incremental update, mean += (x - mean) / k, which
avoids the cancellation a large running sum suffers from. Both types use
O(1) space and do NOT store the individual elements.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Mean:
    """
    Online mean of values convertible to float.

    Immutable: put(), put_all() and merge() return new instances.

    Examples:
        >>> summ = Mean().put_all([1, 2, 3, 4, 5])
        >>> summ.mean
        3.0
        >>> a = Mean().put_all(range(5))
        >>> b = Mean().put_all(range(5, 10))
        >>> a.merge(b).mean
        4.5
    """
    _mean: float = 0.0
    _k: int = 0

    def put(self, element: float) -> Mean:
        """Return a new Mean that has also seen `element`."""
        k = self._k + 1
        return Mean(_mean=self._mean + (float(element) - self._mean) / k, _k=k)

    def put_all(self, data: Iterable[float]) -> Mean:
        """Return a new Mean that has also seen every element of `data`."""
        mean, k = self._mean, self._k
        for element in data:
            k += 1
            mean += (float(element) - mean) / k
        return Mean(_mean=mean, _k=k)

    def merge(self, other: Mean) -> Mean:
        """
        Combine with another Mean.

        The combined mean is the count-weighted average of both means.
        A zero-count operand is the identity element.
        """
        if other._k == 0:
            return self
        if self._k == 0:
            return other

        total = self._k + other._k
        mean = self._mean * (self._k / total) + other._mean * (other._k / total)
        return Mean(_mean=mean, _k=total)

    @property
    def mean(self) -> float:
        """Current mean, NaN if nothing has been seen."""
        return float('nan') if self._k == 0 else self._mean

    @property
    def sum(self) -> float:
        return self._mean * self._k

    @property
    def count(self) -> int:
        return self._k


def _log2(element: float) -> float:
    # log2(0) = -inf and log2(negative) = nan, without raising
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.log2(np.float64(element)))


@dataclass(frozen=True)
class GeometricMean:
    """
    Online geometric mean: 2 ** (mean of log2 values).

    Only meaningful for strictly positive input. Zeros and negative values
    enter the log-mean as -inf and NaN and propagate per IEEE arithmetic.
    """
    _log_mean: Mean = field(default_factory=Mean)

    def put(self, element: float) -> GeometricMean:
        return GeometricMean(_log_mean=self._log_mean.put(_log2(element)))

    def put_all(self, data: Iterable[float]) -> GeometricMean:
        return GeometricMean(
            _log_mean=self._log_mean.put_all(_log2(e) for e in data)
        )

    def merge(self, other: GeometricMean) -> GeometricMean:
        """Combine two GeometricMeans by merging their log-means."""
        return GeometricMean(_log_mean=self._log_mean.merge(other._log_mean))

    @property
    def geo_mean(self) -> float:
        """Current geometric mean, NaN if nothing has been seen."""
        return float(np.exp2(self._log_mean.mean))

    @property
    def count(self) -> int:
        return self._log_mean.count
