"""
Online mean and variance.

References:
    Welford, B. P. (1962). Note on a method for calculating corrected
    sums of squares and products. Technometrics 4(3).
    Chan, T. F., Golub, G. H., LeVeque, R. J. (1979). Updating formulae
    and a pairwise algorithm for computing sample variances.
    Terriberry, T. B. Computing Higher-Order Moments Online.
    http://people.xiph.org/~tterribe/notes/homs.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pysummary.moments._common import ieee_sqrt
from pysummary.moments._mean import Mean


@dataclass(frozen=True)
class MeanSD:
    """
    Online mean, variance and standard deviation.

    Holds the running mean, the running sum of squared deviations from
    the mean (M2) and the count. Uses O(1) space and does NOT store the
    individual elements. If only the mean is needed, Mean is cheaper.

    Immutable: put(), put_all() and merge() return new instances.

    Examples:
        >>> summ = MeanSD().put_all([1, 2, 3, 4, 5])
        >>> summ.mean
        3.0
        >>> summ.variance
        2.5
    """
    _mean: float = 0.0
    _m2: float = 0.0
    _k: int = 0

    def put(self, element: float) -> MeanSD:
        """Welford update with one observation."""
        k_minus_1 = self._k
        k = k_minus_1 + 1
        delta = float(element) - self._mean
        delta_n = delta / k
        return MeanSD(
            _mean=self._mean + delta_n,
            _m2=self._m2 + k_minus_1 * delta_n * delta,
            _k=k,
        )

    def put_all(self, data: Iterable[float]) -> MeanSD:
        mean, m2, k = self._mean, self._m2, self._k
        for element in data:
            k_minus_1 = k
            k += 1
            delta = float(element) - mean
            delta_n = delta / k
            mean += delta_n
            m2 += k_minus_1 * delta_n * delta
        return MeanSD(_mean=mean, _m2=m2, _k=k)

    def merge(self, other: MeanSD) -> MeanSD:
        """
        Combine with another MeanSD (Chan et al. pairwise update).

        A zero-count operand is the identity element.
        """
        if self._k == 0:
            return other
        if other._k == 0:
            return self

        total = self._k + other._k
        delta = other._mean - self._mean
        mean = self._mean * (self._k / total) + other._mean * (other._k / total)
        m2 = self._m2 + other._m2 + self._k / total * other._k * delta * delta
        return MeanSD(_mean=mean, _m2=m2, _k=total)

    @property
    def mean(self) -> float:
        """Current mean, NaN if nothing has been seen."""
        return float('nan') if self._k == 0 else self._mean

    @property
    def sum(self) -> float:
        return self._k * self._mean

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, k - 1), NaN if k < 2."""
        return float('nan') if self._k < 2 else self._m2 / (self._k - 1)

    @property
    def stdev(self) -> float:
        return ieee_sqrt(self.variance)

    @property
    def mse(self) -> float:
        """Population variance (divides by k), NaN if k < 2."""
        return float('nan') if self._k < 2 else self._m2 / self._k

    @property
    def count(self) -> int:
        return self._k

    def to_mean(self) -> Mean:
        """Project onto a Mean accumulator (drops M2)."""
        return Mean(_mean=self._mean, _k=self._k)
