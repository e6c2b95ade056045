"""
Online mean, variance, skewness, kurtosis, min and max.

References:
    Terriberry, T. B. Computing Higher-Order Moments Online.
    http://people.xiph.org/~tterribe/notes/homs.html
    Pébay, P. (2008). Formulas for robust, one-pass parallel computation
    of covariances and arbitrary-order statistical moments. SAND2008-6212.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from pysummary.moments._common import ieee_div, ieee_sqrt
from pysummary.moments._mean import Mean
from pysummary.moments._meansd import MeanSD


@dataclass(frozen=True)
class Summary:
    """
    Online accumulator of the first four central moments plus min and max.

    Relatively expensive per element: if only mean and/or stdev are
    needed, use MeanSD or Mean. Uses O(1) space and does NOT store the
    individual elements.

    Immutable: put(), put_all() and merge() return new instances.

    Skewness and kurtosis are population (uncorrected) estimates, and are
    not guarded against M2 == 0: a constant input yields NaN.

    Examples:
        >>> summ = Summary().put_all([1, 2, 3, 4, 5])
        >>> summ.count, summ.mean, summ.variance
        (5, 3.0, 2.5)
        >>> summ.min, summ.max, summ.sum
        (1.0, 5.0, 15.0)
        >>> round(summ.kurtosis, 4)
        -1.3
    """
    _mean: float = 0.0
    _m2: float = 0.0
    _m3: float = 0.0
    _m4: float = 0.0
    _k: int = 0
    _min: float = math.inf
    _max: float = -math.inf

    def put(self, element: float) -> Summary:
        return self.put_all((element,))

    def put_all(self, data: Iterable[float]) -> Summary:
        """
        Fold every element of `data` into the moments.

        Each higher moment is updated from the deltas against the
        pre-update mean and from the pre-update lower moments, so the
        order is M4, M3, M2, then the mean.
        """
        mean, m2, m3, m4 = self._mean, self._m2, self._m3, self._m4
        k, lo, hi = self._k, self._min, self._max

        for element in data:
            x = float(element)
            k_minus_1 = k
            k += 1
            k_inv = 1.0 / k
            lo = x if x < lo else lo
            hi = x if x > hi else hi

            delta = x - mean
            delta_n = delta * k_inv

            m4 += (k_minus_1 * delta_n * (k * k - 3 * k + 3) * delta_n * delta_n * delta
                   + 6 * m2 * delta_n * delta_n
                   - 4 * delta_n * m3)
            m3 += (k_minus_1 * delta_n * (k - 2) * delta_n * delta
                   - 3 * delta * m2 * k_inv)
            m2 += k_minus_1 * delta_n * delta
            mean += delta_n

        return Summary(_mean=mean, _m2=m2, _m3=m3, _m4=m4, _k=k, _min=lo, _max=hi)

    def merge(self, other: Summary) -> Summary:
        """
        Combine with another Summary using the pairwise moment formulas.

        With n = na + nb and d = mean_b - mean_a:
            M2 = M2a + M2b + d^2 na nb / n
            M3 = M3a + M3b + d^3 na nb (na - nb) / n^2
                 + 3 d (na M2b - nb M2a) / n
            M4 = M4a + M4b + d^4 na nb (na^2 - na nb + nb^2) / n^3
                 + 6 d^2 (na^2 M2b + nb^2 M2a) / n^2
                 + 4 d (na M3b - nb M3a) / n

        A zero-count operand is the identity element.
        """
        if self._k == 0:
            return other
        if other._k == 0:
            return self

        na, nb = self._k, other._k
        total = na + nb
        delta = other._mean - self._mean
        delta_n = delta / total

        m4 = (self._m4 + other._m4
              + delta_n * na * delta_n * nb * delta_n * delta * (na * na - na * nb + nb * nb)
              + 6 * delta_n * na * delta_n * na * other._m2
              + 6 * delta_n * nb * delta_n * nb * self._m2
              + 4 * delta_n * na * other._m3
              - 4 * delta_n * nb * self._m3)

        m3 = (self._m3 + other._m3
              + delta_n * na * delta_n * nb * delta * (na - nb)
              + 3 * delta_n * na * other._m2
              - 3 * delta_n * nb * self._m2)

        m2 = self._m2 + other._m2 + na / total * nb * delta * delta

        return Summary(
            _mean=self._mean * (na / total) + other._mean * (nb / total),
            _m2=m2,
            _m3=m3,
            _m4=m4,
            _k=total,
            _min=min(self._min, other._min),
            _max=max(self._max, other._max),
        )

    @property
    def mean(self) -> float:
        """Current mean, NaN if nothing has been seen."""
        return float('nan') if self._k == 0 else self._mean

    @property
    def sum(self) -> float:
        return self._mean * self._k

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, k - 1), NaN if k < 2."""
        return float('nan') if self._k < 2 else self._m2 / (self._k - 1)

    @property
    def stdev(self) -> float:
        return ieee_sqrt(self.variance)

    @property
    def skewness(self) -> float:
        """
        Population skewness, M3 / M2^1.5 * sqrt(k).

        sqrt(M2) is cubed rather than raising M2 to 1.5.
        """
        sq_m2 = ieee_sqrt(self._m2)
        return ieee_div(self._m3, sq_m2 * sq_m2 * sq_m2) * math.sqrt(self._k)

    @property
    def kurtosis(self) -> float:
        """
        Excess kurtosis relative to the normal distribution (which has 0).

        High kurtosis means the variance is due to infrequent, large
        deviations from the mean; low kurtosis means frequent, small ones.
        """
        return ieee_div(ieee_div(self._m4, self._m2) * self._k, self._m2) - 3

    @property
    def count(self) -> int:
        return self._k

    @property
    def min(self) -> float:
        """Smallest element seen, +inf if nothing has been seen."""
        return self._min

    @property
    def max(self) -> float:
        """Largest element seen, -inf if nothing has been seen."""
        return self._max

    def to_mean_sd(self) -> MeanSD:
        """Project onto a MeanSD accumulator (drops M3, M4, min, max)."""
        return MeanSD(_mean=self._mean, _m2=self._m2, _k=self._k)

    def to_mean(self) -> Mean:
        """Project onto a Mean accumulator."""
        return self.to_mean_sd().to_mean()
