"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pysummary.core.result import Result

if TYPE_CHECKING:
    from pysummary.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Every statistic is a float; undefined ones are NaN.
    """
    n: int
    mean: float
    sum: float
    variance: float
    sd: float
    skewness: float
    kurtosis: float
    min: float
    max: float
    median: float
    mad: float
    geometric_mean: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    # --- Moments ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sum(self) -> float:
        return self._result.params.sum

    @property
    def variance(self) -> float:
        """Variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Standard deviation."""
        return self._result.params.sd

    @property
    def skewness(self) -> float:
        """Population skewness."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Population excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    # --- Order statistics ---

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mad(self) -> float:
        """Median absolute deviation (no bias correction)."""
        return self._result.params.mad

    @property
    def geometric_mean(self) -> float:
        return self._result.params.geometric_mean

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Series name from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.n}, mean={p.mean:.6g}, sd={p.sd:.6g}, "
            f"median={p.median:.6g})"
        )
