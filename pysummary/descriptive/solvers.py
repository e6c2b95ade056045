"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pysummary.descriptive.design import DescriptiveDesign
from pysummary.descriptive.solution import DescriptiveSolution
from pysummary.descriptive.backends.cpu import CPUDescriptiveBackend


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(data: ArrayLike | DescriptiveDesign) -> DescriptiveSolution:
    """
    Compute every descriptive statistic at once.

    Computes: n, mean, sum, variance, standard deviation, skewness,
    kurtosis, min, max, median, median absolute deviation and geometric
    mean.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D data vector with at least one observation.

    Returns
    -------
    DescriptiveSolution with all statistics populated. Undefined statistics
    are NaN, with the reason listed in .warnings.
    """
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)
