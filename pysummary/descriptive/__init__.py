"""
Descriptive statistics module.

Public API:
    describe(data)  - All statistics at once, in a Result envelope
"""

from pysummary.descriptive.design import DescriptiveDesign
from pysummary.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pysummary.descriptive.solvers import describe

__all__ = [
    "describe",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
