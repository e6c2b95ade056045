"""
Element-wise transforms over sequences.

Public API:
    z_score(x, mean=None, sd=None) - lazy z-score view
    ZScore                         - base view class
"""

from pysummary.transform.zscore import ZScore, z_score

__all__ = [
    "ZScore",
    "z_score",
]
