"""
Shared compute infrastructure for pysummary.

IMPORTANT: This is NOT where statistics live. Those go in moments/, order/
and transform/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pysummary.core.compute.timing import Timer, timed
from pysummary.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    LANE_REORDERED,
    APPROX,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "LANE_REORDERED",
    "APPROX",
    "select_tolerance",
]
