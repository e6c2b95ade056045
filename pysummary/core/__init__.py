"""
Core infrastructure for pysummary.

This module provides shared abstractions and utilities used by all
statistics submodules (moments, order, transform, descriptive).

Key components:
    protocols: Accumulator, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    capabilities: Sequence capability detection
    compute: Timing and tolerance tiers
"""

from pysummary.core.protocols import Accumulator, Backend
from pysummary.core.result import Result
from pysummary.core.exceptions import (
    PySummaryError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "Accumulator",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PySummaryError",
    "ValidationError",
    "DimensionError",
]
