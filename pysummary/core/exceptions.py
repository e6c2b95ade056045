"""
Exception hierarchy for pysummary.

All exceptions inherit from PySummaryError to allow catching any
library-specific error.

Undefined statistics (empty input, variance of a single observation) are
NOT errors: they are reported as NaN. Exceptions are reserved for inputs
that violate a function's contract.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySummaryError(Exception):
    """Base exception for all pysummary errors."""
    pass


class ValidationError(PySummaryError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an input that must be a flat sequence has more than
    one dimension.
    """
    pass
