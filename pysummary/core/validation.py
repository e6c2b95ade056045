"""
Input validation utilities for pysummary.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pysummary.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    *,
    promote: bool = True,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        promote: If True, integer and boolean arrays are promoted to
            float64. If False, the numeric dtype is kept as-is.

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        result = result.astype(np.int64)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if promote and not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_rank(k: int, n: int, name: str) -> None:
    """
    Verify an order-statistic rank lies in [0, n).

    Args:
        k: Requested 0-indexed rank
        n: Number of elements
        name: Parameter name for error messages

    Raises:
        ValidationError: If k is outside [0, n)
    """
    if not 0 <= k < n:
        raise ValidationError(
            f"{name}: rank must be in [0, {n}), got {k}"
        )


def check_lanes(n_lanes: int, name: str) -> None:
    """Verify a lane count is a positive integer."""
    if isinstance(n_lanes, bool) or not isinstance(n_lanes, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer lane count, got {type(n_lanes).__name__}"
        )
    if n_lanes < 1:
        raise ValidationError(f"{name}: lane count must be >= 1, got {n_lanes}")
