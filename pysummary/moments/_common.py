"""
Shared helpers for the moment accumulators.

Python float division raises ZeroDivisionError where IEEE arithmetic
yields inf or NaN. Every accumulator query whose denominator can be zero
goes through ieee_div / ieee_sqrt so that undefined statistics surface
as NaN (or inf) exactly as the floating-point standard prescribes.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

from pysummary.core.exceptions import ValidationError
from pysummary.core.protocols import Accumulator

A = TypeVar('A', bound=Accumulator)


def ieee_div(numerator: float, denominator: float) -> float:
    """numerator / denominator with IEEE semantics (x/0 -> +-inf, 0/0 -> nan)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_sqrt(value: float) -> float:
    """Square root returning NaN for negative or NaN input instead of raising."""
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(np.float64(value)))


def merge(a: A, b: A) -> A:
    """
    Combine two accumulators of the same type.

    Equivalent to a.merge(b): the result summarises the union of both
    observation sets without revisiting the raw data. A zero-count
    operand is the identity element.

    Args:
        a: First accumulator
        b: Second accumulator (same concrete type as a)

    Returns:
        New accumulator of the same type

    Raises:
        ValidationError: If a and b are of different types
    """
    if type(a) is not type(b):
        raise ValidationError(
            f"merge: cannot combine {type(a).__name__} with {type(b).__name__}"
        )
    return a.merge(b)
