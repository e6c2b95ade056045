"""
Sequence capability constants for pysummary.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Batch functions and views inspect what an input sequence can do and
choose their strategy accordingly: lane-batched accumulation needs
random access with a known length, the z-score view mirrors whatever
traversal the wrapped sequence offers.

Usage:
    from pysummary.core.capabilities import (
        CAPABILITY_RANDOM_ACCESS,
        CAPABILITY_KNOWN_LENGTH,
        capabilities_of,
    )

    if CAPABILITY_RANDOM_ACCESS in capabilities_of(data):
        x = data[0]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Reversible, Sequence, Sized
from typing import Any

import numpy as np

# Elements can be visited front to back
CAPABILITY_FORWARD = 'forward'

# Data can be iterated multiple times (not a one-shot iterator)
CAPABILITY_REPEATABLE = 'repeatable'

# Elements can be visited back to front
CAPABILITY_BIDIRECTIONAL = 'bidirectional'

# Elements can be fetched by integer index
CAPABILITY_RANDOM_ACCESS = 'random_access'

# Number of elements is known without iterating
CAPABILITY_KNOWN_LENGTH = 'known_length'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_FORWARD,
    CAPABILITY_REPEATABLE,
    CAPABILITY_BIDIRECTIONAL,
    CAPABILITY_RANDOM_ACCESS,
    CAPABILITY_KNOWN_LENGTH,
})

# Sequences of characters are never treated as numeric data
_TEXT_TYPES = (str, bytes, bytearray)


def capabilities_of(data: Any) -> frozenset[str]:
    """
    Detect the traversal capabilities of a sequence.

    Args:
        data: Any object

    Returns:
        frozenset of capability strings. Empty if data is not iterable.
    """
    if not isinstance(data, Iterable) or isinstance(data, _TEXT_TYPES):
        return frozenset()

    caps = {CAPABILITY_FORWARD}

    if not isinstance(data, Iterator):
        caps.add(CAPABILITY_REPEATABLE)

    if isinstance(data, Sized):
        caps.add(CAPABILITY_KNOWN_LENGTH)

    random_access = isinstance(data, (Sequence, np.ndarray))
    if random_access:
        caps.add(CAPABILITY_RANDOM_ACCESS)

    # reversed() works on anything with __reversed__, and on anything
    # implementing the sequence protocol (__len__ + integer __getitem__)
    if random_access or isinstance(data, Reversible):
        caps.add(CAPABILITY_BIDIRECTIONAL)

    return frozenset(caps)


def is_array_like(data: Any) -> bool:
    """True if data supports indexed access with a known length."""
    caps = capabilities_of(data)
    return CAPABILITY_RANDOM_ACCESS in caps and CAPABILITY_KNOWN_LENGTH in caps


__all__ = [
    'CAPABILITY_FORWARD',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_BIDIRECTIONAL',
    'CAPABILITY_RANDOM_ACCESS',
    'CAPABILITY_KNOWN_LENGTH',
    'ALL_CAPABILITIES',
    'capabilities_of',
    'is_array_like',
]
