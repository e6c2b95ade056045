"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def normal_data(rng):
    """Standard normal sample long enough to exercise lane batching."""
    return rng.standard_normal(1000)


@pytest.fixture
def shifted_data(rng):
    """Sample with a large offset, where naive sum-of-squares loses precision."""
    return 1e9 + rng.standard_normal(500)
