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
def shuffled_101(rng):
    """The integers 0..100 in random order."""
    return [int(v) for v in rng.permutation(101)]


@pytest.fixture
def many_duplicates(rng):
    """2000 integers drawn from only 7 distinct values."""
    return [int(v) for v in rng.integers(0, 7, size=2000)]
