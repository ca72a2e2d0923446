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
def textbook_sample():
    """Classic sample: mean 5, population variance 4, population sd 2."""
    return np.array([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])


@pytest.fixture
def moderate_sample(rng):
    """Well-conditioned sample: spread comparable to magnitude."""
    return rng.normal(loc=10.0, scale=3.0, size=1000)


@pytest.fixture
def offset_sample(rng):
    """
    Small noise on a large offset, returned with the offset removed.

    Subtracting the offset is exact (Sterbenz), so the shifted array has
    exactly the spread of the stored sample.
    """
    offset = 1e9
    x = offset + rng.standard_normal(1000) * 1e-3
    return x, x - offset
