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
def two_factor_data(rng):
    """Six variables driven by two latent factors (factorable data)."""
    n = 300
    f1 = rng.standard_normal(n)
    f2 = rng.standard_normal(n)
    noise = rng.standard_normal((n, 6)) * 0.5
    data = np.column_stack([f1, f1, f1, f2, f2, f2]) + noise
    return data


@pytest.fixture
def collinear_data(rng):
    """Dataset with perfect collinearity (singular correlation matrix)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2  # Perfect collinearity
    return np.column_stack([x1, x2, x3])
