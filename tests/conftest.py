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
def small_system():
    """The 2x2 system [[2, 1], [1, 3]] x = [3, 5], solution [0.8, 1.4]."""
    A = np.array([[2.0, 1.0], [1.0, 3.0]])
    b = np.array([3.0, 5.0])
    x = np.array([0.8, 1.4])
    return A, b, x


@pytest.fixture
def dominant_system(rng):
    """Diagonally dominant system: safe for elimination without pivoting."""
    n = 8
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def householder_example():
    """Classic QR example whose first normalized column is [6/7, 3/7, -2/7]."""
    return np.array([
        [12.0, -51.0, 4.0],
        [6.0, 167.0, -68.0],
        [-4.0, 24.0, -41.0],
    ])
