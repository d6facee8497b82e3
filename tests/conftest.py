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
def unique_system():
    """Three equations, three unknowns, solution (2, 3, -1)."""
    return [
        [2.0, 1.0, -1.0, 8.0],
        [-3.0, -1.0, 2.0, -11.0],
        [-2.0, 1.0, 2.0, -3.0],
    ]


@pytest.fixture
def inconsistent_system():
    """Second row reads 0 = 1."""
    return [
        [1.0, 1.0, 2.0],
        [0.0, 0.0, 1.0],
    ]


@pytest.fixture
def underdetermined_system():
    """Second row is twice the first; one free variable."""
    return [
        [1.0, 2.0, 1.0],
        [2.0, 4.0, 2.0],
    ]


@pytest.fixture
def reduced_system():
    """Identity coefficients, already in RREF."""
    return [
        [1.0, 0.0, 5.0],
        [0.0, 1.0, 7.0],
    ]


@pytest.fixture
def random_square_system(rng):
    """Well-conditioned 5x5 system with a known float64 solution."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
