"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def pivot_example():
    """2x2 system whose first pivot requires a row swap."""
    return Matrix([[4.0, 3.0], [6.0, 3.0]])


@pytest.fixture
def singular_2x2():
    """Rank-1 matrix: second row is twice the first."""
    return Matrix([[1.0, 2.0], [2.0, 4.0]])


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 5x5 matrix (invertible, modest condition number)."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    return Matrix(A)


@pytest.fixture
def tall_full_rank(rng):
    """7x4 matrix with independent columns."""
    return Matrix(rng.standard_normal((7, 4)))
