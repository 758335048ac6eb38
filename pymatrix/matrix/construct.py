"""
Matrix construction helpers.

All constructors return a new, independently owned Matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.validation import check_positive_size
from pymatrix.matrix.matrix import Matrix


def zeros(rows: int, cols: int) -> Matrix:
    """rows x cols matrix filled with 0.0."""
    check_positive_size(rows, 'rows')
    check_positive_size(cols, 'cols')
    return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))


def ones(rows: int, cols: int) -> Matrix:
    """rows x cols matrix filled with 1.0."""
    check_positive_size(rows, 'rows')
    check_positive_size(cols, 'cols')
    return Matrix._wrap(np.ones((rows, cols), dtype=np.float64))


def identity(size: int) -> Matrix:
    """size x size identity matrix."""
    check_positive_size(size, 'size')
    return Matrix._wrap(np.eye(size, dtype=np.float64))


def random(
    rows: int,
    cols: int,
    *,
    seed: int | np.random.Generator | None = None,
) -> Matrix:
    """
    rows x cols matrix of uniform [0, 1) values.

    Args:
        rows: Number of rows
        cols: Number of columns
        seed: Integer seed or Generator for reproducible draws;
              None draws fresh entropy.
    """
    check_positive_size(rows, 'rows')
    check_positive_size(cols, 'cols')
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    return Matrix._wrap(rng.random((rows, cols)))


def from_array(values: ArrayLike) -> Matrix:
    """Build a matrix from any 2D array-like or another Matrix (copied)."""
    return Matrix(values)
