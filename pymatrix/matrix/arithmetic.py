"""
Arithmetic engine: elementwise add, matrix product, transpose.

Products follow the conventional contract a.cols == b.rows.
"""

import numpy as np

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import check_same_shape
from pymatrix.matrix.matrix import Matrix


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    check_same_shape(a, b, ('a', 'b'))
    return Matrix._wrap(a._data + b._data)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a x b.

    Each output cell is the float64 dot product of a row of `a` with a
    column of `b`. No compensated summation is applied.

    Args:
        a: Left operand (m x n)
        b: Right operand (n x p)

    Returns:
        New m x p matrix

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    if a.cols != b.rows:
        raise DimensionMismatchError(
            f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}: "
            f"a.cols ({a.cols}) must equal b.rows ({b.rows})"
        )
    return Matrix._wrap(a._data @ b._data)


def transposed(mat: Matrix) -> Matrix:
    """New cols x rows matrix with result[j, i] = mat[i, j]."""
    return Matrix._wrap(mat._data.T.copy())
