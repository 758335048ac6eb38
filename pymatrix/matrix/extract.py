"""
Structural extraction.

Row, column, submatrix and triangular extraction. Each function returns a
new Matrix whose buffer is independent of the input.
"""

import numpy as np

from pymatrix.core.validation import check_index, check_window
from pymatrix.matrix.matrix import Matrix


def get_row(mat: Matrix, row: int) -> Matrix:
    """Copy of row `row` as a 1 x cols matrix."""
    check_index(row, mat.rows, 'row')
    return Matrix._wrap(mat._data[row:row + 1, :].copy())


def get_col(mat: Matrix, col: int) -> Matrix:
    """Copy of column `col` as a rows x 1 matrix."""
    check_index(col, mat.cols, 'col')
    return Matrix._wrap(mat._data[:, col:col + 1].copy())


def copy(mat: Matrix) -> Matrix:
    """Deep copy."""
    return Matrix._wrap(mat._data.copy())


def _triangle(mat: Matrix, lower: bool) -> Matrix:
    k = min(mat.rows, mat.cols)
    out = np.zeros_like(mat._data)
    block = mat._data[:k, :k]
    # Only the leading k x k block carries a diagonal; the rest stays zero
    out[:k, :k] = np.tril(block) if lower else np.triu(block)
    return Matrix._wrap(out)


def get_lower(mat: Matrix) -> Matrix:
    """
    Lower triangle (diagonal included) of the leading min(rows, cols) block.

    The result has the input's dimensions; every position above the
    diagonal or outside the square block is zero.
    """
    return _triangle(mat, lower=True)


def get_upper(mat: Matrix) -> Matrix:
    """
    Upper triangle (diagonal included) of the leading min(rows, cols) block.

    The result has the input's dimensions; every position below the
    diagonal or outside the square block is zero.
    """
    return _triangle(mat, lower=False)


def get_submatrix(mat: Matrix, row: int, col: int, nrows: int, ncols: int) -> Matrix:
    """
    Copy of the nrows x ncols window whose top-left corner is (row, col).

    Raises:
        RangeError: If the window starts at a negative index, is empty,
                    or extends past the last row or column
    """
    check_window(row, nrows, mat.rows, 'rows')
    check_window(col, ncols, mat.cols, 'cols')
    return Matrix._wrap(mat._data[row:row + nrows, col:col + ncols].copy())
