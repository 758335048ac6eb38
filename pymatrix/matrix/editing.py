"""
In-place structural editing.

Every function here mutates the receiver and returns None. Shape-changing
edits assemble the new buffer completely before swapping it into the
matrix, so an edit that raises leaves the receiver exactly as it was.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import check_array, check_index
from pymatrix.matrix.matrix import Matrix


def _line_values(values: Matrix | ArrayLike, shape: tuple[int, int], name: str) -> NDArray[np.float64]:
    """Return values as an array of exactly `shape` (a single row or column)."""
    if isinstance(values, Matrix):
        arr = values._data
    else:
        arr = check_array(values, name)
        if arr.ndim == 1 and arr.size == shape[0] * shape[1]:
            arr = arr.reshape(shape)
    if arr.shape != shape:
        raise DimensionMismatchError(
            f"{name}: expected shape {shape}, got {arr.shape}"
        )
    return arr


def _check_insert_position(index: int, size: int, name: str) -> None:
    # Inserting at `size` appends
    check_index(index, size + 1, name)


def scale(mat: Matrix, scalar: float) -> None:
    """Multiply every element by `scalar`."""
    mat._replace(mat._data * float(scalar))


def shift(mat: Matrix, scalar: float) -> None:
    """Add `scalar` to every element."""
    mat._replace(mat._data + float(scalar))


def set_row(mat: Matrix, row: int, values: Matrix | ArrayLike) -> None:
    """Overwrite row `row` with a 1 x cols matrix (or length-cols sequence)."""
    check_index(row, mat.rows, 'row')
    line = _line_values(values, (1, mat.cols), 'values')
    mat._data[row, :] = line[0, :]


def set_col(mat: Matrix, col: int, values: Matrix | ArrayLike) -> None:
    """Overwrite column `col` with a rows x 1 matrix (or length-rows sequence)."""
    check_index(col, mat.cols, 'col')
    line = _line_values(values, (mat.rows, 1), 'values')
    mat._data[:, col] = line[:, 0]


def remove_row(mat: Matrix, row: int) -> None:
    """
    Delete row `row`.

    Raises:
        MatrixIndexError: If row is out of bounds
        DimensionMismatchError: If the matrix has a single row
    """
    check_index(row, mat.rows, 'row')
    if mat.rows == 1:
        raise DimensionMismatchError("Cannot remove the only row of a matrix")
    mat._replace(np.delete(mat._data, row, axis=0))


def remove_col(mat: Matrix, col: int) -> None:
    """
    Delete column `col`.

    Raises:
        MatrixIndexError: If col is out of bounds
        DimensionMismatchError: If the matrix has a single column
    """
    check_index(col, mat.cols, 'col')
    if mat.cols == 1:
        raise DimensionMismatchError("Cannot remove the only column of a matrix")
    mat._replace(np.delete(mat._data, col, axis=1))


def insert_row(mat: Matrix, row: int, values: Matrix | ArrayLike) -> None:
    """Insert a 1 x cols row so that it becomes row `row` (0..rows)."""
    _check_insert_position(row, mat.rows, 'row')
    line = _line_values(values, (1, mat.cols), 'values')
    mat._replace(np.insert(mat._data, row, line[0, :], axis=0))


def insert_col(mat: Matrix, col: int, values: Matrix | ArrayLike) -> None:
    """Insert a rows x 1 column so that it becomes column `col` (0..cols)."""
    _check_insert_position(col, mat.cols, 'col')
    line = _line_values(values, (mat.rows, 1), 'values')
    mat._replace(np.insert(mat._data, col, line[:, 0], axis=1))


def append_rows(mat: Matrix, other: Matrix) -> None:
    """Append all rows of `other` below `mat` (column counts must match)."""
    if other.cols != mat.cols:
        raise DimensionMismatchError(
            f"Cannot append rows of a {other.rows}x{other.cols} matrix to a "
            f"{mat.rows}x{mat.cols} matrix: column counts differ"
        )
    mat._replace(np.vstack([mat._data, other._data]))


def append_cols(mat: Matrix, other: Matrix) -> None:
    """Append all columns of `other` to the right of `mat` (row counts must match)."""
    if other.rows != mat.rows:
        raise DimensionMismatchError(
            f"Cannot append columns of a {other.rows}x{other.cols} matrix to a "
            f"{mat.rows}x{mat.cols} matrix: row counts differ"
        )
    mat._replace(np.hstack([mat._data, other._data]))


def map(mat: Matrix, function: Callable[[float], float]) -> None:
    """
    Apply a unary function to every element.

    The replacement buffer is filled first; if `function` raises, the
    exception propagates and `mat` is unchanged.
    """
    if not callable(function):
        raise TypeError(f"function must be callable, got {type(function).__name__}")
    out = np.empty_like(mat._data)
    for (i, j), value in np.ndenumerate(mat._data):
        out[i, j] = float(function(float(value)))
    mat._replace(out)


__all__ = [
    "scale",
    "shift",
    "set_row",
    "set_col",
    "remove_row",
    "remove_col",
    "insert_row",
    "insert_col",
    "append_rows",
    "append_cols",
    "map",
]
