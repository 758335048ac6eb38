"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    MatrixIndexError,
    RangeError,
    ValidationError,
)

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, order='C', copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionMismatchError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionMismatchError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        DimensionMismatchError: If either dimension is zero
    """
    rows, cols = array.shape
    if rows < 1 or cols < 1:
        raise DimensionMismatchError(
            f"{name}: matrix must have at least one row and one column, got {rows}x{cols}"
        )


def check_positive_size(value: int, name: str) -> None:
    """
    Verify a requested row/column count is a positive integer.

    Raises:
        DimensionMismatchError: If value < 1
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 1:
        raise DimensionMismatchError(f"{name}: must be >= 1, got {value}")


def check_square(mat: Matrix, name: str) -> None:
    """
    Verify matrix is square.

    Raises:
        DimensionMismatchError: If rows != cols
    """
    if mat.rows != mat.cols:
        raise DimensionMismatchError(
            f"{name}: expected a square matrix, got {mat.rows}x{mat.cols}"
        )


def check_same_shape(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"{names[0]} is {a.rows}x{a.cols} but {names[1]} is {b.rows}x{b.cols}; "
            f"shapes must match"
        )


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify 0 <= index < size.

    Negative indices are rejected rather than wrapped.

    Raises:
        MatrixIndexError: If index is not an integer or out of bounds
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise MatrixIndexError(f"{name}: expected an integer, got {type(index).__name__}")
    if index < 0 or index >= size:
        raise MatrixIndexError(f"{name}: {index} out of bounds for size {size}")


def check_window(start: int, extent: int, size: int, name: str) -> None:
    """
    Verify the half-open window [start, start + extent) lies in [0, size).

    Raises:
        RangeError: If start or extent is not an integer, start is negative,
            extent < 1, or the window overruns
    """
    for label, value in (('start', start), ('extent', extent)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise RangeError(
                f"{name}: {label} must be an integer, got {type(value).__name__}"
            )
    if start < 0:
        raise RangeError(f"{name}: start {start} is negative")
    if extent < 1:
        raise RangeError(f"{name}: extent must be >= 1, got {extent}")
    if start + extent > size:
        raise RangeError(
            f"{name}: window [{start}, {start + extent}) exceeds size {size}"
        )
