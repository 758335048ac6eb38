"""
Solver dispatch for matrix decompositions.

This module provides lu_decompose() and qr_decompose() (public API) and
backend selection.
"""

from __future__ import annotations

import warnings
from dataclasses import replace
from typing import Literal

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import Backend
from pymatrix.core.validation import check_finite, check_square
from pymatrix.decomposition.backends.native import NativeBackend
from pymatrix.decomposition.solution import LUSolution, QRSolution
from pymatrix.matrix.matrix import Matrix


BackendChoice = Literal['auto', 'native', 'lapack']
QRMode = Literal['reduced', 'complete']


def get_backend(choice: BackendChoice) -> Backend:
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference

    Returns:
        Backend instance ready to factorize

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'native'):
        return NativeBackend()

    if choice == 'lapack':
        from pymatrix.decomposition.backends.lapack import LapackBackend
        return LapackBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")


def lu_decompose(
    mat: Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> LUSolution:
    """
    LU decomposition with partial pivoting.

    Factors a square matrix as P A = L U with L unit lower-triangular and
    U upper-triangular. The input is not modified.

    Args:
        mat: Square matrix (n x n)
        backend: 'auto' / 'native' (reference elimination) or 'lapack'

    Returns:
        LUSolution; unpacks as (L, U) and exposes permutation, sign, P

    Raises:
        DimensionMismatchError: If mat is not square
        ValidationError: If mat contains NaN or Inf
        SingularMatrixError: If a pivot is numerically zero

    Example:
        >>> A = Matrix([[4, 3], [6, 3]])
        >>> L, U = lu_decompose(A)
        >>> U.allclose([[6, 3], [0, 1]])
        True
    """
    check_square(mat, 'mat')
    check_finite(mat._data, 'mat')

    backend_impl = get_backend(backend)
    result = backend_impl.lu(mat._data)

    return LUSolution(_result=result, _backend=backend_impl)


def qr_decompose(
    mat: Matrix,
    *,
    mode: QRMode = 'reduced',
    backend: BackendChoice = 'auto',
) -> QRSolution:
    """
    QR decomposition by Householder reflections.

    Factors an m x n matrix as A = Q R with orthonormal columns in Q and
    upper-triangular R whose diagonal is non-negative.

    Args:
        mat: Matrix to decompose (m x n, m >= n recommended)
        mode: 'reduced' for economy QR (Q is m x k, R is k x n, k = min(m, n))
              'complete' for full QR (Q is m x m, R is m x n)
        backend: 'auto' / 'native' (reference Householder) or 'lapack'

    Returns:
        QRSolution; unpacks as (Q, R)

    Raises:
        ValidationError: If mode is unknown or mat contains NaN or Inf
        SingularMatrixError: If mat is numerically rank-deficient
    """
    if mode not in ('reduced', 'complete'):
        raise ValidationError(f"Unknown QR mode: {mode!r}")
    check_finite(mat._data, 'mat')

    backend_impl = get_backend(backend)
    result = backend_impl.qr(mat._data, mode)

    if mat.rows < mat.cols:
        message = (
            f"QR of a wide {mat.rows}x{mat.cols} matrix: only the leading "
            f"{mat.rows} columns are orthogonalized"
        )
        warnings.warn(message, UserWarning, stacklevel=2)
        result = replace(result, warnings=result.warnings + (message,))

    return QRSolution(_result=result)
