"""Determinant from the LU factors."""

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.validation import check_square
from pymatrix.decomposition.solvers import BackendChoice, lu_decompose
from pymatrix.matrix.matrix import Matrix


def det(mat: Matrix, *, backend: BackendChoice = 'auto') -> float:
    """
    Determinant of a square matrix.

    Computed as sign * prod(diag(U)) from the pivoted LU factorization,
    where sign is the parity of the row swaps. A 1x1 matrix returns its
    only element directly.

    A singular matrix gives 0.0 rather than an error.

    Raises:
        DimensionMismatchError: If mat is not square
    """
    check_square(mat, 'mat')
    if mat.rows == 1:
        return mat[0, 0]

    try:
        factors = lu_decompose(mat, backend=backend)
    except SingularMatrixError:
        return 0.0

    return factors.diagonal_product()
