"""Matrix inverse."""

from pymatrix.core.validation import check_square
from pymatrix.decomposition.solvers import BackendChoice
from pymatrix.linalg.solve import solve
from pymatrix.matrix.construct import identity
from pymatrix.matrix.matrix import Matrix


def inverse(mat: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Inverse of a square matrix, solving A X = I for all columns at once.

    Raises:
        DimensionMismatchError: If mat is not square
        SingularMatrixError: If mat is singular
    """
    check_square(mat, 'mat')
    return solve(mat, identity(mat.rows), backend=backend)
