"""Linear-system solve via LU factorization."""

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import check_square
from pymatrix.decomposition.solvers import BackendChoice, lu_decompose
from pymatrix.matrix.matrix import Matrix


def solve(A: Matrix, b: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Solve A x = b.

    Algorithm:
        1. Factor P A = L U with partial pivoting
        2. Forward substitution: L y = P b
        3. Back substitution:    U x = y

    Several right-hand sides are solved at once when b has more than
    one column. Neither A nor b is modified.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n x k)
        backend: 'auto' / 'native' or 'lapack'

    Returns:
        New n x k matrix x

    Raises:
        DimensionMismatchError: If A is not square or b.rows != A.rows
        ValidationError: If b contains NaN or Inf
        SingularMatrixError: If A is singular
    """
    check_square(A, 'A')
    if b.rows != A.rows:
        raise DimensionMismatchError(
            f"A is {A.rows}x{A.cols} but b has {b.rows} rows; expected {A.rows}"
        )

    return lu_decompose(A, backend=backend).solve(b)
