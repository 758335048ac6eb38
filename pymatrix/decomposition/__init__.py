"""
Matrix decompositions.

Public API:
    lu_decompose(mat, ...) -> LUSolution
    qr_decompose(mat, ...) -> QRSolution

Both accept backend='auto' | 'native' | 'lapack'.

Example:
    >>> from pymatrix import Matrix
    >>> from pymatrix.decomposition import lu_decompose, qr_decompose
    >>> L, U = lu_decompose(Matrix([[4, 3], [6, 3]]))
    >>> Q, R = qr_decompose(Matrix([[1, 0], [1, 1], [0, 1]]))
"""

from pymatrix.decomposition.solution import LUParams, LUSolution, QRParams, QRSolution
from pymatrix.decomposition.solvers import get_backend, lu_decompose, qr_decompose

__all__ = [
    "lu_decompose",
    "qr_decompose",
    "get_backend",
    "LUSolution",
    "LUParams",
    "QRSolution",
    "QRParams",
]
