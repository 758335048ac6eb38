"""
Determinant, linear-system solve and inverse, built on LU factorization.

Public API:
    det(mat) -> float
    solve(A, b) -> Matrix
    inverse(mat) -> Matrix
"""

from pymatrix.linalg.determinant import det
from pymatrix.linalg.solve import solve
from pymatrix.linalg.inverse import inverse

__all__ = [
    "det",
    "solve",
    "inverse",
]
