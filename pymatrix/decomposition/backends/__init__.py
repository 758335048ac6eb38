"""
Factorization backends.

    native: numpy Gaussian elimination / Householder (default, reference)
    lapack: scipy.linalg
"""

from pymatrix.decomposition.backends.native import NativeBackend
from pymatrix.decomposition.backends.lapack import LapackBackend

__all__ = [
    "NativeBackend",
    "LapackBackend",
]
