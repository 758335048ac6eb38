"""
Shared helpers for the LU and QR backends.

Pivot bookkeeping, singularity checks and the sign convention for R live
here so both backends report failures identically.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import pivot_tolerance, rank_tolerance
from pymatrix.core.exceptions import SingularMatrixError


def lu_pivot_tolerance(a: NDArray[np.float64]) -> float:
    """Zero-pivot threshold for the square matrix `a`."""
    return pivot_tolerance(a.shape[0], float(np.max(np.abs(a))))


def zero_pivot_error(k: int, n: int, pivot: float) -> SingularMatrixError:
    """Build the error reported when pivot `k` of an n x n elimination vanishes."""
    return SingularMatrixError(
        f"Matrix is singular: pivot {k} has magnitude {abs(pivot):.3e} "
        f"after partial pivoting (n={n})",
        matrix_name='A',
        pivot_index=k,
        rank=k,
        expected_rank=n,
    )


def permutation_from_swaps(swaps: NDArray[np.integer]) -> tuple[tuple[int, ...], int]:
    """
    Convert LAPACK-style swap indices to a row permutation.

    swaps[i] is the row exchanged with row i at elimination step i.

    Returns:
        (permutation, n_swaps) where row i of P A is row permutation[i] of A
    """
    perm = np.arange(len(swaps))
    n_swaps = 0
    for i, p in enumerate(swaps):
        if p != i:
            perm[[i, p]] = perm[[p, i]]
            n_swaps += 1
    return tuple(int(i) for i in perm), n_swaps


def permutation_sign(n_swaps: int) -> int:
    return -1 if n_swaps % 2 else 1


def normalize_qr_signs(
    Q: NDArray[np.float64],
    R: NDArray[np.float64],
) -> None:
    """
    Flip signs in place so that diag(R) is non-negative.

    Row i of R and column i of Q are negated together, which leaves the
    product Q R unchanged.
    """
    k = min(R.shape)
    signs = np.sign(np.diagonal(R)[:k]).copy()
    signs[signs == 0] = 1.0
    R[:k, :] *= signs[:, np.newaxis]
    Q[:, :k] *= signs[np.newaxis, :]


def check_qr_rank(a: NDArray[np.float64], R: NDArray[np.float64]) -> int:
    """
    Verify full rank from the diagonal of R.

    Returns:
        Numerical rank (always min(m, n) when no error is raised)

    Raises:
        SingularMatrixError: If any |R[j, j]| is at or below the rank tolerance
    """
    k = min(a.shape)
    col_norms = np.linalg.norm(a, axis=0)
    tol = rank_tolerance(a.shape, float(np.max(col_norms)))
    diag = np.abs(np.diagonal(R)[:k])
    deficient = np.flatnonzero(diag <= tol)
    if deficient.size > 0:
        rank = int(np.sum(diag > tol))
        raise SingularMatrixError(
            f"Matrix is rank-deficient: rank={rank}, expected={k}. "
            f"Column {int(deficient[0])} is numerically dependent on the preceding columns.",
            matrix_name='A',
            pivot_index=int(deficient[0]),
            rank=rank,
            expected_rank=k,
        )
    return k
