"""
Native reference backend.

Gaussian elimination with partial pivoting, Householder QR, and
forward/back substitution written directly against numpy row operations.
This is the default backend and the reference the LAPACK backend is
tested against.
"""

from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.decomposition._common import (
    check_qr_rank,
    lu_pivot_tolerance,
    normalize_qr_signs,
    permutation_sign,
    zero_pivot_error,
)
from pymatrix.decomposition.solution import LUParams, QRParams


class NativeBackend:
    """
    Pure numpy implementation of the Backend protocol.
    """

    @property
    def name(self) -> str:
        return 'native'

    def lu(self, a: NDArray[np.float64]) -> Result[LUParams]:
        """
        LU factorization by Gaussian elimination with partial pivoting.

        Algorithm, for each column k:
            1. Pick the row p >= k with the largest |U[p, k]|
            2. Fail if that pivot is at or below the zero-pivot tolerance
            3. Swap rows k and p in U, in the computed part of L, and in
               the permutation
            4. Eliminate below the pivot, storing multipliers in L[:, k]

        Args:
            a: Square float64 array (not modified)

        Returns:
            Result containing LUParams

        Raises:
            SingularMatrixError: If a pivot is numerically zero
        """
        timer = Timer()
        timer.start()

        n = a.shape[0]
        tol = lu_pivot_tolerance(a)
        U = a.copy()
        L = np.eye(n, dtype=np.float64)
        perm = np.arange(n)
        n_swaps = 0

        with timer.section('factorization'):
            for k in range(n):
                p = k + int(np.argmax(np.abs(U[k:, k])))
                if abs(U[p, k]) <= tol:
                    raise zero_pivot_error(k, n, U[p, k])

                if p != k:
                    U[[k, p], :] = U[[p, k], :]
                    L[[k, p], :k] = L[[p, k], :k]
                    perm[[k, p]] = perm[[p, k]]
                    n_swaps += 1

                multipliers = U[k + 1:, k] / U[k, k]
                L[k + 1:, k] = multipliers
                U[k + 1:, k:] -= np.outer(multipliers, U[k, k:])
                # Exact zeros below the pivot
                U[k + 1:, k] = 0.0

        timer.stop()

        params = LUParams(
            L=L,
            U=U,
            permutation=tuple(int(i) for i in perm),
            sign=permutation_sign(n_swaps),
        )
        info: dict[str, Any] = {
            'method': 'lu',
            'pivoting': 'partial',
            'n_swaps': n_swaps,
        }
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )

    def qr(
        self,
        a: NDArray[np.float64],
        mode: Literal['reduced', 'complete'],
    ) -> Result[QRParams]:
        """
        QR factorization by Householder reflections.

        Each reflection H_j = I - 2 v v' zeroes column j of R below the
        diagonal; Q accumulates as Q = H_0 H_1 ... so that A = Q R.

        Args:
            a: m x n float64 array (not modified)
            mode: 'reduced' (Q is m x k, R is k x n, k = min(m, n))
                  or 'complete' (Q is m x m, R is m x n)

        Returns:
            Result containing QRParams

        Raises:
            SingularMatrixError: If a is numerically rank-deficient
        """
        timer = Timer()
        timer.start()

        m, n = a.shape
        k = min(m, n)
        R = a.copy()
        Q = np.eye(m, dtype=np.float64)

        with timer.section('householder'):
            for j in range(min(m - 1, n)):
                x = R[j:, j]
                norm_x = float(np.linalg.norm(x))
                if norm_x == 0.0:
                    continue
                v = x.copy()
                # Reflect onto -sign(x0) * ||x|| e1 to avoid cancellation
                v[0] += np.copysign(norm_x, x[0])
                v /= np.linalg.norm(v)
                R[j:, :] -= 2.0 * np.outer(v, v @ R[j:, :])
                Q[:, j:] -= 2.0 * np.outer(Q[:, j:] @ v, v)

        with timer.section('finalize'):
            R = np.triu(R)
            normalize_qr_signs(Q, R)
            rank = check_qr_rank(a, R)
            if mode == 'reduced':
                Q = Q[:, :k].copy()
                R = R[:k, :].copy()

        timer.stop()

        return Result(
            params=QRParams(Q=Q, R=R, rank=rank),
            info={'method': 'householder', 'mode': mode, 'rank': rank},
            timing=timer.result(),
            backend_name=self.name,
        )

    def substitute(
        self,
        params: LUParams,
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.float64]:
        """
        Solve L U x = P b for every column of b.

        Forward substitution on the unit lower-triangular L, then back
        substitution on U. O(n^2 k).
        """
        L, U = params.L, params.U
        n = L.shape[0]

        y = np.asarray(b, dtype=np.float64)[list(params.permutation), :].copy()
        for i in range(1, n):
            y[i, :] -= L[i, :i] @ y[:i, :]

        x = y
        for i in range(n - 1, -1, -1):
            x[i, :] -= U[i, i + 1:] @ x[i + 1:, :]
            x[i, :] /= U[i, i]

        return x
