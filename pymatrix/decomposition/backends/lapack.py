"""
LAPACK backend.

Uses scipy.linalg (getrf / geqrf / trsm under the hood). Pivoting and
singularity rules match the native backend: LAPACK's partial pivoting
picks the same rows, and the zero-pivot and rank tolerances are applied
to its output rather than relying on exact-zero detection.
"""

import warnings
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, qr, solve_triangular

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.decomposition._common import (
    check_qr_rank,
    lu_pivot_tolerance,
    normalize_qr_signs,
    permutation_from_swaps,
    permutation_sign,
    zero_pivot_error,
)
from pymatrix.decomposition.solution import LUParams, QRParams


class LapackBackend:
    """
    scipy.linalg implementation of the Backend protocol.
    """

    @property
    def name(self) -> str:
        return 'lapack'

    def lu(self, a: NDArray[np.float64]) -> Result[LUParams]:
        """
        LU factorization via scipy.linalg.lu_factor.

        Raises:
            SingularMatrixError: If a diagonal entry of U is numerically zero
        """
        timer = Timer()
        timer.start()

        n = a.shape[0]
        tol = lu_pivot_tolerance(a)

        with timer.section('factorization'):
            # Exact zeros are reported below as SingularMatrixError
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', LinAlgWarning)
                lu, piv = lu_factor(a, check_finite=False)

        with timer.section('extract_factors'):
            diag = np.abs(np.diagonal(lu))
            small = np.flatnonzero(diag <= tol)
            if small.size > 0:
                k = int(small[0])
                raise zero_pivot_error(k, n, lu[k, k])
            L = np.tril(lu, k=-1) + np.eye(n, dtype=np.float64)
            U = np.triu(lu)
            permutation, n_swaps = permutation_from_swaps(piv)

        timer.stop()

        params = LUParams(
            L=L,
            U=U,
            permutation=permutation,
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
        QR factorization via scipy.linalg.qr.

        Raises:
            SingularMatrixError: If a is numerically rank-deficient
        """
        timer = Timer()
        timer.start()

        scipy_mode = 'economic' if mode == 'reduced' else 'full'
        with timer.section('householder'):
            Q, R = qr(a, mode=scipy_mode, check_finite=False)

        with timer.section('finalize'):
            Q = np.array(Q, dtype=np.float64, order='C')
            R = np.array(np.triu(R), dtype=np.float64, order='C')
            normalize_qr_signs(Q, R)
            rank = check_qr_rank(a, R)

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
        """Solve L U x = P b with two triangular solves."""
        pb = np.asarray(b, dtype=np.float64)[list(params.permutation), :]
        y = solve_triangular(params.L, pb, lower=True, unit_diagonal=True, check_finite=False)
        x = solve_triangular(params.U, y, lower=False, check_finite=False)
        return np.ascontiguousarray(x, dtype=np.float64)
