"""
Decomposition solution types.

Contains the factorization payloads computed by backends and the
user-facing solution wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.result import Result
from pymatrix.core.validation import check_finite
from pymatrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.core.protocols import Backend


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU factorization with partial pivoting.

    P A = L U, where row i of P A is row permutation[i] of A.
    """
    L: NDArray[np.float64]
    U: NDArray[np.float64]
    permutation: tuple[int, ...]
    sign: int


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for QR factorization.

    A = Q R with Q having orthonormal columns and R upper trapezoidal.
    """
    Q: NDArray[np.float64]
    R: NDArray[np.float64]
    rank: int


@dataclass
class LUSolution:
    """
    User-facing LU factorization.

    Unpacks as (L, U):
        >>> L, U = lu_decompose(A)

    The pivot permutation is available as `permutation`, `sign` and the
    permutation matrix `P`, so that multiply(P, A) ≈ multiply(L, U).
    Every Matrix accessor returns a fresh copy.
    """
    _result: Result[LUParams]
    _backend: 'Backend'

    @property
    def L(self) -> Matrix:
        """Unit lower-triangular factor (n x n)."""
        return Matrix._wrap(self._result.params.L.copy())

    @property
    def U(self) -> Matrix:
        """Upper-triangular factor (n x n)."""
        return Matrix._wrap(self._result.params.U.copy())

    @property
    def permutation(self) -> tuple[int, ...]:
        return self._result.params.permutation

    @property
    def sign(self) -> int:
        """Parity of the row swaps: +1 for even, -1 for odd."""
        return self._result.params.sign

    @property
    def P(self) -> Matrix:
        """Permutation matrix with P A = L U."""
        n = len(self.permutation)
        P = np.zeros((n, n), dtype=np.float64)
        P[np.arange(n), list(self.permutation)] = 1.0
        return Matrix._wrap(P)

    def __iter__(self) -> Iterator[Matrix]:
        yield self.L
        yield self.U

    def diagonal_product(self) -> float:
        """sign * prod(diag(U)), i.e. det(A)."""
        return float(self.sign * np.prod(np.diagonal(self._result.params.U)))

    def solve(self, b: Matrix) -> Matrix:
        """
        Solve A x = b using the stored factors.

        Args:
            b: Right-hand side (n x k)

        Returns:
            New n x k matrix x

        Raises:
            DimensionMismatchError: If b.rows != n
            ValidationError: If b contains NaN or Inf
        """
        n = len(self.permutation)
        if b.rows != n:
            raise DimensionMismatchError(
                f"factorization is {n}x{n} but b has {b.rows} rows; expected {n}"
            )
        check_finite(b._data, 'b')

        x = self._backend.substitute(self._result.params, b._data)
        return Matrix._wrap(x)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a short text summary of the factorization."""
        n = len(self.permutation)
        lines = [
            "LU Decomposition",
            "=" * 40,
            f"Order: {n}x{n}",
            f"Pivoting: {self.info.get('pivoting', 'partial')}",
            f"Row swaps: {self.info.get('n_swaps', 0)}",
            f"Permutation: {list(self.permutation)}",
            f"Determinant: {self.diagonal_product():.6g}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        return "\n".join(lines)


@dataclass
class QRSolution:
    """
    User-facing QR factorization.

    Unpacks as (Q, R):
        >>> Q, R = qr_decompose(A)
    """
    _result: Result[QRParams]

    @property
    def Q(self) -> Matrix:
        """Factor with orthonormal columns."""
        return Matrix._wrap(self._result.params.Q.copy())

    @property
    def R(self) -> Matrix:
        """Upper-triangular (trapezoidal) factor with non-negative diagonal."""
        return Matrix._wrap(self._result.params.R.copy())

    @property
    def rank(self) -> int:
        return self._result.params.rank

    def __iter__(self) -> Iterator[Matrix]:
        yield self.Q
        yield self.R

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a short text summary of the factorization."""
        q_rows, q_cols = self._result.params.Q.shape
        r_rows, r_cols = self._result.params.R.shape
        lines = [
            "QR Decomposition",
            "=" * 40,
            f"Mode: {self.info.get('mode', 'reduced')}",
            f"Q: {q_rows}x{q_cols}",
            f"R: {r_rows}x{r_cols}",
            f"Rank: {self.rank}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)
