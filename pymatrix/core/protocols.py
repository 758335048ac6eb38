"""
Core protocols for PyMatrix.

These define structural interfaces that factorization backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend is any object with the right methods.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Backends work on validated float64 arrays, never on Matrix objects
    - Backends are stateless
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pymatrix.core.result import Result
    from pymatrix.decomposition.solution import LUParams, QRParams


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for factorization backends.

    Each backend takes a validated float64 array and produces a Result
    wrapping the factorization payload. Validation (shape, finiteness)
    happens before a backend is called; backends only detect numerical
    failure.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{implementation}'
        Examples: 'native', 'lapack'
        """
        ...

    def lu(self, a: NDArray[np.float64]) -> 'Result[LUParams]':
        """
        LU factorization with partial pivoting: P A = L U.

        Raises:
            SingularMatrixError: If a pivot is numerically zero
        """
        ...

    def qr(
        self,
        a: NDArray[np.float64],
        mode: Literal['reduced', 'complete'],
    ) -> 'Result[QRParams]':
        """
        QR factorization A = Q R with non-negative diag(R).

        Raises:
            SingularMatrixError: If A is numerically rank-deficient
        """
        ...

    def substitute(
        self,
        params: 'LUParams',
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.float64]:
        """
        Solve L U x = P b given LU factors (forward then back substitution).
        """
        ...
