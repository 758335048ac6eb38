"""
Generic result container for PyMatrix decompositions.

The Result class provides a standardized envelope that every factorization
backend returns. Solution wrappers (LUSolution, QRSolution) sit on top of it
and expose the factors, while timing, backend name and warnings travel with
the payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix factorizations.

    Type Parameters:
        P: The factorization payload type

    Attributes:
        params: Factorization payload (LUParams, QRParams)
        info: Structured metadata (method, pivoting, rank)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LUParams(L=L, U=U, permutation=(1, 0), sign=-1),
        ...     info={'method': 'lu', 'pivoting': 'partial', 'n_swaps': 1},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='native'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
