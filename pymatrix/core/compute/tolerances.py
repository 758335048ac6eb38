"""
Tolerance tiers for numerical validation.

Defines precision expectations for comparisons and the thresholds the
factorizations use to declare a pivot or a diagonal entry of R zero:
- CPU FP64: well-conditioned problems, near machine precision
- CPU FP64 ill-conditioned: relaxed for cond > 1e4

Used by Matrix.allclose(), the test suite, and both factorization backends.
"""

from dataclasses import dataclass

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Default for well-conditioned problems
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64


def pivot_tolerance(n: int, max_abs: float) -> float:
    """
    Magnitude at or below which an LU pivot counts as zero.

    Scaled by the matrix order and its largest entry so that the
    threshold does not depend on the units of the data.

    Args:
        n: Matrix order
        max_abs: Largest absolute entry of the input matrix

    Returns:
        Non-negative threshold (0.0 for an all-zero matrix)
    """
    return n * EPSILON_64 * max_abs


def rank_tolerance(shape: tuple[int, int], max_col_norm: float) -> float:
    """
    Magnitude at or below which a diagonal entry of R counts as zero.

    Same form as the rank cut used by LAPACK-based QR rank estimates:
    max(m, n) * eps * scale, with the largest column norm as scale.
    """
    return max(shape) * EPSILON_64 * max_col_norm
