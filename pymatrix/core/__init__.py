"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
data model, the decomposition engine and the linear-algebra entry points.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionMismatchError,
    MatrixIndexError,
    RangeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "MatrixIndexError",
    "RangeError",
    "NumericalError",
    "SingularMatrixError",
]
