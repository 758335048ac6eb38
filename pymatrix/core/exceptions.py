"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index problems are validation errors;
singularity is a numerical error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric data, unknown option names).
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes violate an operation's contract.

    Raised for non-square input where a square matrix is required,
    incompatible add/multiply shapes, and solve shape mismatches.
    """
    pass


class MatrixIndexError(ValidationError, IndexError):
    """
    Row, column or element index is out of bounds.

    Also an IndexError, so plain ``except IndexError`` works.
    """
    pass


class RangeError(ValidationError):
    """
    A window (start, extent) falls outside the matrix.

    Raised by submatrix extraction when the requested block does not fit.
    """
    pass


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a decomposition, solve or inverse requires a non-zero pivot
    or full column rank and the matrix does not provide it.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step at which the pivot vanished, if known
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(rows, cols))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.rank = rank
        self.expected_rank = expected_rank
