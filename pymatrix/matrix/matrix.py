"""
Matrix data model.

A Matrix owns a single C-contiguous float64 buffer of shape (rows, cols).
Every operation that returns a matrix returns a new instance with its own
buffer; in-place editing builds the replacement buffer first and swaps it
in with _replace(), so a failed edit leaves the receiver untouched.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.exceptions import MatrixIndexError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_nonempty,
)


class Matrix:
    """
    Owned, mutable, rectangular grid of double-precision values.

    Construction:
        Matrix([[1, 2], [3, 4]])          # from nested sequences
        Matrix(np.eye(3))                 # from a numpy array (copied)
        Matrix(other)                     # from another Matrix (copied)

    Element access uses zero-based (row, col) pairs; negative indices are
    rejected rather than wrapped:
        m[0, 1] = 5.0
        m[1, 0]
    """

    __slots__ = ('_data',)

    def __init__(self, values: ArrayLike | Matrix):
        if isinstance(values, Matrix):
            values = values._data
        data = check_array(values, 'values')
        check_2d(data, 'values')
        check_nonempty(data, 'values')
        self._data: NDArray[np.float64] = data

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly computed array without copying it."""
        check_2d(data, 'data')
        check_nonempty(data, 'data')
        mat = cls.__new__(cls)
        mat._data = np.ascontiguousarray(data, dtype=np.float64)
        return mat

    def _replace(self, data: NDArray[np.float64]) -> None:
        """Swap in a fully built replacement buffer."""
        check_2d(data, 'data')
        check_nonempty(data, 'data')
        self._data = np.ascontiguousarray(data, dtype=np.float64)

    # === Shape ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        """Number of columns."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __len__(self) -> int:
        return self.rows

    # === Element access ===

    def _check_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise MatrixIndexError(
                f"Matrix index must be a (row, col) pair, got {key!r}"
            )
        row, col = key
        check_index(row, self.rows, 'row')
        check_index(col, self.cols, 'col')
        return int(row), int(col)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._check_key(key)
        return float(self._data[row, col])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._check_key(key)
        self._data[row, col] = float(value)

    # === Conversion ===

    def to_array(self) -> NDArray[np.float64]:
        """Independent numpy copy of the values."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def allclose(
        self,
        other: Matrix | ArrayLike,
        rtol: float | None = None,
        atol: float | None = None,
        *,
        ill_conditioned: bool = False,
    ) -> bool:
        """
        Shape-equal and elementwise close within (rtol, atol).

        Unset tolerances come from the fp64 tier, or the looser
        ill-conditioned tier when ill_conditioned is True.
        """
        tier = select_tolerance(is_ill_conditioned=ill_conditioned)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        values = other._data if isinstance(other, Matrix) else np.asarray(other, dtype=np.float64)
        if values.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, values, rtol=rtol, atol=atol))

    # === Display ===

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def __str__(self) -> str:
        from pymatrix.matrix.display import format_matrix
        return format_matrix(self)
