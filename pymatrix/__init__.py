"""
PyMatrix: a small dense-matrix library for Python.

Construction, element access and slicing, arithmetic, LU/QR decomposition
and linear-system solving over two-dimensional float64 matrices.

Submodules:
    matrix: Matrix data model, construction, extraction, arithmetic, editing
    decomposition: LU and QR factorizations
    linalg: Determinant, solve, inverse
    core: Exceptions, validation, result envelope, timing, tolerances
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionMismatchError,
    MatrixIndexError,
    RangeError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    zeros,
    ones,
    identity,
    random,
    from_array,
    get_row,
    get_col,
    copy,
    get_lower,
    get_upper,
    get_submatrix,
    add,
    multiply,
    transposed,
    scale,
    shift,
    set_row,
    set_col,
    remove_row,
    remove_col,
    insert_row,
    insert_col,
    append_rows,
    append_cols,
    map,
    format_matrix,
    display,
)
from pymatrix.decomposition import lu_decompose, qr_decompose
from pymatrix.linalg import det, solve, inverse

__all__ = [
    "__version__",
    # Data model
    "Matrix",
    # Construction
    "zeros",
    "ones",
    "identity",
    "random",
    "from_array",
    # Extraction
    "get_row",
    "get_col",
    "copy",
    "get_lower",
    "get_upper",
    "get_submatrix",
    # Arithmetic
    "add",
    "multiply",
    "transposed",
    # Decomposition
    "lu_decompose",
    "qr_decompose",
    # Linear algebra
    "det",
    "solve",
    "inverse",
    # Editing
    "scale",
    "shift",
    "set_row",
    "set_col",
    "remove_row",
    "remove_col",
    "insert_row",
    "insert_col",
    "append_rows",
    "append_cols",
    "map",
    # Display
    "format_matrix",
    "display",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "MatrixIndexError",
    "RangeError",
    "NumericalError",
    "SingularMatrixError",
]
