"""
Matrix data model and the operations that act on it directly.

Submodules:
    matrix: The Matrix class (owned float64 storage, bounds-checked access)
    construct: zeros, ones, identity, random, from_array
    extract: get_row, get_col, copy, get_lower, get_upper, get_submatrix
    arithmetic: add, multiply, transposed
    editing: In-place scale, shift, row/column edits, map
    display: format_matrix, display
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.construct import zeros, ones, identity, random, from_array
from pymatrix.matrix.extract import (
    get_row,
    get_col,
    copy,
    get_lower,
    get_upper,
    get_submatrix,
)
from pymatrix.matrix.arithmetic import add, multiply, transposed
from pymatrix.matrix.editing import (
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
)
from pymatrix.matrix.display import format_matrix, display

__all__ = [
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
]
