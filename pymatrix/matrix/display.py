"""Text rendering of matrices."""

from pymatrix.matrix.matrix import Matrix


def format_matrix(mat: Matrix, precision: int = 4) -> str:
    """
    Render a matrix as right-aligned fixed-point columns.

    Example:
        >>> print(format_matrix(Matrix([[1, -2.5], [10, 0]]), precision=2))
        [  1.00  -2.50 ]
        [ 10.00   0.00 ]
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    cells = [[f"{value:.{precision}f}" for value in row] for row in mat.to_list()]
    width = max(len(cell) for row in cells for cell in row)
    lines = ["[ " + "  ".join(cell.rjust(width) for cell in row) + " ]" for row in cells]
    return "\n".join(lines)


def display(mat: Matrix, precision: int = 4) -> None:
    """Print the matrix to stdout."""
    print(format_matrix(mat, precision=precision))
