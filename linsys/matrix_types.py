"""Matrix-type identification and small whole-matrix utilities."""

import math
import numbers
from enum import Enum

from linsys.errors import InvalidScalarError, PreconditionError
from linsys.matrix import Matrix


class MatrixType(str, Enum):
    ZERO = "ZeroMatrix"
    COLUMN = "ColumnMatrix"
    ROW = "RowMatrix"
    SQUARE = "SquareMatrix"
    DIAGONAL = "DiagonalMatrix"
    IDENTITY = "IdentityMatrix"
    NOT_SPECIAL = "NotSpecial"


def is_zero_matrix(matrix: Matrix) -> bool:
    return all(entry == 0 for entry in matrix.entries)


def is_column_matrix(matrix: Matrix) -> bool:
    return matrix.num_cols == 1 and matrix.num_rows > 1


def is_row_matrix(matrix: Matrix) -> bool:
    return matrix.num_rows == 1 and matrix.num_cols > 1


def is_square_matrix(matrix: Matrix) -> bool:
    return matrix.num_rows == matrix.num_cols


def is_diagonal_matrix(matrix: Matrix) -> bool:
    if not is_square_matrix(matrix):
        return False
    return all(
        matrix.get(r, c) == 0
        for r in range(matrix.num_rows)
        for c in range(matrix.num_cols)
        if r != c
    )


def is_identity_matrix(matrix: Matrix) -> bool:
    if not is_diagonal_matrix(matrix):
        return False
    return all(matrix.get(i, i) == 1 for i in range(matrix.num_rows))


def identify_matrix_type(matrix: Matrix) -> MatrixType:
    """Return the most specific :class:`MatrixType` that applies."""
    if is_zero_matrix(matrix):
        return MatrixType.ZERO
    if is_column_matrix(matrix):
        return MatrixType.COLUMN
    if is_row_matrix(matrix):
        return MatrixType.ROW
    if is_square_matrix(matrix):
        if is_identity_matrix(matrix):
            return MatrixType.IDENTITY
        if is_diagonal_matrix(matrix):
            return MatrixType.DIAGONAL
        return MatrixType.SQUARE
    return MatrixType.NOT_SPECIAL


def trace(matrix: Matrix):
    if not is_square_matrix(matrix):
        raise PreconditionError("trace only works on square matrices")
    return sum(matrix.get(i, i) for i in range(matrix.num_rows))


def transpose(matrix: Matrix) -> Matrix:
    return Matrix(matrix.num_cols, matrix.num_rows,
                  [matrix.get_column(c) for c in range(matrix.num_cols)])


def scale(matrix: Matrix, scalar) -> Matrix:
    """Return a new matrix with every entry multiplied by *scalar*.

    Unlike :func:`linsys.row_ops.scale_row` a zero scalar is allowed here;
    the scalar only has to be a finite real number.
    """
    if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
        raise InvalidScalarError("The scalar must be a number")
    if not math.isfinite(scalar):
        raise InvalidScalarError("The scalar must be a finite number")
    return Matrix(matrix.num_rows, matrix.num_cols,
                  [entry * scalar for entry in matrix.entries])
