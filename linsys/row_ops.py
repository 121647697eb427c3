"""Elementary row operations, applied in place."""

import math
import numbers

from linsys.errors import InvalidScalarError
from linsys.matrix import Matrix


def _verify_scalar(scalar) -> None:
    if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
        raise InvalidScalarError(f"Cannot scale a row by a non-number: {scalar!r}")
    if isinstance(scalar, float) and not math.isfinite(scalar):
        raise InvalidScalarError(f"Cannot scale a row by {scalar}")
    if scalar == 0:
        raise InvalidScalarError("Cannot scale a row by 0")


def interchange_rows(matrix: Matrix, row_a: int, row_b: int) -> None:
    """Swap two rows."""
    first = matrix.get_row(row_a)
    second = matrix.get_row(row_b)
    matrix.set_row(row_a, second)
    matrix.set_row(row_b, first)


def scale_row(matrix: Matrix, row: int, scalar) -> None:
    """Multiply every entry of *row* by a nonzero *scalar*."""
    _verify_scalar(scalar)
    matrix.set_row(row, [entry * scalar for entry in matrix.get_row(row)])


def add_multiple_of_row(matrix: Matrix, row: int, scalar, add_row: int) -> None:
    """Replace *row* with ``row + scalar * add_row``."""
    _verify_scalar(scalar)
    target = matrix.get_row(row)
    source = matrix.get_row(add_row)
    matrix.set_row(row, [t + scalar * s for t, s in zip(target, source)])


class RowOps:
    """Namespace bundling the three elementary row operations."""

    interchange_rows = staticmethod(interchange_rows)
    scale_row = staticmethod(scale_row)
    add_multiple_of_row = staticmethod(add_multiple_of_row)
