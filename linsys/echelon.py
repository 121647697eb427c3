"""Echelon-form analysis: zero rows, pivots, free and basic variables.

A *pivot element* is the leading entry of its row, i.e. the first nonzero
entry scanning left to right.  :func:`is_pivot_column` and the free/basic
variable predicates are all defined against that single rule.
"""

import logging

from linsys.errors import NotInEchelonFormError
from linsys.matrix import Matrix, validate_col, validate_row

logger = logging.getLogger(__name__)

_NOT_ECHELON = "Matrix is not in echelon form"


def is_zero_row(matrix: Matrix, row: int) -> bool:
    return all(entry == 0 for entry in matrix.get_row(row))


def is_non_zero_row(matrix: Matrix, row: int) -> bool:
    return not is_zero_row(matrix, row)


def is_zero_column(matrix: Matrix, col: int) -> bool:
    return all(entry == 0 for entry in matrix.get_column(col))


def is_non_zero_column(matrix: Matrix, col: int) -> bool:
    return not is_zero_column(matrix, col)


def leading_column(matrix: Matrix, row: int):
    """Column index of the row's leading entry, or ``None`` for a zero row."""
    for col, entry in enumerate(matrix.get_row(row)):
        if entry != 0:
            return col
    return None


def is_pivot_element(matrix: Matrix, row: int, col: int) -> bool:
    """True iff ``(row, col)`` holds the leading entry of *row*."""
    row = validate_row(row, matrix.num_rows)
    col = validate_col(col, matrix.num_cols)
    return leading_column(matrix, row) == col


def is_pivot_column(matrix: Matrix, col: int) -> bool:
    col = validate_col(col, matrix.num_cols)
    return any(leading_column(matrix, row) == col
               for row in range(matrix.num_rows))


def pivot_columns(matrix: Matrix) -> list:
    """Sorted list of the distinct pivot columns."""
    leads = {leading_column(matrix, row) for row in range(matrix.num_rows)}
    leads.discard(None)
    return sorted(leads)


# ── Structural passes ────────────────────────────────────────────────────

def _check_zero_rows(matrix: Matrix) -> None:
    """Zero rows must form one contiguous block at the bottom.

    Everything below the first zero row has to be zero as well; rows above
    it are nonzero by construction.
    """
    zero_rows = [r for r in range(matrix.num_rows) if is_zero_row(matrix, r)]
    if not zero_rows:
        return

    for row in range(zero_rows[0] + 1, matrix.num_rows):
        if is_non_zero_row(matrix, row):
            raise NotInEchelonFormError(
                f"{_NOT_ECHELON}: nonzero row {row} lies below zero row "
                f"{zero_rows[0]}"
            )


def _check_leading_entries(matrix: Matrix, check_reduced: bool = False) -> None:
    """Leading columns strictly increase and have only zeros below them."""
    previous = -1
    for row in range(matrix.num_rows):
        col = leading_column(matrix, row)
        if col is None:
            continue

        if col <= previous:
            raise NotInEchelonFormError(
                f"{_NOT_ECHELON}: leading entry of row {row} (column {col}) is "
                f"not right of the row above (column {previous})"
            )

        for below in range(row + 1, matrix.num_rows):
            if matrix.get(below, col) != 0:
                raise NotInEchelonFormError(
                    f"{_NOT_ECHELON}: entry ({below}, {col}) below a leading "
                    f"entry is nonzero"
                )

        if check_reduced:
            if matrix.get(row, col) != 1:
                raise NotInEchelonFormError(
                    f"Matrix is not in reduced echelon form: leading entry of "
                    f"row {row} is {matrix.get(row, col)}, not 1"
                )
            others = [r for r in range(matrix.num_rows)
                      if r != row and matrix.get(r, col) != 0]
            if others:
                raise NotInEchelonFormError(
                    f"Matrix is not in reduced echelon form: column {col} has "
                    f"nonzero entries besides the leading 1 of row {row}"
                )

        previous = col


def is_echelon_form(matrix: Matrix, check_reduced: bool = False) -> bool:
    """Return whether *matrix* is in (reduced) row-echelon form.

    This is a predicate: structural violations are reported as ``False`` and
    never raised.
    """
    try:
        _check_zero_rows(matrix)
        _check_leading_entries(matrix, check_reduced)
    except NotInEchelonFormError as exc:
        logger.debug("%s", exc)
        return False
    return True


def is_reduced_echelon_form(matrix: Matrix) -> bool:
    return is_echelon_form(matrix, check_reduced=True)


def require_echelon_form(matrix: Matrix, reduced: bool = False) -> None:
    """Raise :class:`NotInEchelonFormError` unless the form holds."""
    if not is_echelon_form(matrix, check_reduced=reduced):
        kind = "reduced echelon form" if reduced else "echelon form"
        raise NotInEchelonFormError(f"The matrix is not in {kind}")


# ── Variables ────────────────────────────────────────────────────────────

def is_free_variable(matrix: Matrix, col: int, is_augmented: bool = False) -> bool:
    """True iff column *col* is an unknown without a pivot.

    With ``is_augmented`` the last column holds the constants and is never
    a variable, so this returns ``False`` for it.
    """
    col = validate_col(col, matrix.num_cols)
    if is_augmented and col == matrix.num_cols - 1:
        return False
    return not is_pivot_column(matrix, col)


def is_basic_variable(matrix: Matrix, col: int, is_augmented: bool = False) -> bool:
    col = validate_col(col, matrix.num_cols)
    if is_augmented and col == matrix.num_cols - 1:
        return False
    return not is_free_variable(matrix, col, is_augmented)
