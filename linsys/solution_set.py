"""Solution sets of linear systems given as augmented matrices.

Every system of linear equations has either no solution, exactly one, or
infinitely many.  The functions here classify an augmented matrix that is
already in echelon form and write out its general solution::

    >>> m = Matrix.from_rows([[1, 0, 5, 6], [0, 1, -3, 4]])
    >>> get_general_solution(m)
    ['x_1 = 6 - 5x_3', 'x_2 = 4 + 3x_3', 'x_3 is a free variable']
    >>> get_parametric_form(m)
    ['6 - 5x_3', '4 + 3x_3', 'x_3']

The last column always holds the constants; the other columns are the
unknowns ``x_1 .. x_n``.
"""

import logging
from enum import Enum

from sympy import S

from linsys import echelon
from linsys.errors import StructuralError
from linsys.expressions import (
    Equation,
    FreeVariable,
    back_substitute,
    equation_from_row,
    render_line,
    render_rhs,
    variable_name,
)
from linsys.formatting import check_compute_mode, to_rational
from linsys.matrix import Matrix

logger = logging.getLogger(__name__)


class SolutionSetType(str, Enum):
    NO_SOLUTION = "No Solution"
    INFINITE = "Infinite Solutions"
    UNIQUE = "Unique Solution"


class AugmentedSystem:
    """View of a matrix as ``[A | b]``: coefficients plus a constants column."""

    def __init__(self, matrix: Matrix):
        if not isinstance(matrix, Matrix):
            raise StructuralError(f"Expected a Matrix. Received {matrix!r}.")
        if matrix.num_cols < 2:
            raise StructuralError(
                "An augmented matrix needs at least one unknown and a constants column."
            )
        self.matrix = matrix

    @property
    def num_unknowns(self) -> int:
        return self.matrix.num_cols - 1

    @property
    def constants_column(self) -> int:
        return self.matrix.num_cols - 1

    def variable_names(self) -> list:
        return [variable_name(i) for i in range(self.num_unknowns)]

    def coefficient_matrix(self) -> Matrix:
        return Matrix(self.matrix.num_rows, self.num_unknowns,
                      [row[:-1] for row in self.matrix.rows()])

    def constants(self) -> list:
        return self.matrix.get_column(self.constants_column)

    def is_free_variable(self, col: int) -> bool:
        return echelon.is_free_variable(self.matrix, col, is_augmented=True)

    def is_basic_variable(self, col: int) -> bool:
        return echelon.is_basic_variable(self.matrix, col, is_augmented=True)

    def free_variables(self) -> list:
        return [i for i in range(self.num_unknowns) if self.is_free_variable(i)]

    def basic_variables(self) -> list:
        return [i for i in range(self.num_unknowns) if self.is_basic_variable(i)]


def _as_system(matrix) -> AugmentedSystem:
    if isinstance(matrix, AugmentedSystem):
        return matrix
    return AugmentedSystem(matrix)


def get_solution_set_type(matrix) -> SolutionSetType:
    """Classify the solution set of an augmented matrix.

    1. If the constants column is a pivot column while free variables
       exist, the system has no solution (``0 = c`` with ``c != 0``).
    2. If free variables exist and the constants column is not a pivot
       column, there are infinitely many solutions.
    3. Otherwise the solution is unique.

    Free variables are assumed when the coefficient block has a zero row or
    there are more unknowns than equations.
    """
    system = _as_system(matrix)
    m = system.matrix
    coefficients = system.coefficient_matrix()

    has_zero_rows = any(echelon.is_zero_row(coefficients, row)
                        for row in range(coefficients.num_rows))
    has_free_variables = has_zero_rows or system.num_unknowns > m.num_rows
    last_col_is_pivot = echelon.is_pivot_column(m, system.constants_column)

    if last_col_is_pivot and has_free_variables:
        return SolutionSetType.NO_SOLUTION
    if has_free_variables and not last_col_is_pivot:
        return SolutionSetType.INFINITE
    return SolutionSetType.UNIQUE


def solve_lines(matrix) -> list:
    """Symbolic general solution, one line per unknown in index order.

    Returns ``None`` when the system has no solution.

    Raises
    ------
    NotInEchelonFormError
        If the matrix is not in echelon form.
    """
    system = _as_system(matrix)
    m = system.matrix
    echelon.require_echelon_form(m)

    if get_solution_set_type(system) is SolutionSetType.NO_SOLUTION:
        return None

    n = system.num_unknowns
    lines = {}
    for row in range(m.num_rows):
        # x_(row+1) may be free even when this row solves for another unknown
        if row < n and system.is_free_variable(row):
            lines[row] = FreeVariable(row)

        lead = echelon.leading_column(m, row)
        if lead is None:
            continue
        lines[lead] = equation_from_row(m.get_row(row), lead, n)

    lines = back_substitute(lines, n)

    for index in range(n):
        lines.setdefault(index, FreeVariable(index))
    return [lines[index] for index in range(n)]


def get_general_solution(matrix, compute_mode: str = "symbolic",
                         decimal_places: int = 10) -> list:
    """Every unknown written in terms of constants and free variables.

    Returns ``["No Solution"]`` for an inconsistent system.
    """
    check_compute_mode(compute_mode)
    lines = solve_lines(matrix)
    if lines is None:
        return [SolutionSetType.NO_SOLUTION.value]
    return [render_line(line, compute_mode, decimal_places) for line in lines]


def get_parametric_form(matrix, compute_mode: str = "symbolic",
                        decimal_places: int = 10) -> list:
    """Right-hand sides of the general solution (free variables by name)."""
    check_compute_mode(compute_mode)
    lines = solve_lines(matrix)
    if lines is None:
        return [SolutionSetType.NO_SOLUTION.value]
    return [render_rhs(line, compute_mode, decimal_places) for line in lines]


def particular_solution(matrix) -> list:
    """One concrete solution: every free variable set to zero.

    Returns ``None`` when the system has no solution.
    """
    lines = solve_lines(matrix)
    if lines is None:
        return None
    return [line.constant if isinstance(line, Equation) else S.Zero
            for line in lines]


def residuals(matrix, values) -> list:
    """``A x - b`` for each row, computed exactly."""
    system = _as_system(matrix)
    out = []
    for row in system.matrix.rows():
        coefficients = [to_rational(v) for v in row[:-1]]
        lhs = sum((a * x for a, x in zip(coefficients, values)), S.Zero)
        out.append(lhs - to_rational(row[-1]))
    return out
