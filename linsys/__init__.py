"""linsys: echelon-form analysis and symbolic solutions of linear systems."""

from linsys.errors import (
    LinsysError,
    StructuralError,
    MatrixIndexError,
    PreconditionError,
    NotInEchelonFormError,
    InvalidScalarError,
)
from linsys.matrix import Matrix
from linsys.row_ops import RowOps
from linsys.echelon import (
    is_zero_row,
    is_non_zero_row,
    is_zero_column,
    is_non_zero_column,
    leading_column,
    is_pivot_element,
    is_pivot_column,
    pivot_columns,
    is_echelon_form,
    is_reduced_echelon_form,
    is_free_variable,
    is_basic_variable,
)
from linsys.solution_set import (
    AugmentedSystem,
    SolutionSetType,
    get_solution_set_type,
    get_general_solution,
    get_parametric_form,
)
from linsys.trail import analyze_system

__all__ = [
    "LinsysError",
    "StructuralError",
    "MatrixIndexError",
    "PreconditionError",
    "NotInEchelonFormError",
    "InvalidScalarError",
    "Matrix",
    "RowOps",
    "is_zero_row",
    "is_non_zero_row",
    "is_zero_column",
    "is_non_zero_column",
    "leading_column",
    "is_pivot_element",
    "is_pivot_column",
    "pivot_columns",
    "is_echelon_form",
    "is_reduced_echelon_form",
    "is_free_variable",
    "is_basic_variable",
    "AugmentedSystem",
    "SolutionSetType",
    "get_solution_set_type",
    "get_general_solution",
    "get_parametric_form",
    "analyze_system",
]
