"""Step-by-step analysis of an augmented matrix.

:func:`analyze_system` returns the same trail layout the equation solvers
use (``given``, ``method``, numbered ``steps``, ``final_answer``,
``verification_steps`` and a ``summary``) so presentation layers can show
how the classification and the general solution were reached.
"""

import logging
import time
from datetime import datetime

import numpy as np
import sympy

from linsys import echelon
from linsys.expressions import render_line, render_rhs, variable_name
from linsys.formatting import _fmt_num, check_compute_mode, format_number
from linsys.matrix import Matrix
from linsys.solution_set import (
    AugmentedSystem,
    SolutionSetType,
    get_solution_set_type,
    particular_solution,
    residuals,
    solve_lines,
)

logger = logging.getLogger(__name__)


def _format_row(row: list, compute_mode: str, decimal_places: int) -> str:
    cells = [format_number(v, compute_mode, decimal_places) for v in row]
    return "[" + "  ".join(cells[:-1]) + " | " + cells[-1] + "]"


def _format_equation(row: list, names: list, compute_mode: str,
                     decimal_places: int) -> str:
    """Render one augmented row as ``x_1 + 2x_2 = 3``."""
    parts = []
    for coef, name in zip(row[:-1], names):
        if coef == 0:
            continue
        magnitude = format_number(abs(coef), compute_mode, decimal_places)
        magnitude = "" if magnitude == "1" else magnitude
        if not parts:
            parts.append(f"{'-' if coef < 0 else ''}{magnitude}{name}")
        else:
            parts.append(f"{'-' if coef < 0 else '+'} {magnitude}{name}")
    lhs = " ".join(parts) if parts else "0"
    return f"{lhs} = {format_number(row[-1], compute_mode, decimal_places)}"


def _join_names(indices: list) -> str:
    return ", ".join(variable_name(i) for i in indices) if indices else "none"


def _verify(system: AugmentedSystem, compute_mode: str,
            decimal_places: int) -> tuple:
    """Plug the particular solution back into every equation."""
    values = particular_solution(system)
    names = system.variable_names()
    rows = system.matrix.rows()
    verification_steps = [{
        "description": "Substitute a particular solution into every equation",
        "expression": ", ".join(
            f"{n} = {format_number(v, compute_mode, decimal_places)}"
            for n, v in zip(names, values)
        ),
        "explanation": "Every free variable is set to 0; the basic variables "
                       "take the constants of the general solution.",
    }]

    if compute_mode == "numerical":
        a = system.matrix.to_numpy()
        x = np.array([float(v) for v in values], dtype=float)
        diffs = a[:, :-1] @ x - a[:, -1]
        oks = [bool(ok) for ok in np.isclose(diffs, 0.0)]
        shown = [_fmt_num(float(d), decimal_places) for d in diffs]
    else:
        diffs = residuals(system, values)
        oks = [d == 0 for d in diffs]
        shown = [str(d) for d in diffs]

    for i, (row, ok, diff) in enumerate(zip(rows, oks, shown), start=1):
        verification_steps.append({
            "description": f"Equation ({i}): "
                           f"{_format_equation(row, names, compute_mode, decimal_places)}",
            "expression": f"LHS - RHS = {diff}  →  {'✓' if ok else '✗'}",
            "explanation": ("Both sides agree." if ok
                            else "Sides differ; the matrix may be inconsistent."),
        })
    all_ok = all(oks)
    verification_steps.append({
        "description": "All equations verified" if all_ok else "Verification failed",
        "expression": ("All equations satisfied  ✓" if all_ok
                       else "Some equations are not satisfied  ✗"),
        "explanation": ("The general solution is consistent with the system."
                        if all_ok else "Please check the input matrix."),
    })
    return verification_steps, all_ok


def analyze_system(matrix: Matrix, compute_mode: str = "symbolic",
                   decimal_places: int = 10) -> dict:
    """Classify an augmented matrix and derive its general solution.

    Parameters
    ----------
    matrix : Matrix
        Augmented matrix ``[A | b]``.
    compute_mode : str, optional
        ``"symbolic"`` (default): exact rationals.
        ``"numerical"``: decimal approximations.

    Returns
    -------
    dict
        Trail-format result.  A matrix that is not in echelon form gives a
        trail with ``validation_status == "fail"`` instead of an exception.
    """
    t_start = time.perf_counter()
    check_compute_mode(compute_mode)
    system = AugmentedSystem(matrix)
    m = system.matrix
    names = system.variable_names()
    rows = m.rows()

    equations = [_format_equation(r, names, compute_mode, decimal_places) for r in rows]
    steps = []

    steps.append({
        "description": "Starting with the augmented matrix",
        "expression": "\n".join(_format_row(r, compute_mode, decimal_places) for r in rows),
        "explanation": (
            f"The matrix has {m.num_rows} row{'s' if m.num_rows != 1 else ''} "
            f"and {m.num_cols} columns: {system.num_unknowns} "
            f"unknown{'s' if system.num_unknowns != 1 else ''} plus the "
            f"constants column."
        ),
    })

    in_echelon = echelon.is_echelon_form(m)
    in_reduced = in_echelon and echelon.is_reduced_echelon_form(m)
    form = ("reduced echelon form" if in_reduced
            else "echelon form" if in_echelon else "not in echelon form")
    steps.append({
        "description": "Check the echelon form",
        "expression": f"Matrix is {form}" if in_echelon else "Matrix is not in echelon form",
        "explanation": (
            "Zero rows trail the nonzero rows and every leading entry lies "
            "strictly right of the one above it, with zeros below it."
            if in_echelon else
            "Either a zero row sits above a nonzero row, or a leading entry "
            "is not strictly right of the leading entry above it."
        ),
    })

    verification_steps = []
    validation_status = "fail"
    solution_type = None
    general, parametric = [], []

    if not in_echelon:
        final_answer = "The matrix must be in echelon form before it can be solved."
    else:
        pivots = [c for c in echelon.pivot_columns(m) if c < system.num_unknowns]
        steps.append({
            "description": "Locate the pivot columns",
            "expression": (
                "Pivot columns: " + ", ".join(str(c + 1) for c in pivots)
                if pivots else "No pivot columns among the unknowns"
            ),
            "explanation": "A pivot is the leading (first nonzero) entry of a row.",
        })
        steps.append({
            "description": "Classify the variables",
            "expression": (
                f"Basic: {_join_names(system.basic_variables())}\n"
                f"Free: {_join_names(system.free_variables())}"
            ),
            "explanation": (
                "Unknowns in pivot columns are basic; every other unknown is "
                "free and can take any value."
            ),
        })

        solution_type = get_solution_set_type(system)
        steps.append({
            "description": "Determine the type of solution set",
            "expression": solution_type.value,
            "explanation": {
                SolutionSetType.NO_SOLUTION:
                    "The constants column is a pivot column: some row reads 0 = c "
                    "with c ≠ 0.",
                SolutionSetType.INFINITE:
                    "There are free variables and the constants column is not a "
                    "pivot column.",
                SolutionSetType.UNIQUE:
                    "There are no free variables and the constants column is not "
                    "a pivot column.",
            }[solution_type],
        })

        if solution_type is SolutionSetType.NO_SOLUTION:
            general = parametric = [SolutionSetType.NO_SOLUTION.value]
            final_answer = SolutionSetType.NO_SOLUTION.value
            validation_status = "pass"
        else:
            lines = solve_lines(system)
            general = [render_line(line, compute_mode, decimal_places) for line in lines]
            parametric = [render_rhs(line, compute_mode, decimal_places) for line in lines]
            steps.append({
                "description": "Write the general solution",
                "expression": "\n".join(general),
                "explanation": (
                    "Each basic variable is solved from its pivot row; known "
                    "values are substituted back until only free variables remain."
                ),
            })
            steps.append({
                "description": "Parametric form",
                "expression": "(" + ", ".join(parametric) + ")",
                "explanation": "The right-hand sides of the general solution.",
            })
            final_answer = "\n".join(general)
            verification_steps, ok = _verify(system, compute_mode, decimal_places)
            validation_status = "pass" if ok else "fail"

    for i, step in enumerate(steps, start=1):
        step["step_number"] = i
    for i, step in enumerate(verification_steps, start=1):
        step["step_number"] = i

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)
    logger.info("analyzed %dx%d matrix: %s in %.2f ms", m.num_rows, m.num_cols,
                solution_type.value if solution_type else "not in echelon form",
                runtime_ms)

    return {
        "equation": "\n".join(equations),
        "given": {
            "problem": "Solve the linear system given by the augmented matrix",
            "inputs": {
                "matrix": rows,
                "equations": equations,
                "number_of_equations": str(m.num_rows),
                "variables": ", ".join(names),
                "number_of_variables": str(system.num_unknowns),
                "computation": ("Numerical (NumPy)" if compute_mode == "numerical"
                                else "Symbolic (SymPy)"),
            },
        },
        "method": {
            "name": "Echelon Form Analysis",
            "description": (
                "Validate the echelon form, classify the variables, then solve "
                "each pivot row and back-substitute."
            ),
            "parameters": {
                "equation_type": (
                    f"System of {m.num_rows} linear equation"
                    f"{'s' if m.num_rows != 1 else ''}"
                ),
                "variables": ", ".join(names),
                "approach": "Check form → Pivots → Classify → Solve → Back-substitute",
            },
        },
        "solution_type": solution_type.value if solution_type else None,
        "is_echelon_form": in_echelon,
        "is_reduced_echelon_form": in_reduced,
        "general_solution": general,
        "parametric_form": parametric,
        "steps": steps,
        "final_answer": final_answer,
        "verification_steps": verification_steps,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": validation_status,
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": (f"NumPy {np.__version__}" if compute_mode == "numerical"
                        else f"SymPy {sympy.__version__}"),
        },
    }
