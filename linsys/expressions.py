"""Symbolic solution lines and the back-substitution pass.

A general solution is a list of lines, one per unknown.  Each line is either
a :class:`FreeVariable` or an :class:`Equation` ``x_i = c + a_j x_j + ...``
whose right-hand side is kept as exact ``Rational`` coefficients.  Text is
only produced at the very end by :func:`render_line` / :func:`render_rhs`.
"""

import logging
from dataclasses import dataclass, field

from sympy import Rational, S

from linsys.formatting import format_number, to_rational

logger = logging.getLogger(__name__)

IS_A_FREE_VAR = "is a free variable"


def variable_name(index: int) -> str:
    """Display name of the unknown in column *index* (``0`` -> ``x_1``)."""
    return f"x_{index + 1}"


@dataclass(frozen=True)
class FreeVariable:
    index: int

    @property
    def name(self) -> str:
        return variable_name(self.index)


@dataclass
class Equation:
    """``x_index = constant + sum(coef * x_j for j, coef in terms.items())``."""

    index: int
    constant: Rational = S.Zero
    terms: dict = field(default_factory=dict)

    @property
    def name(self) -> str:
        return variable_name(self.index)

    @property
    def is_solved(self) -> bool:
        """True when the right-hand side is a plain number."""
        return not self.terms

    def depends_only_on(self, variables) -> bool:
        return all(j in variables for j in self.terms)

    def substitute(self, other: "Equation") -> "Equation":
        """Replace ``other``'s variable by its right-hand side."""
        terms = dict(self.terms)
        coef = terms.pop(other.index, S.Zero)
        constant = self.constant + coef * other.constant
        for j, c in other.terms.items():
            terms[j] = terms.get(j, S.Zero) + coef * c
        terms = {j: terms[j] for j in sorted(terms) if terms[j] != 0}
        return Equation(self.index, constant, terms)


def equation_from_row(row: list, lead: int, num_unknowns: int) -> Equation:
    """Solve one augmented row for the unknown in its leading column.

    The row is divided by its leading coefficient and every other nonzero
    unknown moves to the right-hand side with its sign flipped.
    """
    values = [to_rational(v) for v in row]
    pivot = values[lead]
    constant = values[num_unknowns] / pivot
    terms = {
        j: -values[j] / pivot
        for j in range(num_unknowns)
        if j != lead and values[j] != 0
    }
    return Equation(lead, constant, terms)


def back_substitute(lines: dict, num_unknowns: int) -> dict:
    """Collapse chains between basic variables, repeated to a fixed point.

    An equation is *resolved* once its right-hand side mentions free
    variables only.  Each pass substitutes every resolved equation into the
    lines that still reference it; the loop stops when a pass changes
    nothing.  Returns a new ``{index: line}`` mapping.
    """
    lines = dict(lines)
    basic = {i for i, line in lines.items() if isinstance(line, Equation)}
    free = set(range(num_unknowns)) - basic

    for passes in range(num_unknowns + 1):
        resolved = {
            i: line for i, line in lines.items()
            if isinstance(line, Equation) and line.depends_only_on(free)
        }
        changed = False
        for i, line in lines.items():
            if not isinstance(line, Equation):
                continue
            targets = [j for j in line.terms if j in resolved and j != i]
            if not targets:
                continue
            for j in targets:
                line = line.substitute(resolved[j])
            lines[i] = line
            changed = True
        if not changed:
            logger.debug("back-substitution settled after %d pass(es)", passes)
            break
    return lines


def render_rhs(line, compute_mode: str = "symbolic",
               decimal_places: int = 10) -> str:
    """Right-hand side only: ``6 - 5x_3`` or the free variable's name."""
    if isinstance(line, FreeVariable):
        return line.name
    text = format_number(line.constant, compute_mode, decimal_places)
    for j, coef in line.terms.items():
        op = "-" if coef < 0 else "+"
        magnitude = format_number(abs(coef), compute_mode, decimal_places)
        text += f" {op} {magnitude}{variable_name(j)}"
    return text


def render_line(line, compute_mode: str = "symbolic",
                decimal_places: int = 10) -> str:
    if isinstance(line, FreeVariable):
        return f"{line.name} {IS_A_FREE_VAR}"
    return f"{line.name} = {render_rhs(line, compute_mode, decimal_places)}"
