"""Number conversion and display helpers shared by the solvers."""

import numbers

from sympy import Rational

COMPUTE_MODES = ("symbolic", "numerical")


def to_rational(value) -> Rational:
    """Convert a matrix entry into an exact SymPy ``Rational``.

    Floats go through their shortest ``repr`` so ``0.1`` becomes ``1/10``
    rather than the binary expansion.
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational(int(value))
    if isinstance(value, numbers.Rational):
        return Rational(int(value.numerator), int(value.denominator))
    if isinstance(value, numbers.Real):
        return Rational(repr(float(value)))
    raise TypeError(f"Cannot convert {value!r} to a rational number.")


def _fmt_num(value: float, max_decimals: int = 10) -> str:
    """Format a float into a clean decimal string.

    - Removes trailing zeros after the decimal point.
    - Uses up to *max_decimals* digits of precision.
    - Returns integers without a decimal point (e.g. ``7`` not ``7.0``).
    """
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    formatted = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return formatted


def check_compute_mode(compute_mode: str) -> str:
    if compute_mode not in COMPUTE_MODES:
        raise ValueError(
            f"Unknown compute mode '{compute_mode}'. "
            f"Expected one of: {', '.join(COMPUTE_MODES)}."
        )
    return compute_mode


def format_number(value, compute_mode: str = "symbolic",
                  decimal_places: int = 10) -> str:
    """Render a number: exact (``-18``, ``3/2``) or as a decimal."""
    if compute_mode == "numerical":
        return _fmt_num(float(value), decimal_places)
    return str(to_rational(value))
