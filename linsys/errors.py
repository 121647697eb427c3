"""Exception types raised by the linsys package.

Every error is synchronous and final: nothing here is retried.  The classes
also derive from the matching built-in exception so callers that only know
about ``ValueError`` / ``IndexError`` keep working.
"""


class LinsysError(Exception):
    """Base class for every error raised by linsys."""


class StructuralError(LinsysError, ValueError):
    """Invalid matrix shape or content (dimensions, entries, element count)."""


class MatrixIndexError(LinsysError, IndexError):
    """A row or column argument is not an integer or lies out of bounds."""


class PreconditionError(LinsysError, ValueError):
    """The operation needs a property the matrix does not have."""


class NotInEchelonFormError(PreconditionError):
    """The matrix is not in (reduced) echelon form."""


class InvalidScalarError(LinsysError, ArithmeticError):
    """A zero, non-finite or non-numeric scalar was given to a row operation."""
