"""Row-major matrix used as the shared data structure of linsys.

The shape is fixed at construction; the content may be changed in place with
:meth:`Matrix.set` or by the row operations in :mod:`linsys.row_ops`.
"""

import math
import numbers

import numpy as np

from linsys.errors import MatrixIndexError, StructuralError


def _is_real(value) -> bool:
    """True for finite real numbers, excluding bools (which are ints in Python)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _validate_dimension(value, label: str) -> int:
    if not _is_index(value) or value < 1:
        raise StructuralError(
            f"Number of {label} must be a positive integer. Received {value!r}."
        )
    return int(value)


def validate_row(row, num_rows: int) -> int:
    """Return *row* as an int, or raise :class:`MatrixIndexError`."""
    if not _is_index(row):
        raise MatrixIndexError(f"Row must be an integer. Received {row!r}.")
    if row < 0 or row >= num_rows:
        raise MatrixIndexError(f"Row {row} is out of bounds.")
    return int(row)


def validate_col(col, num_cols: int) -> int:
    """Return *col* as an int, or raise :class:`MatrixIndexError`."""
    if not _is_index(col):
        raise MatrixIndexError(f"Column must be an integer. Received {col!r}.")
    if col < 0 or col >= num_cols:
        raise MatrixIndexError(f"Column {col} is out of bounds.")
    return int(col)


def _flatten(values) -> list:
    """Flatten one level of nesting (or a numpy array of any shape)."""
    if isinstance(values, np.ndarray):
        return values.ravel().tolist()
    if not isinstance(values, (list, tuple)):
        raise StructuralError(
            f"Matrix values must be a list, tuple or ndarray. Received {values!r}."
        )
    flat = []
    for item in values:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        elif isinstance(item, np.ndarray):
            flat.extend(item.ravel().tolist())
        else:
            flat.append(item)
    return flat


class Matrix:
    """A ``num_rows`` x ``num_cols`` grid of real numbers.

    Parameters
    ----------
    num_rows, num_cols : int
        Positive dimensions.
    values : sequence, optional
        Flat or nested (one level) sequence, or an ``ndarray``, holding
        ``num_rows * num_cols`` real numbers in row-major order.  When
        omitted the matrix is filled with zeros.

    Raises
    ------
    StructuralError
        On bad dimensions, non-numeric entries or a wrong element count.
    """

    def __init__(self, num_rows: int, num_cols: int, values=None):
        self.num_rows = _validate_dimension(num_rows, "rows")
        self.num_cols = _validate_dimension(num_cols, "columns")
        size = self.num_rows * self.num_cols

        if values is None:
            self._entries = [0] * size
            return

        flat = _flatten(values)
        bad = [v for v in flat if not _is_real(v)]
        if bad:
            raise StructuralError(
                f"Matrix elements must contain only finite real numbers. Received {bad[0]!r}."
            )
        if len(flat) != size:
            raise StructuralError(
                f"Matrix must contain {size} elements. Received {len(flat)}."
            )
        self._entries = list(flat)

    @classmethod
    def from_rows(cls, rows) -> "Matrix":
        """Build a matrix from a list of equally long rows."""
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise StructuralError("A 2-D array is required to build a matrix.")
            return cls(rows.shape[0], rows.shape[1], rows)
        if not isinstance(rows, (list, tuple)) or not rows:
            raise StructuralError("A matrix needs at least one row.")
        if not all(isinstance(r, (list, tuple)) for r in rows):
            raise StructuralError("Every row must be a list of numbers.")
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise StructuralError(
                f"All rows must have the same length. Received lengths {sorted(widths)}."
            )
        return cls(len(rows), widths.pop(), rows)

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def shape(self) -> tuple:
        return self.num_rows, self.num_cols

    @property
    def entries(self) -> tuple:
        """Row-major snapshot of every entry."""
        return tuple(self._entries)

    def get(self, row: int, col: int):
        row = validate_row(row, self.num_rows)
        col = validate_col(col, self.num_cols)
        return self._entries[row * self.num_cols + col]

    def set(self, row: int, col: int, value) -> None:
        row = validate_row(row, self.num_rows)
        col = validate_col(col, self.num_cols)
        if not _is_real(value):
            raise StructuralError(f"Value must be a finite real number. Received {value!r}.")
        self._entries[row * self.num_cols + col] = value

    def get_row(self, row: int) -> list:
        row = validate_row(row, self.num_rows)
        start = row * self.num_cols
        return self._entries[start:start + self.num_cols]

    def get_column(self, col: int) -> list:
        col = validate_col(col, self.num_cols)
        return self._entries[col::self.num_cols]

    def set_row(self, row: int, values) -> None:
        """Replace a whole row (used by the row operations)."""
        row = validate_row(row, self.num_rows)
        values = list(values)
        if len(values) != self.num_cols:
            raise StructuralError(
                f"Row must contain {self.num_cols} elements. Received {len(values)}."
            )
        if not all(_is_real(v) for v in values):
            raise StructuralError("Row elements must contain only finite real numbers.")
        start = row * self.num_cols
        self._entries[start:start + self.num_cols] = values

    def rows(self) -> list:
        return [self.get_row(r) for r in range(self.num_rows)]

    def clone(self) -> "Matrix":
        return Matrix(self.num_rows, self.num_cols, list(self._entries))

    def to_numpy(self) -> np.ndarray:
        """Float copy of the matrix, for numerical work."""
        return np.array([[float(v) for v in row] for row in self.rows()],
                        dtype=float)

    # ── Dunder helpers ───────────────────────────────────────────────

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    def __repr__(self) -> str:
        return f"Matrix({self.num_rows}, {self.num_cols}, {self.rows()!r})"

    def __str__(self) -> str:
        cells = [[str(v) for v in row] for row in self.rows()]
        width = max(len(c) for row in cells for c in row)
        return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)
