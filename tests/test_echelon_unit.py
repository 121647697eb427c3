import logging

import pytest

from linsys import Matrix, echelon
from linsys.echelon import (
    is_basic_variable,
    is_echelon_form,
    is_free_variable,
    is_non_zero_column,
    is_non_zero_row,
    is_pivot_column,
    is_pivot_element,
    is_reduced_echelon_form,
    is_zero_column,
    is_zero_row,
    leading_column,
    pivot_columns,
)
from linsys.errors import MatrixIndexError, NotInEchelonFormError


@pytest.fixture
def non_zero_matrix() -> Matrix:
    return Matrix.from_rows([[0, 0, 0], [0, 0, 1]])


# ── Zero rows / columns ─────────────────────────────────────────────────

class TestZeroRowsAndColumns:
    def test_zero_rows(self, zero_matrix, non_zero_matrix):
        assert is_zero_row(zero_matrix, 0)
        assert is_zero_row(zero_matrix, 1)
        assert not is_zero_row(non_zero_matrix, 1)
        assert is_non_zero_row(non_zero_matrix, 1)
        assert not is_non_zero_row(zero_matrix, 0)

    def test_zero_columns(self, zero_matrix, non_zero_matrix):
        assert all(is_zero_column(zero_matrix, c) for c in range(3))
        assert not is_zero_column(non_zero_matrix, 2)
        assert is_non_zero_column(non_zero_matrix, 2)
        assert not is_non_zero_column(zero_matrix, 1)

    def test_float_zeros_count_as_zero(self):
        assert is_zero_row(Matrix(1, 2, [0.0, -0.0]), 0)

    @pytest.mark.parametrize("func,index", [
        (is_zero_row, 2), (is_non_zero_row, -1),
        (is_zero_column, 3), (is_non_zero_column, 1.5),
    ])
    def test_out_of_bounds(self, non_zero_matrix, func, index):
        with pytest.raises(MatrixIndexError):
            func(non_zero_matrix, index)


# ── Pivots ───────────────────────────────────────────────────────────────

class TestPivots:
    def test_leading_column(self, five_by_six):
        assert [leading_column(five_by_six, r) for r in range(5)] == [0, 2, 3, None, None]

    def test_pivot_element_is_the_leading_entry(self, five_by_six):
        assert is_pivot_element(five_by_six, 0, 0)
        assert not is_pivot_element(five_by_six, 0, 1)
        assert is_pivot_element(five_by_six, 1, 2)
        assert not is_pivot_element(five_by_six, 1, 4)
        assert not is_pivot_element(five_by_six, 3, 0)

    def test_pivot_element_does_not_need_a_clean_column(self, no_solution):
        # column 4 holds other nonzero constants above the leading 1
        assert is_pivot_element(no_solution, 3, 4)
        assert is_pivot_column(no_solution, 4)

    def test_pivot_columns(self, five_by_six, identity, zero_matrix):
        assert pivot_columns(five_by_six) == [0, 2, 3]
        assert pivot_columns(identity) == [0, 1, 2]
        assert pivot_columns(zero_matrix) == []
        assert is_pivot_column(identity, 1)
        assert not is_pivot_column(five_by_six, 1)

    def test_out_of_bounds(self, identity):
        with pytest.raises(MatrixIndexError):
            is_pivot_element(identity, 3, 0)
        with pytest.raises(MatrixIndexError):
            is_pivot_element(identity, 0, -1)
        with pytest.raises(MatrixIndexError):
            is_pivot_column(identity, 3)


# ── Echelon form ─────────────────────────────────────────────────────────

ECHELON = [
    [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
    [[2, 1, 7, -1, 0, 2, 3], [0, 0, 1, 3, 2, 2, 1], [0, 0, 0, 0, 2, 1, -3], [0, 0, 0, 0, 0, 0, 0]],
    [[1, 2, -1, 4, 8], [0, 9, 5, 2, -5], [0, 0, -7, 2, -5], [0, 0, 0, 0, 1]],
    [[0, 0, 0], [0, 0, 0]],
    [[0, 3, 1]],
]

NOT_ECHELON = [
    [[1, 0, 0], [0, 0, 1], [0, 0, 1]],      # two leading entries in the same column
    [[0, 0, 0], [0, 0, 1]],                 # zero row above a nonzero row
    [[1, 2, 3], [0, 0, 0], [0, 1, 0]],      # zero row in the middle
    [[0, 1, 2], [1, 0, 0]],                 # leading entries move left
    [[1, 2], [3, 4]],                       # nonzero entry below a leading entry
]

REDUCED = [
    [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
    [[1, 0, 5, 6], [0, 1, -3, 4]],
    [[1, 5, 0, 0, 3, 9], [0, 0, 1, 0, -2, -7], [0, 0, 0, 1, 8, 6], [0, 0, 0, 0, 0, 0]],
    [[0, 0, 0], [0, 0, 0]],
]

ECHELON_NOT_REDUCED = [
    [[1, 8, 6], [0, 1, 3]],                 # nonzero entry above a leading 1
    [[2, 0, 1], [0, 1, 3]],                 # leading entry is not 1
    [[1, 2, -1, 4, 8], [0, 9, 5, 2, -5], [0, 0, -7, 2, -5], [0, 0, 0, 0, 1]],
]


@pytest.mark.parametrize("rows", ECHELON)
def test_echelon_form(rows):
    assert is_echelon_form(Matrix.from_rows(rows))


@pytest.mark.parametrize("rows", NOT_ECHELON)
def test_not_echelon_form(rows):
    assert is_echelon_form(Matrix.from_rows(rows)) is False
    assert is_reduced_echelon_form(Matrix.from_rows(rows)) is False


@pytest.mark.parametrize("rows", REDUCED)
def test_reduced_echelon_form(rows):
    m = Matrix.from_rows(rows)
    assert is_reduced_echelon_form(m)
    assert is_echelon_form(m, check_reduced=True)


@pytest.mark.parametrize("rows", ECHELON_NOT_REDUCED)
def test_echelon_but_not_reduced(rows):
    m = Matrix.from_rows(rows)
    assert is_echelon_form(m)
    assert not is_reduced_echelon_form(m)


@pytest.mark.parametrize("rows", ECHELON + NOT_ECHELON + REDUCED + ECHELON_NOT_REDUCED)
def test_reduced_implies_echelon_and_predicates_are_idempotent(rows):
    m = Matrix.from_rows(rows)
    first = (is_echelon_form(m), is_reduced_echelon_form(m))
    assert first == (is_echelon_form(m), is_reduced_echelon_form(m))
    if first[1]:
        assert first[0]


def test_failures_are_logged_not_raised(caplog):
    m = Matrix.from_rows([[0, 0, 0], [0, 0, 1]])
    with caplog.at_level(logging.DEBUG, logger="linsys.echelon"):
        assert is_echelon_form(m) is False
    assert "not in echelon form" in caplog.text


def test_require_echelon_form_raises():
    with pytest.raises(NotInEchelonFormError):
        echelon.require_echelon_form(Matrix.from_rows([[0, 1], [1, 0]]))
    with pytest.raises(NotInEchelonFormError, match="reduced"):
        echelon.require_echelon_form(Matrix.from_rows([[2, 1]]), reduced=True)
    echelon.require_echelon_form(Matrix.from_rows([[2, 1]]))


# ── Free and basic variables ─────────────────────────────────────────────

class TestVariables:
    def test_free_variables(self, zero_matrix, identity):
        assert all(is_free_variable(zero_matrix, c) for c in range(3))
        assert not any(is_free_variable(identity, c) for c in range(3))

    def test_basic_variables(self, zero_matrix, identity):
        assert all(is_basic_variable(identity, c) for c in range(3))
        assert not any(is_basic_variable(zero_matrix, c) for c in range(3))

    def test_augmented_constants_column_is_never_a_variable(self, identity, zero_matrix):
        assert is_free_variable(identity, 0, is_augmented=True) is False
        assert is_basic_variable(identity, 1, is_augmented=True) is True
        assert is_free_variable(identity, 2, is_augmented=True) is False
        assert is_basic_variable(identity, 2, is_augmented=True) is False
        assert is_free_variable(zero_matrix, 2, is_augmented=True) is False

    def test_five_by_six(self, five_by_six):
        free = [c for c in range(5) if is_free_variable(five_by_six, c, True)]
        basic = [c for c in range(5) if is_basic_variable(five_by_six, c, True)]
        assert free == [1, 4]
        assert basic == [0, 2, 3]

    def test_out_of_bounds(self, identity):
        with pytest.raises(MatrixIndexError):
            is_free_variable(identity, 3)
        with pytest.raises(MatrixIndexError):
            is_basic_variable(identity, 3, is_augmented=True)
