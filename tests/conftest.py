import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `linsys`, `backend` and `main` are importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from linsys import Matrix  # noqa: E402


@pytest.fixture
def two_by_three() -> Matrix:
    # x_1 + 8x_2 = 6
    # x_2 = 3
    return Matrix.from_rows([[1, 8, 6], [0, 1, 3]])


@pytest.fixture
def two_by_four() -> Matrix:
    # x_1 + 5x_3 = 6
    # x_2 - 3x_3 = 4
    return Matrix.from_rows([[1, 0, 5, 6], [0, 1, -3, 4]])


@pytest.fixture
def five_by_six() -> Matrix:
    return Matrix.from_rows([
        [1, 5, 0, 0, 3, 9],
        [0, 0, 1, 0, -2, -7],
        [0, 0, 0, 1, 8, 6],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ])


@pytest.fixture
def no_solution() -> Matrix:
    # the last row reads 0 = 1
    return Matrix.from_rows([
        [1, 2, -1, 4, 8],
        [0, 9, 5, 2, -5],
        [0, 0, -7, 2, -5],
        [0, 0, 0, 0, 1],
    ])


@pytest.fixture
def zero_matrix() -> Matrix:
    return Matrix(2, 3)


@pytest.fixture
def identity() -> Matrix:
    return Matrix(3, 3, [[1, 0, 0], [0, 1, 0], [0, 0, 1]])
