"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


DATA_3X3 = [1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square():
    """3x3 integer matrix holding 1..9 row by row."""
    return Matrix.from_data(3, 3, DATA_3X3)


@pytest.fixture
def wide():
    """2x3 integer matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix.from_data(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def tall():
    """3x2 integer matrix [[7, 8], [9, 10], [11, 12]]."""
    return Matrix.from_data(3, 2, [7, 8, 9, 10, 11, 12])


@pytest.fixture
def grid_3x4():
    """3x4 uint8 matrix filled 1..12 by index assignment."""
    mat = Matrix.new(3, 4, dtype=np.uint8)
    value = 1
    for row in range(3):
        for col in range(4):
            mat[row, col] = value
            value += 1
    return mat
