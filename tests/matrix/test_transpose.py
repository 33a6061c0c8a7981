"""
Tests for Matrix.transpose.
"""

import numpy as np
import pytest

from densematrix import Matrix


class TestTranspose:

    def test_square(self, square):
        expected = Matrix.from_data(3, 3, [1, 4, 7, 2, 5, 8, 3, 6, 9])
        assert str(square.transpose()) == str(expected)

    def test_rectangular_shape(self, wide):
        result = wide.transpose()
        assert result.shape == (3, 2)
        assert result.dim() == (2, 3)
        assert result.tolist() == [[1, 4], [2, 5], [3, 6]]

    def test_elementwise_definition(self, rng):
        data = rng.integers(-50, 50, size=20)
        mat = Matrix.from_data(4, 5, data)
        result = mat.transpose()
        for i in range(4):
            for j in range(5):
                assert result[j, i] == mat[i, j]

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 7), (7, 1), (3, 5), (0, 3), (3, 0)])
    def test_round_trip(self, rng, rows, cols):
        mat = Matrix.from_data(rows, cols, rng.standard_normal(rows * cols))
        assert mat.transpose().transpose() == mat

    def test_source_not_mutated(self, wide):
        before = wide.tolist()
        wide.transpose()
        assert wide.tolist() == before
        assert wide.shape == (2, 3)

    def test_result_owns_buffer(self, square):
        result = square.transpose()
        result[0, 1] = 100
        assert square[1, 0] == 4

    def test_preserves_dtype(self):
        mat = Matrix.new(2, 3, dtype=np.float32)
        assert mat.transpose().dtype == np.float32
