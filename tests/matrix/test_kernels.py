"""
Tests for buffer-level kernels.
"""

import numpy as np

from densematrix.matrix.kernels import matmul_buffer, scale_buffer, transpose_buffer


class TestTransposeBuffer:

    def test_layout(self):
        data = np.arange(6)
        np.testing.assert_array_equal(transpose_buffer(data, 2, 3), [0, 3, 1, 4, 2, 5])

    def test_new_buffer(self):
        data = np.arange(4)
        out = transpose_buffer(data, 2, 2)
        out[0] = 99
        assert data[0] == 0


class TestMatmulBuffer:

    def test_known_product(self):
        left = np.array([1, 2, 3, 4, 5, 6])
        right = np.array([7, 8, 9, 10, 11, 12])
        np.testing.assert_array_equal(matmul_buffer(left, right, 2, 3, 2), [58, 64, 139, 154])

    def test_result_is_flat(self):
        out = matmul_buffer(np.ones(6), np.ones(6), 2, 3, 2)
        assert out.ndim == 1
        assert out.shape == (4,)

    def test_promotes_dtype(self):
        out = matmul_buffer(np.ones(1, dtype=np.int8), np.ones(1, dtype=np.float32), 1, 1, 1)
        assert out.dtype == np.float32


class TestScaleBuffer:

    def test_in_place(self):
        data = np.array([1.0, 2.0])
        scale_buffer(data, np.float64(3.0))
        np.testing.assert_array_equal(data, [3.0, 6.0])


class TestMatmulBufferMixedDtypes:

    def test_narrow_operand_promoted_before_multiplying(self):
        out = matmul_buffer(
            np.array([1000], dtype=np.int64),
            np.array([100], dtype=np.int8),
            1, 1, 1,
        )
        assert out.dtype == np.int64
        assert out[0] == 100000
