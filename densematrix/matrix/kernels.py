"""
Buffer-level kernels for the Matrix container.

Every kernel works on flat row-major buffers plus explicit dimensions and
returns a fresh buffer; none of them touches Matrix objects. All follow
these conventions:
    - Inputs are 1D NumPy arrays of length rows * cols
    - Outputs are newly allocated and owned by the caller
    - Dimension checks happen in the caller, not here
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def transpose_buffer(data: NDArray[Any], rows: int, cols: int) -> NDArray[Any]:
    """
    Transpose a rows x cols row-major buffer.
    
    Output offset j * rows + i holds input offset i * cols + j.
    
    Returns:
        New 1D buffer of the same dtype, laid out as cols x rows
    """
    out = np.empty(rows * cols, dtype=data.dtype)
    out.reshape(cols, rows)[...] = data.reshape(rows, cols).T
    return out


def matmul_buffer(
    left: NDArray[Any],
    right: NDArray[Any],
    rows: int,
    inner: int,
    cols: int,
) -> NDArray[Any]:
    """
    Multiply a rows x inner buffer by an inner x cols buffer.
    
    Uses i-k-j loop order, vectorised over j. Each output element is
    accumulated from zero by adding the terms for k = 0, 1, ..., inner - 1
    in that order, so results are identical to the naive triple loop,
    including floating point rounding.
    
    Returns:
        New 1D buffer of length rows * cols, dtype promoted from the inputs
    """
    dtype = np.result_type(left.dtype, right.dtype)
    out = np.zeros((rows, cols), dtype=dtype)
    # Operands share the result dtype so no term is computed in a narrower type
    a = left.astype(dtype, copy=False).reshape(rows, inner)
    b = right.astype(dtype, copy=False).reshape(inner, cols)
    for i in range(rows):
        acc = out[i]
        for k in range(inner):
            acc += a[i, k] * b[k]
    return out.reshape(-1)


def scale_buffer(data: NDArray[Any], scalar: np.generic) -> None:
    """Multiply every element of data by scalar, in place."""
    np.multiply(data, scalar, out=data)
