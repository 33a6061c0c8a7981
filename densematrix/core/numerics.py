"""
Integer overflow diagnostics.

NumPy integer arrays wrap around silently on overflow. Before an integer
product is computed, these helpers evaluate a cheap upper bound on the
magnitude of every result (and every partial sum) in float64 and warn when
the bound leaves the dtype's range. The bound is conservative: a warning
means overflow is possible, silence means it cannot happen.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
from typing import Any

from densematrix.core.exceptions import MatrixOverflowWarning


def _limit(dtype: np.dtype) -> int:
    # |iinfo.min| > iinfo.max for signed types, so max bounds both signs
    return int(np.iinfo(dtype).max)


def warn_if_scale_overflows(
    buffer: NDArray[Any],
    scalar: np.generic,
) -> bool:
    """
    Warn if buffer * scalar may overflow an integer dtype.
    
    Args:
        buffer: Matrix buffer (any dtype; non-integer dtypes are skipped)
        scalar: Scalar already cast to buffer.dtype
        
    Returns:
        True if a warning was emitted
    """
    if buffer.dtype.kind not in 'iu' or buffer.size == 0:
        return False
    
    # Exact Python integers; float64 cannot represent int64 limits
    largest = max(abs(int(buffer.min())), abs(int(buffer.max())))
    bound = largest * abs(int(scalar))
    if bound > _limit(buffer.dtype):
        warnings.warn(
            f"scalar multiplication by {scalar} may overflow {buffer.dtype} "
            f"(magnitude bound {bound:.6g})",
            MatrixOverflowWarning,
            stacklevel=3,
        )
        return True
    return False


def warn_if_matmul_overflows(
    left: NDArray[Any],
    right: NDArray[Any],
    dtype: np.dtype,
) -> bool:
    """
    Warn if the integer product left @ right may overflow dtype.
    
    Args:
        left: 2D left operand
        right: 2D right operand
        dtype: Result dtype of the product
        
    Returns:
        True if a warning was emitted
    """
    if dtype.kind not in 'iu' or left.size == 0 or right.size == 0:
        return False
    
    bound = float((np.abs(left.astype(np.float64)) @ np.abs(right.astype(np.float64))).max())
    # Widen by the worst-case float64 rounding of entries, products and an
    # inner-length sum
    slack = 1.0 + (2.0 * left.shape[1] + 4.0) * np.finfo(np.float64).eps
    if bound * slack >= _limit(dtype):
        warnings.warn(
            f"matrix multiplication may overflow {dtype} (magnitude bound {bound:.6g})",
            MatrixOverflowWarning,
            stacklevel=3,
        )
        return True
    return False
