"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation or padding of data
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.dtypes import MAX_ELEMENTS
from densematrix.core.exceptions import (
    CapacityOverflowError,
    DimensionMismatchError,
    ElementTypeError,
    OutOfBoundsError,
    ValidationError,
)


def check_index(value: Any, name: str) -> int:
    """
    Validate that value is an integer usable as an index or dimension.
    
    Accepts Python ints and NumPy integers (anything implementing
    __index__) but rejects bool, which is almost always a mistake.
    
    Args:
        value: Value to validate
        name: Parameter name for error messages
        
    Returns:
        The value as a Python int
        
    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (rows or cols).
    
    Args:
        value: Candidate dimension
        name: Parameter name for error messages
        
    Returns:
        The dimension as a Python int
        
    Raises:
        ValidationError: If value is not a non-negative integer
    """
    result = check_index(value, name)
    if result < 0:
        raise ValidationError(f"{name}: must be non-negative, got {result}")
    return result


def check_capacity(rows: int, cols: int) -> int:
    """
    Verify rows * cols fits in a single addressable buffer.
    
    Args:
        rows: Validated row count
        cols: Validated column count
        
    Returns:
        The element count rows * cols
        
    Raises:
        CapacityOverflowError: If the element count exceeds MAX_ELEMENTS
    """
    size = rows * cols
    if size > MAX_ELEMENTS:
        raise CapacityOverflowError(
            f"rows * cols = {rows} * {cols} = {size} exceeds the maximum "
            f"buffer size {MAX_ELEMENTS}",
            rows=rows,
            cols=cols,
        )
    return size


def check_flat_data(data: ArrayLike, size: int, name: str) -> NDArray[Any]:
    """
    Convert a flat sequence to an array and verify its length.
    
    Args:
        data: Flat sequence of values
        size: Required number of values (rows * cols)
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray view or copy of data (not yet cast)
        
    Raises:
        ElementTypeError: If data cannot be converted to an array
        DimensionMismatchError: If data is not 1D or has the wrong length
    """
    try:
        result = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ElementTypeError(f"{name}: cannot convert to array: {e}") from e
    
    if result.ndim != 1:
        raise DimensionMismatchError(
            f"{name}: expected a flat 1D sequence, got {result.ndim}D with shape {result.shape}"
        )
    
    if result.shape[0] != size:
        raise DimensionMismatchError(
            f"{name}: expected {size} values (rows * cols), got {result.shape[0]}",
            expected=size,
            actual=result.shape[0],
        )
    return result


def check_in_bounds(index: int, bound: int, axis: str) -> None:
    """
    Verify 0 <= index < bound.
    
    Args:
        index: Row or column index
        bound: Number of rows or columns
        axis: 'row' or 'col', for error messages
        
    Raises:
        OutOfBoundsError: If index is outside [0, bound)
    """
    if not 0 <= index < bound:
        raise OutOfBoundsError(
            f"{axis} index {index} out of bounds for {bound} {axis}s",
            index=index,
            bound=bound,
            axis=axis,
        )


def check_range_in_bounds(start: int, stop: int, bound: int, axis: str) -> None:
    """
    Verify 0 <= start <= stop <= bound for a half-open range.
    
    Raises:
        OutOfBoundsError: If the range is reversed or leaves [0, bound]
    """
    if not 0 <= start <= stop <= bound:
        raise OutOfBoundsError(
            f"{axis} range {start}..{stop} out of bounds for {bound} {axis}s",
            index=(start, stop),
            bound=bound,
            axis=axis,
        )


def check_multipliable(
    left_dim: tuple[int, int],
    right_dim: tuple[int, int],
) -> None:
    """
    Verify two matrices can be multiplied (left.cols == right.rows).
    
    Dimension pairs are in dim() order, (cols, rows), and are reported in
    that order.
    
    Args:
        left_dim: dim() of the left operand
        right_dim: dim() of the right operand
        
    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    left_cols = left_dim[0]
    right_rows = right_dim[1]
    if left_cols != right_rows:
        raise DimensionMismatchError(
            "Wrong dimensions. Try transposing one of matrix.\n"
            f"Dims: mat1 - {left_dim} != mat2 - {right_dim}",
            expected=left_cols,
            actual=right_rows,
            left_dim=left_dim,
            right_dim=right_dim,
        )
