"""
Element-type configuration and casting rules.

A matrix element type is any NumPy numeric dtype: signed or unsigned
integer, floating point, or complex. These dtypes carry every capability
the container needs (a zero default value, addition, multiplication, and
copy-by-value). bool, object, string and datetime dtypes are rejected.

Casting follows a kind ladder integer < floating < complex: a value may be
stored in a dtype of the same or a higher kind, never a lower one, and
finite values must fit the target range (np.iinfo / np.finfo).
"""

import numbers

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any

from densematrix.core.exceptions import ElementTypeError


# dtype used by Matrix.new when none is given
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Largest element count a single buffer can address
MAX_ELEMENTS: int = int(np.iinfo(np.intp).max)

_KIND_RANK = {'u': 0, 'i': 0, 'f': 1, 'c': 2}


def check_element_type(dtype: DTypeLike, name: str = "dtype") -> np.dtype:
    """
    Validate and normalize an element dtype.
    
    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages
        
    Returns:
        The normalized np.dtype
        
    Raises:
        ElementTypeError: If dtype is not understood or not numeric
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(f"{name}: not a valid dtype: {e}") from e
    
    if result.kind not in _KIND_RANK:
        raise ElementTypeError(
            f"{name}: non-numeric dtype {result}, expected integer, floating or complex",
            dtype=result,
        )
    return result


def default_value(dtype: DTypeLike) -> np.generic:
    """The zero of the given element dtype."""
    dtype = check_element_type(dtype)
    return dtype.type(0)


def _check_integer_range(low: int, high: int, dtype: np.dtype, name: str) -> None:
    info = np.iinfo(dtype)
    if low < info.min or high > info.max:
        raise ElementTypeError(
            f"{name}: values in [{low}, {high}] do not fit {dtype} "
            f"range [{info.min}, {info.max}]",
            dtype=dtype,
        )


def _check_float_range(magnitude: Any, dtype: np.dtype, name: str) -> None:
    # inf and nan are representable in every floating dtype and pass through
    limit = float(np.finfo(dtype).max)
    if magnitude > limit:
        raise ElementTypeError(
            f"{name}: magnitude {magnitude} does not fit {dtype} range (max {limit})",
            dtype=dtype,
        )


def cast_scalar(value: Any, dtype: np.dtype, name: str = "value") -> np.generic:
    """
    Cast a single value to an element of the given dtype.
    
    Python and NumPy numbers are accepted. The value's kind must not rank
    above the dtype's kind, and finite values must fit the dtype's range.
    
    Args:
        value: Scalar to cast
        dtype: Target element dtype (already validated)
        name: Parameter name for error messages
        
    Returns:
        NumPy scalar of the target dtype
        
    Raises:
        ElementTypeError: If the value is not a number or would lose
            information by the cast
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ElementTypeError(
            f"{name}: expected a number, got {type(value).__name__}",
            dtype=dtype,
        )
    
    if isinstance(value, numbers.Integral):
        source_rank = 0
    elif isinstance(value, numbers.Real):
        source_rank = 1
    else:
        source_rank = 2
    
    if source_rank > _KIND_RANK[dtype.kind]:
        raise ElementTypeError(
            f"{name}: cannot store {type(value).__name__} {value!r} in a {dtype} matrix",
            dtype=dtype,
        )
    
    if dtype.kind in 'iu':
        _check_integer_range(int(value), int(value), dtype, name)
    elif isinstance(value, numbers.Integral):
        _check_float_range(abs(int(value)), dtype, name)
    else:
        parts = (value.real, value.imag) if source_rank == 2 else (value,)
        finite = [abs(float(part)) for part in parts if np.isfinite(part)]
        if finite:
            _check_float_range(max(finite), dtype, name)
    
    return dtype.type(value)


def cast_array(
    data: NDArray[Any],
    dtype: DTypeLike | None,
    name: str = "data",
) -> NDArray[Any]:
    """
    Cast an already-converted array to the requested element dtype.
    
    With dtype=None the array's own dtype is kept (after the numeric
    check). An empty array adopts any requested dtype.
    
    Args:
        data: Array to cast
        dtype: Target dtype, or None to infer
        name: Parameter name for error messages
        
    Returns:
        A new array owning its memory
        
    Raises:
        ElementTypeError: If the data is non-numeric or would lose
            information by the cast
    """
    if data.size == 0:
        if dtype is None:
            dtype = data.dtype if data.dtype.kind in _KIND_RANK else DEFAULT_DTYPE
        return np.array(data, dtype=check_element_type(dtype), copy=True)
    
    source = check_element_type(data.dtype, name)
    target = source if dtype is None else check_element_type(dtype, "dtype")
    
    if _KIND_RANK[source.kind] > _KIND_RANK[target.kind]:
        raise ElementTypeError(
            f"{name}: cannot store {source} values in a {target} matrix",
            dtype=target,
        )
    if target.kind in 'iu' and source != target:
        _check_integer_range(int(data.min()), int(data.max()), target, name)
    elif target.kind in 'fc' and source != target:
        parts = (data.real, data.imag) if source.kind == 'c' else (data,)
        for part in parts:
            values = part.astype(np.float64) if part.dtype.kind in 'iu' else part
            finite = values[np.isfinite(values)]
            if finite.size:
                _check_float_range(np.abs(finite).max(), target, name)
    
    return np.array(data, dtype=target, copy=True)
