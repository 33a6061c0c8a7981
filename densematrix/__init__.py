"""
densematrix: generic dense matrices for Python.

A row-major 2D container over NumPy numeric dtypes with element access,
row slicing, transpose, scalar and matrix multiplication, and read-only
and mutable element iteration.

Submodules:
    core: Exceptions, validation, element-type configuration
    matrix: The Matrix container and its iterators
"""

__version__ = "0.1.0"

from densematrix.core import (
    DEFAULT_DTYPE,
    MatrixError,
    ValidationError,
    DimensionMismatchError,
    OutOfBoundsError,
    ElementTypeError,
    CapacityOverflowError,
    BorrowError,
    MatrixOverflowWarning,
)
from densematrix.matrix import (
    Matrix,
    MatrixIterator,
    MatrixMutIterator,
    ElementRef,
)

__all__ = [
    "__version__",
    "DEFAULT_DTYPE",
    "Matrix",
    "MatrixIterator",
    "MatrixMutIterator",
    "ElementRef",
    "MatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "ElementTypeError",
    "CapacityOverflowError",
    "BorrowError",
    "MatrixOverflowWarning",
]
