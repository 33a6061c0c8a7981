"""
Core infrastructure for densematrix.

Shared abstractions used by the matrix container.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Input validators
    dtypes: Element-type configuration and casting rules
    numerics: Integer overflow diagnostics
"""

from densematrix.core.dtypes import DEFAULT_DTYPE, MAX_ELEMENTS
from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionMismatchError,
    OutOfBoundsError,
    ElementTypeError,
    CapacityOverflowError,
    BorrowError,
    MatrixOverflowWarning,
)

__all__ = [
    # Configuration
    "DEFAULT_DTYPE",
    "MAX_ELEMENTS",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "OutOfBoundsError",
    "ElementTypeError",
    "CapacityOverflowError",
    "BorrowError",
    "MatrixOverflowWarning",
]
