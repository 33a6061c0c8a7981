"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Non-fatal numerical diagnostics are emitted as
MatrixOverflowWarning through the warnings module.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs (dimensions, data, index keys,
    scalars) fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when matrix-multiply operands have incompatible inner dimensions,
    or when a flat data sequence does not hold exactly rows*cols values.
    
    Attributes:
        expected: The size the operation required
        actual: The size it was given
        left_dim: dim() of the left operand, for binary operations
        right_dim: dim() of the right operand, for binary operations
    """
    
    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        left_dim: tuple[int, int] | None = None,
        right_dim: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.left_dim = left_dim
        self.right_dim = right_dim


class OutOfBoundsError(ValidationError):
    """
    Index or column range exceeds the matrix's declared shape.
    
    Attributes:
        index: The offending index (int) or column range (start, stop)
        bound: The exclusive upper bound for the axis (rows or cols)
        axis: 'row' or 'col'
    """
    
    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ElementTypeError(ValidationError):
    """
    Element type or value is not usable as a matrix element.
    
    Raised for non-numeric dtypes and for values or scalars that cannot
    be cast to the matrix dtype.
    
    Attributes:
        dtype: The dtype involved, if known
    """
    
    def __init__(self, message: str, dtype=None):
        super().__init__(message)
        self.dtype = dtype


class CapacityOverflowError(ValidationError):
    """
    rows * cols exceeds what a single buffer can address.
    
    Attributes:
        rows: Requested number of rows
        cols: Requested number of columns
    """
    
    def __init__(self, message: str, rows: int | None = None, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class BorrowError(MatrixError):
    """
    A mutable element handle or iterator was used after being invalidated.
    
    Mutable handles are valid only until the next mutation of their matrix
    (a new iter_mut(), for_each_mut(), index write, or scalar multiply),
    or, for for_each_mut(), until the visitor call returns.
    """
    pass


class MatrixOverflowWarning(RuntimeWarning):
    """Integer arithmetic may have wrapped around the dtype's range."""
    pass
