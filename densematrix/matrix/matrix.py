"""
Matrix: generic dense row-major matrix.

A Matrix owns one contiguous 1D NumPy buffer of length rows * cols. The
element at (row, col) lives at offset row * cols + col. Transpose and
matrix multiplication build new matrices; scalar multiplication and index
assignment mutate in place.

Construction:
    Matrix.new(rows, cols, dtype=np.float64)
    Matrix.from_data(rows, cols, data, dtype=None)

Note that dim() returns (cols, rows), the reverse of the constructor
argument order. Use the shape property for (rows, cols).
"""

from __future__ import annotations

import numbers
from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from densematrix.core.dtypes import (
    DEFAULT_DTYPE,
    cast_array,
    cast_scalar,
    check_element_type,
)
from densematrix.core.exceptions import ValidationError
from densematrix.core.numerics import (
    warn_if_matmul_overflows,
    warn_if_scale_overflows,
)
from densematrix.core.validation import (
    check_capacity,
    check_dimension,
    check_flat_data,
    check_multipliable,
)
from densematrix.matrix._format import format_repr, format_rows
from densematrix.matrix._indexing import ElementKey, parse_key
from densematrix.matrix.iterators import (
    ElementRef,
    MatrixIterator,
    MatrixMutIterator,
)
from densematrix.matrix.kernels import matmul_buffer, scale_buffer, transpose_buffer


class Matrix:
    """
    Dense rows x cols matrix over a NumPy numeric dtype.

    Supported operations:
        m[r, c], m[r, c] = v      element read / write
        m[r, a:b], m[r, :]        read-only row slice view
        m.transpose()             new transposed matrix
        m.multiply_by_scalar(s)   in-place scaling, returns m
        m * s, s * m, m *= s      same as multiply_by_scalar
        a * b, a @ b              matrix product (new matrix)
        iter(m), m.iter()         row-major values
        m.iter_mut()              row-major mutable handles
        m.for_each_mut(f)         visitor over mutable handles
        str(m)                    "v v v \\n" per row
    """

    __hash__ = None
    # Make NumPy defer to Matrix for mixed operations such as np.int64(3) * m
    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int, data: NDArray[Any]):
        """
        Wrap an already validated buffer. Use new() or from_data() instead.

        Args:
            rows: Number of rows
            cols: Number of columns
            data: Owned 1D buffer of length rows * cols
        """
        self._rows = rows
        self._cols = cols
        self._data = data
        self._borrow_epoch = 0

    @classmethod
    def new(cls, rows: int, cols: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
        """
        Zero-filled matrix.

        Args:
            rows: Number of rows (non-negative integer)
            cols: Number of columns (non-negative integer)
            dtype: Numeric element dtype

        Raises:
            ValidationError: If rows or cols is not a non-negative integer
            CapacityOverflowError: If rows * cols is too large for one buffer
            ElementTypeError: If dtype is not numeric
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        size = check_capacity(rows, cols)
        dtype = check_element_type(dtype)
        return cls(rows, cols, np.zeros(size, dtype=dtype))

    @classmethod
    def from_data(
        cls,
        rows: int,
        cols: int,
        data: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix holding a copy of a flat row-major sequence.

        Args:
            rows: Number of rows
            cols: Number of columns
            data: Flat sequence of exactly rows * cols numbers
            dtype: Element dtype; inferred from data if None

        Raises:
            ValidationError: If rows or cols is not a non-negative integer
            DimensionMismatchError: If data is not flat or len(data) != rows * cols
            ElementTypeError: If data is non-numeric or does not fit dtype
        """
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        size = check_capacity(rows, cols)
        flat = check_flat_data(data, size, "data")
        return cls(rows, cols, cast_array(flat, dtype, "data"))

    # ------------------------------------------------------------------
    # Shape and metadata
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols), in constructor order."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def dim(self) -> tuple[int, int]:
        """
        Dimensions as (cols, rows).

        The order is the reverse of the constructor's (rows, cols) and of
        the shape property. Existing callers rely on it.
        """
        return (self._cols, self._rows)

    def copy(self) -> Matrix:
        """Independent matrix with its own buffer."""
        return Matrix(self._rows, self._cols, self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """2D (rows, cols) copy of the contents."""
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[Any]]:
        """Contents as nested Python lists, one list per row."""
        return self._data.reshape(self._rows, self._cols).tolist()

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _borrow_mut(self) -> int:
        """Start a new mutable borrow, invalidating all earlier handles."""
        self._borrow_epoch += 1
        return self._borrow_epoch

    def __getitem__(self, key: Any) -> np.generic | NDArray[Any]:
        parsed = parse_key(key, self._rows, self._cols)
        if isinstance(parsed, ElementKey):
            return self._data[parsed.offset(self._cols)]

        base = parsed.row * self._cols
        view = self._data[base + parsed.start:base + parsed.stop]
        view.flags.writeable = False
        return view

    def __setitem__(self, key: Any, value: Any) -> None:
        parsed = parse_key(key, self._rows, self._cols)
        if not isinstance(parsed, ElementKey):
            raise ValidationError("index: row slices are read-only; assign elements by (row, col)")
        element = cast_scalar(value, self._data.dtype, "value")
        self._borrow_mut()
        self._data[parsed.offset(self._cols)] = element

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """New cols x rows matrix with out[j, i] == self[i, j]."""
        data = transpose_buffer(self._data, self._rows, self._cols)
        return Matrix(self._cols, self._rows, data)

    def multiply_by_scalar(self, scalar: Any) -> Matrix:
        """
        Multiply every element by scalar in place.

        Args:
            scalar: Number castable to the matrix dtype (an int for
                integer matrices, a real for floating matrices)

        Returns:
            self, to allow chaining

        Raises:
            ElementTypeError: If scalar cannot be stored in the matrix dtype

        Warns:
            MatrixOverflowWarning: If an integer result may wrap around
        """
        factor = cast_scalar(scalar, self._data.dtype, "scalar")
        warn_if_scale_overflows(self._data, factor)
        self._borrow_mut()
        scale_buffer(self._data, factor)
        return self

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other as a new matrix.

        Requires self.cols == other.rows. Each output element is summed
        over k in increasing order starting from zero.

        Raises:
            DimensionMismatchError: If the inner dimensions differ; the
                error carries both dim() pairs

        Warns:
            MatrixOverflowWarning: If an integer result may wrap around
        """
        check_multipliable(self.dim(), other.dim())
        dtype = np.result_type(self._data.dtype, other._data.dtype)
        warn_if_matmul_overflows(
            self._data.reshape(self._rows, self._cols),
            other._data.reshape(other._rows, other._cols),
            dtype,
        )
        data = matmul_buffer(self._data, other._data, self._rows, self._cols, other._cols)
        return Matrix(self._rows, other._cols, data)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply_by_scalar(other)

    def __rmul__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply_by_scalar(other)

    def __imul__(self, other: Any) -> Matrix:
        return self.__mul__(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iter(self) -> MatrixIterator:
        """Iterator over element values (copies) in row-major order."""
        return MatrixIterator(self)

    def __iter__(self) -> MatrixIterator:
        return self.iter()

    def iter_mut(self) -> MatrixMutIterator:
        """
        Iterator over exclusive element handles in row-major order.

        Starting a mutable iteration invalidates every handle handed out
        before it.
        """
        return MatrixMutIterator(self, self._borrow_mut())

    def for_each_mut(self, visitor: Callable[[ElementRef], Any]) -> None:
        """
        Call visitor once per element, in row-major order.

        Each ElementRef is valid only for the duration of its call; using
        a retained handle afterwards raises BorrowError.
        """
        epoch = self._borrow_mut()
        for offset in range(self._data.size):
            ref = ElementRef(self, offset, epoch)
            try:
                visitor(ref)
            finally:
                ref._release()

    def positions(self) -> Iterator[tuple[int, int]]:
        """(row, col) pairs in row-major order, for index-driven mutation."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield (row, col)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __str__(self) -> str:
        return format_rows(self._data, self._rows, self._cols)

    def __repr__(self) -> str:
        return format_repr(self._data, self._rows, self._cols)
