"""
Element iterators for Matrix.

Read iteration yields copies of element values. Mutable iteration yields
ElementRef handles that write through to the matrix buffer.

Exclusivity of mutable handles is enforced dynamically with a borrow epoch
kept on the matrix: every mutating entry point (iter_mut, for_each_mut,
index writes, scalar multiplication) advances the epoch, and a handle or
iterator whose epoch is no longer current raises BorrowError. Within one
mutable iteration every element is yielded exactly once, so no element is
ever reachable through two live handles.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np

from densematrix.core.dtypes import cast_scalar
from densematrix.core.exceptions import BorrowError

if TYPE_CHECKING:
    from densematrix.matrix.matrix import Matrix


class MatrixIterator:
    """
    Forward-only iterator over element values in row-major order.

    Not restartable: __iter__ returns the iterator itself, and once
    exhausted it stays exhausted.
    """

    def __init__(self, matrix: Matrix):
        self._data = matrix._data
        self._position = 0

    def __iter__(self) -> MatrixIterator:
        return self

    def __next__(self) -> np.generic:
        if self._position >= self._data.size:
            raise StopIteration
        value = self._data[self._position]
        self._position += 1
        return value

    def __length_hint__(self) -> int:
        return max(self._data.size - self._position, 0)


class ElementRef:
    """
    Exclusive handle to one matrix element.

    The handle reads and writes the element in place while its borrow is
    live. Writes are cast to the matrix dtype with the same rules as index
    assignment.

    Attributes:
        row: Row of the element
        col: Column of the element
        offset: Row-major buffer offset, row * cols + col
    """

    def __init__(self, matrix: Matrix, offset: int, epoch: int):
        self._matrix = matrix
        self._epoch = epoch
        self._released = False
        self.offset = offset
        self.row, self.col = divmod(offset, matrix.cols)

    def _check_live(self) -> None:
        if self._released or self._matrix._borrow_epoch != self._epoch:
            raise BorrowError(
                f"element ({self.row}, {self.col}) handle used after its borrow ended"
            )

    def _release(self) -> None:
        self._released = True

    def get(self) -> np.generic:
        """Current value of the element."""
        self._check_live()
        return self._matrix._data[self.offset]

    def set(self, value: Any) -> None:
        """Overwrite the element with value."""
        self._check_live()
        data = self._matrix._data
        data[self.offset] = cast_scalar(value, data.dtype, "value")

    @property
    def value(self) -> np.generic:
        return self.get()

    @value.setter
    def value(self, new_value: Any) -> None:
        self.set(new_value)

    def __repr__(self) -> str:
        return f"ElementRef(row={self.row}, col={self.col}, offset={self.offset})"


class MatrixMutIterator:
    """
    Forward-only iterator of ElementRef handles in row-major order.

    Created by Matrix.iter_mut(). The iterator and every handle it yields
    are invalidated by the next mutation of the matrix that does not go
    through these handles.
    """

    def __init__(self, matrix: Matrix, epoch: int):
        self._matrix = matrix
        self._epoch = epoch
        self._position = 0
        self._size = matrix.size

    def __iter__(self) -> MatrixMutIterator:
        return self

    def __next__(self) -> ElementRef:
        if self._position >= self._size:
            raise StopIteration
        if self._matrix._borrow_epoch != self._epoch:
            raise BorrowError("mutable iterator used after its borrow ended")
        ref = ElementRef(self._matrix, self._position, self._epoch)
        self._position += 1
        return ref

    def __length_hint__(self) -> int:
        return max(self._size - self._position, 0)
