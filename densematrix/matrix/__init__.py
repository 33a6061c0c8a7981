"""
Dense matrix container.

Public API:
    Matrix               - row-major dense matrix over a numeric dtype
    MatrixIterator       - read iterator returned by Matrix.iter()
    MatrixMutIterator    - mutable iterator returned by Matrix.iter_mut()
    ElementRef           - exclusive handle to one element
"""

from densematrix.matrix.matrix import Matrix
from densematrix.matrix.iterators import (
    ElementRef,
    MatrixIterator,
    MatrixMutIterator,
)

__all__ = [
    "Matrix",
    "MatrixIterator",
    "MatrixMutIterator",
    "ElementRef",
]
