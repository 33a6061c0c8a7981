"""Index-key parsing for Matrix.__getitem__ / __setitem__."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from densematrix.core.exceptions import ValidationError
from densematrix.core.validation import (
    check_in_bounds,
    check_index,
    check_range_in_bounds,
)


@dataclass(frozen=True)
class ElementKey:
    """A validated (row, col) position."""
    row: int
    col: int

    def offset(self, cols: int) -> int:
        return self.row * cols + self.col


@dataclass(frozen=True)
class RowSliceKey:
    """A validated (row, start:stop) column range within one row."""
    row: int
    start: int
    stop: int


def parse_key(key: Any, rows: int, cols: int) -> ElementKey | RowSliceKey:
    """
    Validate an index key against a rows x cols shape.

    Accepted forms are (row, col) and (row, slice) where the slice has no
    step (or step 1). Omitted slice bounds default to 0 and cols.

    Raises:
        ValidationError: If the key is malformed
        OutOfBoundsError: If the row, column or column range is out of bounds
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(
            f"index: expected a (row, col) or (row, start:stop) pair, got {key!r}"
        )

    row_key, col_key = key
    row = check_index(row_key, "row")
    check_in_bounds(row, rows, "row")

    if isinstance(col_key, slice):
        if col_key.step not in (None, 1):
            raise ValidationError(
                f"index: row slices must be contiguous, got step {col_key.step!r}"
            )
        start = 0 if col_key.start is None else check_index(col_key.start, "start")
        stop = cols if col_key.stop is None else check_index(col_key.stop, "stop")
        check_range_in_bounds(start, stop, cols, "col")
        return RowSliceKey(row=row, start=start, stop=stop)

    col = check_index(col_key, "col")
    check_in_bounds(col, cols, "col")
    return ElementKey(row=row, col=col)
