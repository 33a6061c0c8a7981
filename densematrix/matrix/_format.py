"""Text rendering for Matrix."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def format_rows(data: NDArray[Any], rows: int, cols: int) -> str:
    """
    Render a row-major buffer as text.

    Every element is followed by one space, and every row (including the
    last) ends with a newline: "1 2 3 \\n4 5 6 \\n".
    """
    grid = data.reshape(rows, cols)
    return "".join(
        "".join(f"{element} " for element in row) + "\n"
        for row in grid
    )


def format_repr(data: NDArray[Any], rows: int, cols: int) -> str:
    """Debug representation listing shape, dtype and the flat buffer."""
    values = np.array2string(data, separator=', ', threshold=64)
    return f"Matrix(rows={rows}, cols={cols}, dtype={data.dtype}, data={values})"
