"""
Text rendering of a matrix as a space-aligned grid.

Each column is padded to the widest value in that column plus one space,
and every row ends with a newline. Floating values use the same default
formatting as a C++ ostream (%g, six significant digits), so a float
matrix of ones renders as ``"1 1 \\n"`` per row rather than ``"1.0 1.0"``.
"""

import numpy as np

from pymatrix.core.dtypes import is_integer_dtype

# Significant digits for floating values
FLOAT_PRECISION = 6


def format_value(value, integer: bool) -> str:
    """Text of a single element."""
    if integer:
        return str(int(value))
    return f"{float(value):.{FLOAT_PRECISION}g}"


def render(array: np.ndarray) -> str:
    """Render a 2D array as an aligned grid, one line per row."""
    integer = is_integer_dtype(array.dtype)
    cells = [[format_value(v, integer) for v in row] for row in array]
    if not cells:
        return ""

    widths = [max(len(cell) for cell in column) for column in zip(*cells)]
    lines = []
    for row in cells:
        # pad to column width, plus the separating space
        lines.append("".join(cell.ljust(w + 1) for cell, w in zip(row, widths)) + "\n")
    return "".join(lines)
