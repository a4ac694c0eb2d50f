"""
Axis selector for shape and reduction operations.

This module is the SINGLE SOURCE OF TRUTH for axis values.
Import from here, never compare against raw integers.

Usage:
    from pymatrix.core.axis import Axis

    m.erase(0, axis=Axis.BY_COLUMN)
    m.sum(Axis.BY_ROW)   # one total per row
"""

from enum import IntEnum


class Axis(IntEnum):
    """
    Orientation of a shape or reduction operation.

    BY_ROW (0) inserts/removes rows and reduces across each row.
    BY_COLUMN (1) inserts/removes columns and reduces down each column.
    """
    BY_ROW = 0
    BY_COLUMN = 1


__all__ = ['Axis']
