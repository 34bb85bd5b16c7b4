"""
Matrix core: invariant check, layout conversion and the matrix product.

All functions are pure. Inputs are never modified and results are new
Matrix values.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import DimensionMismatch, InvalidMatrix
from .models import Layout, Matrix

logger = logging.getLogger(__name__)

_INT64_MODULUS = 2 ** 64
_INT64_HALF = 2 ** 63


def wrap_int64(value: int) -> int:
    """Reduce an exact integer to signed 64-bit two's-complement range."""
    return (value + _INT64_HALF) % _INT64_MODULUS - _INT64_HALF


def check_matrix(m: Matrix, name: str = "matrix") -> Matrix:
    """Raise InvalidMatrix unless len(m.data) == m.rows * m.cols."""
    if len(m.data) != m.rows * m.cols:
        raise InvalidMatrix(m.rows, m.cols, len(m.data), name)
    return m


def convert(m: Matrix) -> Matrix:
    """
    Relinearize a matrix into the opposite layout.

    Shape and logical contents are unchanged. convert(convert(m)) == m.
    """
    check_matrix(m)

    # The flat data is an outer x inner grid: rows x cols when row-major,
    # cols x rows when column-major. Converting is transposing that grid.
    if m.layout is Layout.ROW_MAJOR:
        outer, inner = m.rows, m.cols
    else:
        outer, inner = m.cols, m.rows

    data = [m.data[o * inner + i] for i in range(inner) for o in range(outer)]
    return Matrix(rows=m.rows, cols=m.cols, layout=m.layout.flipped(), data=data)


def product(a: Matrix, b: Matrix) -> Matrix:
    """
    Compute the matrix product a * b.

    Raises:
        InvalidMatrix: either operand breaks the length invariant.
        DimensionMismatch: a.cols != b.rows.

    The result is row-major with shape (a.rows, b.cols). Each cell wraps to
    a signed 64-bit integer on overflow.
    """
    check_matrix(a, "a")
    check_matrix(b, "b")
    if a.cols != b.rows:
        raise DimensionMismatch(a.shape, b.shape)

    logger.debug("multiplying %dx%d by %dx%d", a.rows, a.cols, b.rows, b.cols)

    # Row-major a and column-major b let every dot product read two
    # contiguous slices.
    if a.layout is not Layout.ROW_MAJOR:
        a = convert(a)
    if b.layout is not Layout.COLUMN_MAJOR:
        b = convert(b)

    inner = a.cols
    result: List[int] = []
    for i in range(a.rows):
        a_row = a.data[i * inner:(i + 1) * inner]
        for j in range(b.cols):
            b_col = b.data[j * inner:(j + 1) * inner]
            total = 0
            for x, y in zip(a_row, b_col):
                total += x * y
            result.append(wrap_int64(total))

    return Matrix(rows=a.rows, cols=b.cols, layout=Layout.ROW_MAJOR, data=result)
