"""
Typed errors raised by the matrix core and the CSV adapter.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

Shape = Tuple[int, int]


class MatrixError(Exception):
    """Base exception for all matrix errors."""

    issue = "matrix_error"
    operand: Optional[str] = None

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class InvalidMatrix(MatrixError):
    """Raised when a matrix's data length is not rows * cols."""

    issue = "invalid_matrix"

    def __init__(self, rows: int, cols: int, length: int, name: str = "matrix"):
        super().__init__(
            f"Matrix {name} doesn't appear to be valid: "
            f"{rows}x{cols} needs {rows * cols} elements, got {length}",
            {"rows": rows, "cols": cols, "length": length},
        )
        self.rows = rows
        self.cols = cols
        self.length = length


class DimensionMismatch(MatrixError):
    """Raised when a product is requested on matrices with a.cols != b.rows."""

    issue = "dimension_mismatch"

    def __init__(self, left: Shape, right: Shape):
        super().__init__(
            "The dot product of these matrices is not defined, "
            f"{left[0]}x{left[1]} cannot be multiplied by {right[0]}x{right[1]}; "
            "see https://en.wikipedia.org/wiki/Dot_product.",
            {"left": list(left), "right": list(right)},
        )
        self.left = left
        self.right = right


class ParseError(MatrixError):
    """Raised when a CSV field is not a 64-bit integer."""

    issue = "not_an_int"

    def __init__(self, row: int, column: int, value: str):
        super().__init__(
            f"{value!r} doesn't appear to be an int (row {row}, column {column})",
            {"row": row, "column": column, "value": value},
        )
        self.row = row
        self.column = column
        self.value = value


class ShapeError(MatrixError):
    """Raised when tabular input is empty or its rows differ in length."""

    issue = "row_length_mismatch"

    def __init__(self, message: str, row: Optional[int] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message, {"row": row, "expected": expected, "actual": actual})
        self.row = row
        self.expected = expected
        self.actual = actual
        if row is None:
            self.issue = "empty_matrix"
