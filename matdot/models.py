from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .errors import ShapeError
from .rules import INT64_MAX, INT64_MIN

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]
Dimension = Annotated[StrictInt, Field(gt=0)]


class Layout(str, Enum):
    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"

    def flipped(self) -> "Layout":
        if self is Layout.ROW_MAJOR:
            return Layout.COLUMN_MAJOR
        return Layout.ROW_MAJOR


class Matrix(BaseModel):
    """
    Dense integer matrix stored as a flat tuple plus a layout tag.

    Field types are validated on construction. The length invariant
    (len(data) == rows * cols) is enforced by matrix.check_matrix, which
    every core operation runs before reading data.
    """

    model_config = ConfigDict(frozen=True)

    rows: Dimension
    cols: Dimension
    layout: Layout
    data: Tuple[Int64, ...]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def at(self, row: int, col: int) -> int:
        """Value of the logical cell (row, col), whatever the layout."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.rows}x{self.cols} matrix")
        if self.layout is Layout.ROW_MAJOR:
            return self.data[row * self.cols + col]
        return self.data[col * self.rows + row]

    def to_rows(self) -> List[List[int]]:
        return [[self.at(r, c) for c in range(self.cols)] for r in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Build a row-major matrix from a list of equal-length rows."""
        if not rows or not rows[0]:
            raise ShapeError("Matrix is empty")
        width = len(rows[0])
        data: List[int] = []
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(
                    f"row {i + 1} has wrong number of fields: expected {width}, got {len(row)}",
                    row=i + 1,
                    expected=width,
                    actual=len(row),
                )
            data.extend(row)
        return cls(rows=len(rows), cols=width, layout=Layout.ROW_MAJOR, data=data)


class MatrixModel(BaseModel):
    rows: int
    cols: int
    layout: Layout = Field(default=Layout.ROW_MAJOR)
    values: List[List[int]]


class ResultCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class ProductReport(BaseModel):
    a_shape: List[int]
    b_shape: List[int]
    result_shape: List[int]
    ingest: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class ProductResponse(BaseModel):
    result: MatrixModel
    result_csv: ResultCsv
    report: ProductReport


class HealthResponse(BaseModel):
    ok: bool = True
