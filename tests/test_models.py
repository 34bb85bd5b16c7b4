import pytest
from pydantic import ValidationError

from matdot.errors import ShapeError
from matdot.models import Layout, Matrix


def test_from_rows():
    mat = Matrix.from_rows([[1, 2], [3, 4], [5, 6]])
    assert mat == Matrix(rows=3, cols=2, layout=Layout.ROW_MAJOR, data=(1, 2, 3, 4, 5, 6))
    assert mat.to_rows() == [[1, 2], [3, 4], [5, 6]]


def test_from_rows_rejects_ragged_and_empty():
    with pytest.raises(ShapeError) as exc:
        Matrix.from_rows([[1, 2], [3]])
    assert exc.value.row == 2
    assert exc.value.expected == 2
    assert exc.value.actual == 1

    with pytest.raises(ShapeError) as exc:
        Matrix.from_rows([])
    assert exc.value.issue == "empty_matrix"


def test_matrix_is_frozen():
    mat = Matrix.from_rows([[1]])
    with pytest.raises(ValidationError):
        mat.rows = 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rows": 0, "cols": 1, "data": []},
        {"rows": 1, "cols": 1, "data": [1.5]},
        {"rows": 1, "cols": 1, "data": ["1"]},
        {"rows": 1, "cols": 1, "data": [2 ** 63]},
    ],
)
def test_field_validation(kwargs):
    with pytest.raises(ValidationError):
        Matrix(layout=Layout.ROW_MAJOR, **kwargs)
