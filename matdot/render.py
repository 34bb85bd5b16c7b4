from __future__ import annotations

from .matrix import check_matrix, convert
from .models import Layout, Matrix


def render_matrix(m: Matrix) -> str:
    """Console rendering, one bracketed line per logical row."""
    check_matrix(m)
    if m.layout is not Layout.ROW_MAJOR:
        m = convert(m)

    lines = []
    for r in range(m.rows):
        cells = " ".join(f"{v:2d}" for v in m.data[r * m.cols:(r + 1) * m.cols])
        lines.append(f"[ {cells} ]")
    return "\n".join(lines) + "\n"
