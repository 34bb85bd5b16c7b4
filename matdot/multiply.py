"""
Upload pipeline behind POST /product.

Both operands go through the CSV adapter, then the product engine. The
result is returned as logical rows plus a base64 CSV payload.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, Dict

from .csvio import read_matrix_bytes, write_matrix_text
from .errors import MatrixError
from .matrix import product
from .models import Matrix
from .rules import OUTPUT_ENCODING


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _read_operand(raw: bytes, operand: str) -> tuple[Matrix, Dict[str, Any]]:
    try:
        return read_matrix_bytes(raw, operand)
    except MatrixError as e:
        e.operand = operand
        raise


def multiply_csv_bytes(raw_a: bytes, raw_b: bytes) -> Dict[str, Any]:
    """
    Multiply two CSV-encoded matrices.
    Returns a dict matching the API's response envelope.
    """
    a, report_a = _read_operand(raw_a, "a")
    b, report_b = _read_operand(raw_b, "b")
    result = product(a, b)

    encoded = write_matrix_text(result).encode(OUTPUT_ENCODING)
    return {
        "result": {
            "rows": result.rows,
            "cols": result.cols,
            "layout": result.layout,
            "values": result.to_rows(),
        },
        "result_csv": {
            "sha256": _sha256_hex(encoded),
            "encoding": OUTPUT_ENCODING,
            "content_b64": base64.b64encode(encoded).decode("ascii"),
        },
        "report": {
            "a_shape": [a.rows, a.cols],
            "b_shape": [b.rows, b.cols],
            "result_shape": [result.rows, result.cols],
            "ingest": {"a": report_a, "b": report_b},
        },
    }
