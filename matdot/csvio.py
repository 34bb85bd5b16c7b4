"""
Reading and writing matrices as delimited text.

Input pipeline:
- encoding detection + decode
- newline normalization
- delimiter detection
- integer parsing with row length enforcement

Output is always comma-separated, one line per logical row.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Union

from charset_normalizer import from_bytes

from .errors import ParseError, ShapeError
from .matrix import check_matrix, convert
from .models import Layout, Matrix
from .rules import (
    ACCEPTED_DELIMITERS,
    DEFAULT_DELIMITER,
    INT64_MAX,
    INT64_MIN,
    OUTPUT_DELIMITER,
    OUTPUT_ENCODING,
    OUTPUT_LINETERMINATOR,
    SNIFF_SAMPLE_CHARS,
)

logger = logging.getLogger(__name__)

_INT_FIELD = re.compile(r"\s*[+-]?[0-9]+\s*")


def decode_bytes(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode raw input to text with LF newlines.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped.
    - If the detected encoding cannot decode the input, fall back to UTF-8.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        decode_used = "utf-8-sig" if raw.startswith(b"\xef\xbb\xbf") else "utf-8"
        text = raw.decode(decode_used, errors="replace")
        decode_fallback = True

    newlines = {
        "crlf": text.count("\r\n"),
        "cr": text.count("\r") - text.count("\r\n"),
    }
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "newlines_normalized": newlines["crlf"] + newlines["cr"],
    }
    logger.debug("decoded input: %s", report)
    return text, report


def detect_delimiter(text: str) -> tuple[str, bool]:
    """Sniff the field delimiter; returns (delimiter, sniffed)."""
    sample = text[:SNIFF_SAMPLE_CHARS]
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=ACCEPTED_DELIMITERS)
    except csv.Error:
        return DEFAULT_DELIMITER, False
    return dialect.delimiter, True


def _parse_field(field: str, row: int, column: int) -> int:
    if not _INT_FIELD.fullmatch(field):
        raise ParseError(row, column, field)
    value = int(field)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(row, column, field)
    return value


def parse_rows(text: str, delimiter: str = DEFAULT_DELIMITER, name: str = "matrix") -> Matrix:
    """Parse delimited text into a row-major Matrix."""
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)

    rows = 0
    cols = None
    data: List[int] = []
    for line in reader:
        if not line or (len(line) == 1 and not line[0].strip()):
            continue
        rows += 1
        if cols is None:
            cols = len(line)
        elif len(line) != cols:
            raise ShapeError(
                f"Matrix {name} doesn't appear to be valid: "
                f"row {rows} has wrong number of fields (expected {cols}, got {len(line)})",
                row=rows,
                expected=cols,
                actual=len(line),
            )
        for i, field in enumerate(line):
            data.append(_parse_field(field, rows, i + 1))

    if cols is None:
        raise ShapeError(f"Matrix {name} doesn't appear to be valid: it is empty")

    m = Matrix(rows=rows, cols=cols, layout=Layout.ROW_MAJOR, data=data)
    return check_matrix(m, name)


def read_matrix_bytes(raw: bytes, name: str = "matrix") -> tuple[Matrix, Dict[str, Any]]:
    """Parse uploaded or on-disk bytes; returns the matrix and an ingest report."""
    text, encoding_report = decode_bytes(raw)
    delimiter, sniffed = detect_delimiter(text)
    m = parse_rows(text, delimiter, name)

    report = {
        "encoding": encoding_report,
        "delimiter": {"detected": delimiter, "sniffed": sniffed},
        "shape": [m.rows, m.cols],
    }
    logger.debug("read %s as %dx%d (delimiter %r)", name, m.rows, m.cols, delimiter)
    return m, report


def read_matrix_text(text: str, name: str = "matrix") -> Matrix:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    delimiter, _ = detect_delimiter(text)
    return parse_rows(text, delimiter, name)


def read_matrix(path: Union[str, Path]) -> Matrix:
    """Read a matrix from a file. A missing file raises FileNotFoundError."""
    raw = Path(path).read_bytes()
    m, _ = read_matrix_bytes(raw, str(path))
    return m


def write_matrix_text(m: Matrix) -> str:
    """Serialize one CSV record per logical row."""
    check_matrix(m)
    if m.layout is not Layout.ROW_MAJOR:
        m = convert(m)

    outp = io.StringIO(newline="")
    writer = csv.writer(outp, delimiter=OUTPUT_DELIMITER, lineterminator=OUTPUT_LINETERMINATOR)
    for r in range(m.rows):
        writer.writerow(m.data[r * m.cols:(r + 1) * m.cols])
    return outp.getvalue()


def write_matrix(m: Matrix, path: Union[str, Path]) -> None:
    Path(path).write_text(write_matrix_text(m), encoding=OUTPUT_ENCODING, newline="")
