"""
Fixed parsing and serialization rules.

Kept in one place so the adapter, the CLI and the API agree on them.
"""

ACCEPTED_DELIMITERS = [",", ";", "\t", "|"]
DEFAULT_DELIMITER = ","
SNIFF_SAMPLE_CHARS = 4096

OUTPUT_DELIMITER = ","
OUTPUT_ENCODING = "utf-8"
OUTPUT_LINETERMINATOR = "\n"

# Elements are signed 64-bit integers; products wrap on overflow.
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
