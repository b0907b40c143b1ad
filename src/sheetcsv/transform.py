"""
INSTRUCTION HEADER

What this file does (plain English):
- Reshapes an extracted matrix before it is written:
    transpose            swap rows and columns (short rows are padded with "")
    standardize_header   "User Name*" -> "user_name", "Foo_Bar_" -> "foo_bar"
    transform_matrix     transpose if configured, then standardize and clean row 1
- Every function returns a new matrix; the input is never modified.

Header rules (standardize_header):
    1. remove every "*"
    2. lowercase, and replace each run of whitespace with "_"
    3. drop trailing "_"
    4. "username" -> "user_name", "primarykeylist" -> "primarykey_list"
Running the rules twice gives the same result as running them once.

Where it runs: Imported by sheetcsv.convert. Never run directly.
"""

from __future__ import annotations

import re

from .config.schema import SheetConfig

Matrix = list[list[str]]

_WHITESPACE_RE = re.compile(r"\s+")

SPECIAL_HEADERS = {
    "username": "user_name",
    "primarykeylist": "primarykey_list",
}


def transpose(matrix: Matrix) -> Matrix:
    if not matrix or not matrix[0]:
        return [list(row) for row in matrix]

    width = max(len(row) for row in matrix)
    return [
        [row[col] if col < len(row) else "" for row in matrix]
        for col in range(width)
    ]


def should_transpose(config: SheetConfig) -> bool:
    return config.transpose and config.sheet_name not in config.exclude_from_transpose


def standardize_header(value: str) -> str:
    if not value:
        return value
    header = value.replace("*", "")
    header = _WHITESPACE_RE.sub("_", header.lower())
    header = header.rstrip("_")
    return SPECIAL_HEADERS.get(header, header)


def _map_header(matrix: Matrix, fn) -> Matrix:
    if not matrix:
        return []
    return [[fn(v) for v in matrix[0]]] + matrix[1:]


def standardize_headers(matrix: Matrix) -> Matrix:
    return _map_header(matrix, standardize_header)


def clean_up_headers(matrix: Matrix) -> Matrix:
    """Remove any "*" left in the header row."""
    return _map_header(matrix, lambda v: v.replace("*", ""))


def transform_matrix(matrix: Matrix, config: SheetConfig) -> Matrix:
    if should_transpose(config):
        matrix = transpose(matrix)
    return clean_up_headers(standardize_headers(matrix))
