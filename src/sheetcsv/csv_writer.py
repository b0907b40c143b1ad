"""
INSTRUCTION HEADER

What this file does (plain English):
- Writes a matrix of strings to a CSV file.
- A value is quoted only when it contains a comma, a newline or a double quote;
  quotes inside it are doubled, so x"y is written as "x""y" (quotes included).
- Lines end with the platform newline. Missing output folders are created.
- The CSV is written to a temporary file next to the target and then moved into
  place, so a failed write never leaves a half-written CSV behind.
- Main exports: escape_csv_value(value), format_csv_row(row), write_csv(path, matrix).

Where it runs: Imported by sheetcsv.convert. Never run directly.
Common failures + fixes:
  - OutputWriteError: the output folder is not writable, or the CSV is open in Excel.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from .errors import OutputWriteError

_NEEDS_QUOTES = (",", "\n", '"')


def escape_csv_value(value: str) -> str:
    if any(ch in value for ch in _NEEDS_QUOTES):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_csv_row(row: Sequence[str]) -> str:
    return ",".join(escape_csv_value(v) for v in row)


def write_csv(csv_path: str | Path, matrix: Sequence[Sequence[str]]) -> Path:
    csv_path = Path(csv_path)
    try:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Failed to create output directories for: {csv_path} ({exc})") from exc

    tmp_path = csv_path.with_name(f".{csv_path.name}.tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8", newline="") as fh:
            for row in matrix:
                fh.write(format_csv_row(row))
                fh.write(os.linesep)
        os.replace(tmp_path, csv_path)
    except OSError as exc:
        raise OutputWriteError(f"Error writing CSV file: {csv_path} ({exc})") from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return csv_path
