"""
INSTRUCTION HEADER

What this file does (plain English):
- Thin layer between openpyxl and the converter: opens an .xlsx file and hands
  out sheets as plain grids of Cell objects (see cells.py).
- A Sheet is fully read into memory: a list of rows, each a list of Cells with
  trailing empty cells dropped. Rows with no populated cell are stored as None
  ("absent"), the same way Excel treats rows that were never written.
- Main exports: Sheet, DataWorkbook, open_workbook(path).

Where it runs: Imported by sheetcsv.convert and sheetcsv.config.excel_io. Never run directly.
Common failures + fixes:
  - WorkbookOpenError: the path is wrong, or the file is not an .xlsx/.xlsm workbook.
  - SheetNotFoundError: the sheet name in the config does not match a tab name
    exactly (names are case-sensitive).
"""

from __future__ import annotations

import zipfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator

from openpyxl import Workbook, load_workbook
from openpyxl.utils.cell import coordinate_from_string, column_index_from_string
from openpyxl.utils.exceptions import InvalidFileException

from .cells import Cell, CellKind
from .errors import SheetNotFoundError, WorkbookOpenError


def _trim_row(cells: list[Cell]) -> list[Cell] | None:
    end = len(cells)
    while end > 0 and cells[end - 1].kind is CellKind.EMPTY:
        end -= 1
    if end == 0:
        return None
    return cells[:end]


@dataclass
class Sheet:
    name: str
    rows: list[list[Cell] | None] = field(default_factory=list)

    @classmethod
    def from_worksheet(cls, ws: Any) -> "Sheet":
        rows = [_trim_row([Cell.from_openpyxl(c) for c in row]) for row in ws.iter_rows()]
        while rows and rows[-1] is None:
            rows.pop()
        return cls(name=ws.title, rows=rows)

    @classmethod
    def from_values(cls, name: str, values: Iterable[Iterable[Any] | None]) -> "Sheet":
        """Build a sheet from plain Python values (str, int, float, bool, None, or Cell)."""
        rows: list[list[Cell] | None] = []
        for raw in values:
            if raw is None:
                rows.append(None)
                continue
            rows.append(_trim_row([_coerce_cell(v) for v in raw]))
        return cls(name=name, rows=rows)

    @property
    def max_row_index(self) -> int:
        """0-based index of the last populated row; -1 for an empty sheet."""
        return len(self.rows) - 1

    def row(self, index: int) -> list[Cell] | None:
        if index < 0 or index >= len(self.rows):
            return None
        return self.rows[index]

    def cell(self, row_index: int, col_index: int) -> Cell | None:
        row = self.row(row_index)
        if row is None or col_index < 0 or col_index >= len(row):
            return None
        return row[col_index]

    def cell_at(self, reference: str) -> Cell | None:
        """Look up a cell by spreadsheet reference, e.g. "B12"."""
        column, row = coordinate_from_string(reference)
        return self.cell(row - 1, column_index_from_string(column) - 1)


def _coerce_cell(value: Any) -> Cell:
    if isinstance(value, Cell):
        return value
    if value is None:
        return Cell.empty()
    if isinstance(value, bool):
        return Cell.boolean(value)
    if isinstance(value, (int, float)):
        return Cell.number(value)
    if isinstance(value, str) and value.startswith("="):
        return Cell.formula(value)
    return Cell.text(str(value))


class DataWorkbook:
    def __init__(self, wb: Workbook, source: str | Path | None = None):
        self._wb = wb
        self.source = source

    @property
    def sheet_names(self) -> list[str]:
        return list(self._wb.sheetnames)

    def sheet(self, name: str) -> Sheet:
        if name not in self._wb.sheetnames:
            raise SheetNotFoundError(name)
        return Sheet.from_worksheet(self._wb[name])

    def first_sheet(self) -> Sheet:
        if not self._wb.worksheets:
            raise SheetNotFoundError("<first sheet>")
        return Sheet.from_worksheet(self._wb.worksheets[0])

    def close(self) -> None:
        self._wb.close()


@contextmanager
def open_workbook(xlsx_path: str | Path) -> Iterator[DataWorkbook]:
    """Open a workbook with formulas kept as text; always closed on exit."""
    xlsx_path = Path(xlsx_path)
    try:
        wb = load_workbook(xlsx_path, data_only=False)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise WorkbookOpenError(f"Cannot open workbook {xlsx_path}: {exc}") from exc

    book = DataWorkbook(wb, source=xlsx_path)
    try:
        yield book
    finally:
        book.close()
