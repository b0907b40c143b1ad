"""
INSTRUCTION HEADER

What this file does (plain English):
- Turns one sheet into a matrix of strings (list of rows), ready for the
  transformer and the CSV writer.
- Rules, applied to every sheet:
    * column A (index 0) is a label/key column and is never exported
    * a header cell reading exactly "Comment" or "Comments" in row 1 marks the
      comment column; it is dropped unless the config's Comment Read is true
    * with Comment Read true, rows whose column A starts with "#" are dropped
    * transposed sheets start at row 3: rows 1-2 hold a title and a header
    * the Range setting limits which rows are read (see ranges.py)
- Rows keep their own length; short rows are not padded.
- Main exports: find_comment_column(sheet), extract_matrix(sheet, config).

Where it runs: Imported by sheetcsv.convert. Never run directly.
"""

from __future__ import annotations

from .cells import CellKind, cell_to_str
from .config.schema import SheetConfig
from .logger import get_logger
from .ranges import parse_range_spec
from .workbook import Sheet

logger = get_logger(__name__)

Matrix = list[list[str]]

COMMENT_HEADERS = ("Comment", "Comments")
COMMENT_ROW_PREFIX = "#"
FIRST_OUTPUT_COLUMN = 1
TRANSPOSE_START_ROW = 2


def find_comment_column(sheet: Sheet) -> int | None:
    header = sheet.row(0) or []
    for idx, cell in enumerate(header):
        if cell.kind is CellKind.TEXT and cell.value in COMMENT_HEADERS:
            return idx
    return None


def extract_matrix(sheet: Sheet, config: SheetConfig, *, strict_ranges: bool = False) -> Matrix:
    logger.info("Sheet: %s - Should Transpose: %s", sheet.name, config.transpose)

    comment_col = find_comment_column(sheet)
    start_row = TRANSPOSE_START_ROW if config.transpose else 0
    spec = parse_range_spec(config.range, strict=strict_ranges)
    eligible = spec.select(range(start_row, sheet.max_row_index + 1))

    data: Matrix = []
    for row_index in eligible:
        cells = sheet.row(row_index)
        if cells is None:
            continue

        if config.comment_read and cell_to_str(cells[0]).startswith(COMMENT_ROW_PREFIX):
            continue

        row_data: list[str] = []
        for col_index in range(FIRST_OUTPUT_COLUMN, len(cells)):
            if not config.comment_read and col_index == comment_col:
                continue
            row_data.append(cell_to_str(cells[col_index]))
        data.append(row_data)

    logger.debug("Extracted %d row(s) from sheet %s", len(data), sheet.name)
    return data
