"""
INSTRUCTION HEADER

What this file does (plain English):
- Reads the converter config workbook and returns one SheetConfig per data row
  (header row excluded), skipping any blank rows.
- Column positions come from COLUMNS in schema.py, so the result never depends
  on how the header cells are spelled.
- Main export: load_sheet_configs(xlsx_path) -> list[SheetConfig]

Where it runs: Imported by sheetcsv.cli and export_snapshot.py. Never run directly.
Inputs:  Path to the config .xlsx (its first sheet is used).
Outputs: List of SheetConfig.
Common failures + fixes:
  - Config file missing/unreadable: an ERROR is logged and [] is returned, so
    nothing gets converted. Pass raise_on_error=True to get ConfigLoadError instead.
"""

from __future__ import annotations

from pathlib import Path

from ..cells import Cell, CellKind, cell_to_str
from ..errors import ConfigLoadError, ConverterError
from ..logger import get_logger
from ..workbook import Sheet, open_workbook
from .schema import COLUMNS, SheetConfig

logger = get_logger(__name__)


def _is_blank_row(cells: list[Cell] | None) -> bool:
    if cells is None:
        return True
    for c in cells:
        if c.kind is CellKind.EMPTY:
            continue
        if c.kind is CellKind.TEXT and str(c.value).strip() == "":
            continue
        return False
    return True


def text_boolean(cell: Cell | None) -> bool:
    """True for a real TRUE cell or text reading "true" in any case; False otherwise."""
    if cell is None:
        return False
    if cell.kind is CellKind.BOOLEAN:
        return bool(cell.value)
    if cell.kind is CellKind.TEXT:
        return str(cell.value).strip().lower() == "true"
    return False


def string_list(cell: Cell | None) -> list[str]:
    """Split a comma-separated text cell into trimmed, non-empty items."""
    if cell is None or cell.kind is not CellKind.TEXT:
        return []
    items = [v.strip() for v in str(cell.value).split(",")]
    return [v for v in items if v]


def _cell(cells: list[Cell], key: str) -> Cell | None:
    idx = COLUMNS[key]
    return cells[idx] if idx < len(cells) else None


def config_from_row(cells: list[Cell]) -> SheetConfig:
    return SheetConfig(
        sheet_name=cell_to_str(_cell(cells, "sheet_name")),
        csv_name=cell_to_str(_cell(cells, "csv_name")),
        transpose=text_boolean(_cell(cells, "transpose")),
        comment_read=text_boolean(_cell(cells, "comment_read")),
        range=cell_to_str(_cell(cells, "range")),
        exclude_from_transpose=frozenset(string_list(_cell(cells, "exclude_from_transpose"))),
        output_directory=cell_to_str(_cell(cells, "output_directory")),
    )


def read_sheet_configs(sheet: Sheet) -> list[SheetConfig]:
    configs: list[SheetConfig] = []
    for row_index, cells in enumerate(sheet.rows):
        if row_index == 0:
            continue
        if _is_blank_row(cells):
            logger.warning("Skipping blank config row %d", row_index + 1)
            continue
        configs.append(config_from_row(cells))
    return configs


def load_sheet_configs(xlsx_path: str | Path, *, raise_on_error: bool = False) -> list[SheetConfig]:
    xlsx_path = Path(xlsx_path)
    try:
        with open_workbook(xlsx_path) as book:
            configs = read_sheet_configs(book.first_sheet())
    except ConverterError as exc:
        logger.error("Error loading sheet configurations: %s", exc)
        if raise_on_error:
            raise ConfigLoadError(str(exc)) from exc
        return []

    logger.info("Loaded %d sheet configuration(s) from %s", len(configs), xlsx_path)
    return configs
