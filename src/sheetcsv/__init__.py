"""
INSTRUCTION HEADER
What this file does: Defines the sheetcsv package and its public surface.
Where it runs: Imported by other Python modules (not a standalone script).
Inputs: None.
Outputs: Provides the `sheetcsv` package namespace for imports.
How to run: Not run directly. Import from other code, or use the `sheetcsv` command.
Also (if needed): `python -c "import sheetcsv; print(sheetcsv.__all__)"`
Success looks like: imports work without errors.
Common failures + fixes: Module not found -> `pip install -e .` from the repo root.
"""

from .cells import Cell, CellKind, cell_to_str
from .config import SheetConfig, load_sheet_configs
from .convert import ConversionReport, convert_all, convert_sheet, run_conversion
from .csv_writer import escape_csv_value, write_csv
from .extract import extract_matrix, find_comment_column
from .ranges import RangeSpec, parse_range_spec, select_rows
from .transform import standardize_header, transform_matrix, transpose
from .workbook import DataWorkbook, Sheet, open_workbook

__all__ = [
    "Cell",
    "CellKind",
    "cell_to_str",
    "SheetConfig",
    "load_sheet_configs",
    "ConversionReport",
    "convert_all",
    "convert_sheet",
    "run_conversion",
    "escape_csv_value",
    "write_csv",
    "extract_matrix",
    "find_comment_column",
    "RangeSpec",
    "parse_range_spec",
    "select_rows",
    "standardize_header",
    "transform_matrix",
    "transpose",
    "DataWorkbook",
    "Sheet",
    "open_workbook",
]

__version__ = "0.1.0"
