"""
INSTRUCTION HEADER
Purpose: Create a converter config workbook with the required header row and one example row.
Inputs: Reads HEADERS from `src/sheetcsv/config/schema.py`.
Outputs: Writes `config/converter_config.xlsx` (or the path given with --output).
How to run: `python tools/make_converter_config_xlsx.py`
Success looks like: console prints `Created workbook: ...config/converter_config.xlsx`.
Common failures and fixes:
- Module not found (openpyxl): run `python -m pip install -e .`.
- Permission error: close the workbook in Excel and retry.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter


def _repo_root() -> Path:
    """Return the repository root folder based on this file location."""
    return Path(__file__).resolve().parents[1]


def _load_schema() -> tuple[str, list[str]]:
    """Load the config sheet name and headers from `src/sheetcsv/config/schema.py`."""
    sys.path.insert(0, str(_repo_root() / "src"))
    from sheetcsv.config.schema import CONFIG_SHEET_NAME, HEADERS

    return CONFIG_SHEET_NAME, HEADERS


def main(argv: list[str] | None = None) -> int:
    """Generate the workbook and write it to disk."""
    parser = argparse.ArgumentParser(description="Create a converter config workbook template.")
    parser.add_argument(
        "--output",
        default=str(_repo_root() / "config" / "converter_config.xlsx"),
        help="Where to write the workbook.",
    )
    args = parser.parse_args(argv)
    output_path = Path(args.output)

    sheet_name, headers = _load_schema()

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    ws.freeze_panes = "A2"
    ws.auto_filter.ref = f"A1:{get_column_letter(len(headers))}1"

    example_row = [1, "Orders", "orders.csv", "false", "false", "NA", "", "sales"]
    ws.append(example_row)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    print(f"Created workbook: {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
