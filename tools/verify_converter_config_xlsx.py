"""
INSTRUCTION HEADER
Purpose: Verify a converter config workbook has the expected header row.
Inputs: Reads `config/converter_config.xlsx` (or --config) and HEADERS in `src/sheetcsv/config/schema.py`.
Outputs: None (prints results, exits non-zero on failure).
How to run: `python tools/verify_converter_config_xlsx.py --config path/to/config.xlsx`
Success looks like: `Workbook verification passed.`
Common failures and fixes:
- Header mismatch: columns are read by position, so fix the order in the first sheet,
  or regenerate the template with `python tools/make_converter_config_xlsx.py`.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from openpyxl import load_workbook


def _repo_root() -> Path:
    """Return the repository root folder based on this file location."""
    return Path(__file__).resolve().parents[1]


def _load_headers() -> list[str]:
    """Load the config sheet headers from `src/sheetcsv/config/schema.py`."""
    sys.path.insert(0, str(_repo_root() / "src"))
    from sheetcsv.config.schema import HEADERS

    return HEADERS


def check_headers(actual: list[object], expected: list[str]) -> list[str]:
    """Return one message per column whose header does not match, comparing case-insensitively."""
    problems: list[str] = []
    for idx, name in enumerate(expected):
        got = actual[idx] if idx < len(actual) else None
        got_text = "" if got is None else str(got).strip()
        if got_text.lower() != name.lower():
            problems.append(f"column {idx + 1}: expected {name!r}, found {got_text!r}")
    return problems


def main(argv: list[str] | None = None) -> int:
    """Verify the first sheet's header row against the schema."""
    parser = argparse.ArgumentParser(description="Verify a converter config workbook.")
    parser.add_argument(
        "--config",
        default=str(_repo_root() / "config" / "converter_config.xlsx"),
        help="Config workbook to check.",
    )
    args = parser.parse_args(argv)
    xlsx_path = Path(args.config)

    if not xlsx_path.exists():
        print(f"Missing workbook: {xlsx_path}")
        return 1

    headers = _load_headers()
    wb = load_workbook(xlsx_path)
    ws = wb.worksheets[0]
    actual = [c.value for c in ws[1]]

    problems = check_headers(actual, headers)
    if problems:
        print(f"Header mismatch in sheet {ws.title!r}:")
        for item in problems:
            print(f"- {item}")
        return 1

    print("Workbook verification passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
