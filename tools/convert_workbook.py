"""
INSTRUCTION HEADER
Purpose: Convert the sheets listed in a converter config workbook into CSV files.
Inputs: `--config` (config .xlsx or snapshot .json) and `--workbook` (data workbook).
Outputs: CSV files under `--output-dir` (default `output/`), optional JSON report via `--report`.
How to run: `python tools/convert_workbook.py --config config/converter_config.xlsx --workbook data/Internal.xlsx`
Also: `sheetcsv ...` with the same flags once the package is installed.
Success looks like: `Conversion completed successfully.` and exit code 0.
Common failures and fixes:
- Exit code 2: the config or data workbook path is wrong.
- Exit code 1: some sheets failed; the log names each one and why.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _repo_root() -> Path:
    """Return the repository root folder based on this file location."""
    return Path(__file__).resolve().parents[1]


if __name__ == "__main__":
    sys.path.insert(0, str(_repo_root() / "src"))
    from sheetcsv.cli import main

    raise SystemExit(main())
