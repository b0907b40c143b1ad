"""
INSTRUCTION HEADER

What this file does (plain English):
- Holds the run-level settings of a conversion: which config to read, which
  workbook to convert, where CSVs go, and how strict range parsing is.
- Defaults can come from environment variables so the same command works on
  every machine without editing code:
    SHEETCSV_CONFIG      path to the config workbook (.xlsx) or snapshot (.json)
    SHEETCSV_WORKBOOK    path to the data workbook
    SHEETCSV_OUTPUT_DIR  base output directory (default: ./output)
- Main exports: RunSettings, ENV_CONFIG, ENV_WORKBOOK, ENV_OUTPUT_DIR, DEFAULT_OUTPUT_DIR.

Where it runs: Imported by sheetcsv.cli and sheetcsv.convert. Never run directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

ENV_CONFIG = "SHEETCSV_CONFIG"
ENV_WORKBOOK = "SHEETCSV_WORKBOOK"
ENV_OUTPUT_DIR = "SHEETCSV_OUTPUT_DIR"

DEFAULT_OUTPUT_DIR = Path("output")


@dataclass(frozen=True)
class RunSettings:
    config_path: Path
    workbook_path: Path
    base_output_dir: Path = DEFAULT_OUTPUT_DIR
    strict_ranges: bool = False
    report_path: Path | None = None
    log_level: str = "INFO"

    def csv_path_for(self, output_directory: str, csv_name: str) -> Path:
        """<base_output_dir>/<output_directory>/<csv_name>"""
        return self.base_output_dir / output_directory / csv_name
