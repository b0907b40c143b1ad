"""
INSTRUCTION HEADER

What this file does (plain English):
- Exports the public API of the sheetcsv.config subpackage so callers only
  need a single import line, e.g. `from sheetcsv.config import load_sheet_configs`.
- Re-exports:
    HEADERS              : header row of the converter config sheet
    SheetConfig          : settings for one sheet -> CSV conversion
    load_sheet_configs   : read the config workbook into SheetConfig objects
    export_snapshot      : write the resolved configs to a JSON snapshot
    load_snapshot_configs: read SheetConfig objects back from a snapshot

Where it runs: Imported by the CLI, the converter and tools. Never run directly.
"""

from .schema import CONFIG_SHEET_NAME, HEADERS, SheetConfig
from .excel_io import load_sheet_configs, read_sheet_configs
from .export_snapshot import export_snapshot
from .load_snapshot import load_snapshot, load_snapshot_configs

__all__ = [
    "CONFIG_SHEET_NAME",
    "HEADERS",
    "SheetConfig",
    "load_sheet_configs",
    "read_sheet_configs",
    "export_snapshot",
    "load_snapshot",
    "load_snapshot_configs",
]
