"""
INSTRUCTION HEADER

What this file does (plain English):
- Reads the converter config workbook and writes the resolved sheet
  configurations to a JSON snapshot file on disk.
- The snapshot records exactly what a conversion run will do (after defaults
  and boolean/list decoding), and can be fed back to the CLI with --config.
- Stamps the output with an exported_at timestamp and the source xlsx path for
  traceability.
- Main export: export_snapshot(xlsx_path, output_path) -> Path

Where it runs: Called by tools/export_config_snapshot.py. Never run directly.
Inputs:  xlsx_path: path to the converter config workbook.
         output_path: destination for the JSON snapshot file.
Outputs: JSON file written to output_path; returns the output Path.
"""

from __future__ import annotations

from pathlib import Path
import datetime as dt

import orjson

from .excel_io import load_sheet_configs
from .schema import HEADERS


def export_snapshot(xlsx_path: str | Path, output_path: str | Path) -> Path:
    xlsx_path = Path(xlsx_path)
    output_path = Path(output_path)
    configs = load_sheet_configs(xlsx_path, raise_on_error=True)

    payload = {
        "exported_at": dt.datetime.now().isoformat(timespec="seconds"),
        "source_xlsx": str(xlsx_path),
        "schema": HEADERS,
        "sheets": [c.to_dict() for c in configs],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
    return output_path
