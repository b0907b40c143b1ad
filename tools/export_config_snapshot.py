"""
INSTRUCTION HEADER
Purpose: Export the converter config workbook to JSON snapshots.
Inputs: Reads `config/converter_config.xlsx` (or --config).
Outputs: Writes `config/exports/config_snapshot_<YYYYMMDD_HHMMSS>.json`
and `config/exports/config_snapshot_latest.json`.
How to run: `python tools/export_config_snapshot.py`
Success looks like: printed paths for the timestamped snapshot and latest snapshot.
Common failures and fixes:
- Module not found (openpyxl or orjson): run `python -m pip install -e .`.
- Missing workbook: run `python tools/make_converter_config_xlsx.py`.
"""

from __future__ import annotations

import argparse
import datetime as dt
import shutil
import sys
from pathlib import Path


def _repo_root() -> Path:
    """Return the repository root folder based on this file location."""
    return Path(__file__).resolve().parents[1]


def main(argv: list[str] | None = None) -> int:
    """Export a timestamped snapshot and refresh the latest copy."""
    repo_root = _repo_root()
    parser = argparse.ArgumentParser(description="Export converter config to a JSON snapshot.")
    parser.add_argument("--config", default=str(repo_root / "config" / "converter_config.xlsx"))
    parser.add_argument("--exports-dir", default=str(repo_root / "config" / "exports"))
    args = parser.parse_args(argv)

    sys.path.insert(0, str(repo_root / "src"))
    from sheetcsv.config import export_snapshot
    from sheetcsv.errors import ConfigLoadError

    exports_dir = Path(args.exports_dir)
    ts = dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    stamped_path = exports_dir / f"config_snapshot_{ts}.json"
    latest_path = exports_dir / "config_snapshot_latest.json"

    try:
        export_snapshot(args.config, stamped_path)
    except ConfigLoadError as exc:
        print(f"Cannot export snapshot: {exc}")
        return 1
    shutil.copyfile(stamped_path, latest_path)

    print(f"Wrote snapshot: {stamped_path}")
    print(f"Wrote latest : {latest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
