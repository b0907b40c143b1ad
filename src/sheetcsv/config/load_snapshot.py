"""
INSTRUCTION HEADER

What this file does (plain English):
- Loads a JSON config snapshot (written by export_snapshot) back into SheetConfig objects.
- Validates the top-level shape first, so a stale or hand-edited file gives a
  clear error instead of a KeyError halfway through a run.
- Main exports: load_snapshot(json_path) -> dict, load_snapshot_configs(json_path) -> list[SheetConfig]

Where it runs: Imported by sheetcsv.cli when --config points at a .json file.
Common failures + fixes:
  - "Snapshot missing 'sheets' list": re-export via tools/export_config_snapshot.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from ..errors import ConfigLoadError
from .schema import SheetConfig


def load_snapshot(json_path: str | Path) -> dict[str, Any]:
    json_path = Path(json_path)
    try:
        data = orjson.loads(json_path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        raise ConfigLoadError(f"Cannot read snapshot {json_path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("sheets"), list):
        raise ConfigLoadError("Snapshot missing 'sheets' list.")
    for i, record in enumerate(data["sheets"]):
        if not isinstance(record, dict) or "sheet_name" not in record:
            raise ConfigLoadError(f"Snapshot entry {i} is not a sheet configuration.")
    return data


def load_snapshot_configs(json_path: str | Path) -> list[SheetConfig]:
    return [SheetConfig.from_dict(r) for r in load_snapshot(json_path)["sheets"]]
