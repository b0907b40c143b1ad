"""
INSTRUCTION HEADER
Pytest configuration and shared fixtures.
Builds small .xlsx workbooks on disk with openpyxl so tests exercise the real reader.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from openpyxl import Workbook

from sheetcsv.config.schema import HEADERS


def _save_workbook(path: Path, sheets: dict[str, list[list[Any]]]) -> Path:
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(row)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    """make_xlsx("data.xlsx", {"Orders": [[...], ...]}) -> path of the saved workbook."""

    def _make(name: str, sheets: dict[str, list[list[Any]]]) -> Path:
        return _save_workbook(tmp_path / name, sheets)

    return _make


@pytest.fixture
def make_config_xlsx(tmp_path: Path) -> Callable[..., Path]:
    """Config workbook with the standard header row followed by `rows`."""

    def _make(rows: list[list[Any]], name: str = "config.xlsx") -> Path:
        return _save_workbook(tmp_path / name, {"SHEETS": [list(HEADERS), *rows]})

    return _make


@pytest.fixture
def orders_rows() -> list[list[Any]]:
    return [
        ["Key", "Name", "Amount"],
        ["K1", "Widget", 10],
    ]
