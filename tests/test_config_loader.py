"""
INSTRUCTION HEADER
Tests for sheetcsv.config: decoding the config workbook and JSON snapshots.
"""

import logging

import pytest

from sheetcsv.cells import Cell
from sheetcsv.config import (
    SheetConfig,
    export_snapshot,
    load_sheet_configs,
    load_snapshot_configs,
)
from sheetcsv.config.excel_io import read_sheet_configs, string_list, text_boolean
from sheetcsv.errors import ConfigLoadError
from sheetcsv.workbook import Sheet


def test_text_boolean() -> None:
    assert text_boolean(Cell.boolean(True))
    assert text_boolean(Cell.text(" TRUE "))
    assert not text_boolean(Cell.text("yes"))
    assert not text_boolean(Cell.number(1))
    assert not text_boolean(None)


def test_string_list_only_reads_text() -> None:
    assert string_list(Cell.text("Orders, Params ,,")) == ["Orders", "Params"]
    assert string_list(Cell.number(5)) == []
    assert string_list(None) == []


def test_load_sheet_configs_decodes_rows(make_config_xlsx) -> None:
    path = make_config_xlsx(
        [
            [1, "Orders", "orders.csv", "TRUE", True, "2-4", "Orders, Params", "sales"],
            [None, None, None, None, None, None, None, None],
            [3, "Params", "params.csv", False, "no", None, None, None],
            [4, "Short", "short.csv"],
        ]
    )

    configs = load_sheet_configs(path)

    assert configs == [
        SheetConfig(
            sheet_name="Orders",
            csv_name="orders.csv",
            transpose=True,
            comment_read=True,
            range="2-4",
            exclude_from_transpose=frozenset({"Orders", "Params"}),
            output_directory="sales",
        ),
        SheetConfig(sheet_name="Params", csv_name="params.csv"),
        SheetConfig(sheet_name="Short", csv_name="short.csv"),
    ]


def test_blank_config_rows_are_skipped_with_a_warning(caplog) -> None:
    sheet = Sheet.from_values(
        "SHEETS",
        [
            ["Id", "Sheet Name", "CSV Name"],
            [1, "Orders", "orders.csv"],
            [None, None, "  "],
            None,
            [4, "Params", "params.csv"],
        ],
    )

    with caplog.at_level(logging.WARNING, logger="sheetcsv.config.excel_io"):
        configs = read_sheet_configs(sheet)

    assert [c.sheet_name for c in configs] == ["Orders", "Params"]
    assert "Skipping blank config row 3" in caplog.text
    assert "Skipping blank config row 4" in caplog.text


def test_missing_config_logs_and_returns_empty(tmp_path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="sheetcsv.config.excel_io"):
        assert load_sheet_configs(tmp_path / "nope.xlsx") == []
    assert "Error loading sheet configurations" in caplog.text

    with pytest.raises(ConfigLoadError):
        load_sheet_configs(tmp_path / "nope.xlsx", raise_on_error=True)


def test_snapshot_reloads_the_same_configs(make_config_xlsx, tmp_path) -> None:
    path = make_config_xlsx([[1, "Orders", "orders.csv", "true", "false", "NA", "Params", "out"]])

    snapshot = export_snapshot(path, tmp_path / "exports" / "snapshot.json")

    assert load_snapshot_configs(snapshot) == load_sheet_configs(path)


def test_bad_snapshot_is_rejected(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"sheets": {"Orders": []}}', encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_snapshot_configs(bad)
