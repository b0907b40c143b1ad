"""
INSTRUCTION HEADER
Tests for sheetcsv.workbook: reading real .xlsx files into Sheets.
"""

import pytest

from sheetcsv.cells import CellKind, cell_to_str
from sheetcsv.errors import SheetNotFoundError, WorkbookOpenError
from sheetcsv.workbook import Sheet, open_workbook


def test_sheet_rows_trim_trailing_empties_and_mark_absent_rows(make_xlsx) -> None:
    path = make_xlsx(
        "data.xlsx",
        {"Orders": [["Key", "Name", None], [None, None, None], ["K1", "=A1&B1", 3.7]]},
    )

    with open_workbook(path) as book:
        assert book.sheet_names == ["Orders"]
        sheet = book.sheet("Orders")

    assert sheet.max_row_index == 2
    assert len(sheet.row(0)) == 2
    assert sheet.row(1) is None
    assert sheet.row(99) is None
    assert sheet.cell(2, 1).kind is CellKind.FORMULA
    assert [cell_to_str(c) for c in sheet.row(2)] == ["K1", "A1&B1", "3"]


def test_cell_at_uses_spreadsheet_references() -> None:
    sheet = Sheet.from_values("s", [["a", "b"], ["c", "d"]])
    assert cell_to_str(sheet.cell_at("B2")) == "d"
    assert sheet.cell_at("Z9") is None


def test_missing_sheet_raises(make_xlsx) -> None:
    path = make_xlsx("data.xlsx", {"Orders": [["Key"]]})
    with open_workbook(path) as book:
        with pytest.raises(SheetNotFoundError):
            book.sheet("orders")


def test_unreadable_workbook_raises(tmp_path) -> None:
    with pytest.raises(WorkbookOpenError):
        with open_workbook(tmp_path / "missing.xlsx"):
            pass

    bogus = tmp_path / "bogus.xlsx"
    bogus.write_text("not a workbook", encoding="utf-8")
    with pytest.raises(WorkbookOpenError):
        with open_workbook(bogus):
            pass


def test_empty_sheet_has_no_rows(make_xlsx) -> None:
    path = make_xlsx("data.xlsx", {"Empty": []})
    with open_workbook(path) as book:
        assert book.sheet("Empty").max_row_index == -1
