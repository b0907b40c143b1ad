"""
INSTRUCTION HEADER
Tests for sheetcsv.cells: every cell kind has a defined string form and nothing raises.
"""

import datetime as dt

import pytest
from openpyxl import Workbook

from sheetcsv.cells import Cell, CellKind, cell_to_str


def test_missing_cell_is_empty_string() -> None:
    assert cell_to_str(None) == ""


def test_text_is_returned_unmodified() -> None:
    assert cell_to_str(Cell.text("  Mixed Case, with comma ")) == "  Mixed Case, with comma "


@pytest.mark.parametrize(
    "value, expected",
    [(3.9, "3"), (-3.9, "-3"), (10, "10"), (0.2, "0"), (1e3, "1000")],
)
def test_numbers_are_truncated_toward_zero(value, expected) -> None:
    assert cell_to_str(Cell.number(value)) == expected


def test_non_finite_numbers_do_not_raise() -> None:
    assert cell_to_str(Cell.number(float("nan"))) == ""
    assert cell_to_str(Cell.number(float("inf"))) == ""


def test_booleans_are_lowercase_words() -> None:
    assert cell_to_str(Cell.boolean(True)) == "true"
    assert cell_to_str(Cell.boolean(False)) == "false"


def test_formula_returns_expression_text() -> None:
    assert cell_to_str(Cell.formula("=SUM(A1:A3)")) == "SUM(A1:A3)"


def test_empty_and_error_cells_are_empty_string() -> None:
    assert cell_to_str(Cell.empty()) == ""
    assert cell_to_str(Cell(CellKind.ERROR, "#REF!")) == ""


def test_from_openpyxl_maps_each_kind() -> None:
    wb = Workbook()
    ws = wb.active
    ws.append(["text", 2.5, True, "=B1*2", None, dt.datetime(2024, 1, 1), "#N/A"])
    cells = [Cell.from_openpyxl(c) for c in ws[1]]

    assert [c.kind for c in cells] == [
        CellKind.TEXT,
        CellKind.NUMBER,
        CellKind.BOOLEAN,
        CellKind.FORMULA,
        CellKind.EMPTY,
        CellKind.NUMBER,
        CellKind.ERROR,
    ]
    assert [cell_to_str(c) for c in cells] == ["text", "2", "true", "B1*2", "", "45292", ""]
