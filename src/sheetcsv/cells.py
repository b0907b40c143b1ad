"""
INSTRUCTION HEADER

What this file does (plain English):
- Models one spreadsheet cell as a small closed set of kinds: text, number,
  boolean, formula, empty (plus error, for error codes and anything unknown).
- Converts any cell to the canonical string that ends up in the CSV.
- Main exports: CellKind, Cell, cell_to_str(cell).

Conversion rules (cell_to_str):
- missing cell (None)  -> ""
- text                 -> the text, unmodified
- number               -> integer part only, e.g. 3.9 -> "3", -3.9 -> "-3"
                          (fractions are dropped on purpose; callers that need
                          decimals must keep the value as text in the workbook)
- boolean              -> "true" / "false"
- formula              -> the formula text without the leading "=", e.g. "SUM(A1:A3)"
- empty / error        -> ""

Where it runs: Imported by the extractor and the config loader. Never run directly.
"""

from __future__ import annotations

import datetime as dt
import enum
import math
from dataclasses import dataclass
from typing import Any

from openpyxl.utils.datetime import to_excel


class CellKind(enum.Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FORMULA = "formula"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    value: Any = None

    @classmethod
    def text(cls, value: str) -> "Cell":
        return cls(CellKind.TEXT, value)

    @classmethod
    def number(cls, value: int | float) -> "Cell":
        return cls(CellKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> "Cell":
        return cls(CellKind.BOOLEAN, bool(value))

    @classmethod
    def formula(cls, expression: str) -> "Cell":
        return cls(CellKind.FORMULA, expression[1:] if expression.startswith("=") else expression)

    @classmethod
    def empty(cls) -> "Cell":
        return cls(CellKind.EMPTY)

    @classmethod
    def from_openpyxl(cls, cell: Any) -> "Cell":
        """
        Build a Cell from an openpyxl cell (regular, merged or read-only empty cell).

        Workbooks must be loaded with data_only=False for formulas to arrive as text.
        Dates are stored as serial numbers in the file, so they come back as numbers.
        """
        value = getattr(cell, "value", None)
        data_type = getattr(cell, "data_type", None)

        if value is None:
            return cls.empty()
        if data_type == "f":
            # ArrayFormula / DataTableFormula keep the expression on .text
            expression = value if isinstance(value, str) else getattr(value, "text", None)
            if expression is None:
                return cls(CellKind.ERROR, value)
            return cls.formula(str(expression))
        if data_type == "e":
            return cls(CellKind.ERROR, value)
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, (int, float)):
            return cls.number(value)
        if isinstance(value, (dt.datetime, dt.date, dt.time, dt.timedelta)):
            serial = to_excel(value)
            return cls.number(serial) if serial is not None else cls.empty()
        if isinstance(value, str):
            return cls.text(value)
        return cls(CellKind.ERROR, value)


def _number_to_str(value: Any) -> str:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ""
    if not math.isfinite(number):
        return ""
    if isinstance(value, int):
        return str(value)
    return str(int(number))


def cell_to_str(cell: Cell | None) -> str:
    if cell is None:
        return ""
    kind = cell.kind
    if kind is CellKind.TEXT:
        return "" if cell.value is None else str(cell.value)
    if kind is CellKind.NUMBER:
        return _number_to_str(cell.value)
    if kind is CellKind.BOOLEAN:
        return "true" if cell.value else "false"
    if kind is CellKind.FORMULA:
        return "" if cell.value is None else str(cell.value)
    return ""
