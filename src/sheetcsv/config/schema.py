"""
INSTRUCTION HEADER

What this file does (plain English):
- Describes the converter config workbook: the header row of its first sheet
  and the column position of every setting.
- Defines SheetConfig, the immutable settings for one sheet -> CSV conversion
  (one per data row of the config sheet).
- Main exports: CONFIG_SHEET_NAME, HEADERS, COLUMNS, SheetConfig.

Config sheet layout (row 1 = headers, one sheet per row after that):
    A  No.                     free-form label, ignored
    B  Sheet Name              tab to read from the data workbook
    C  CSV Name                output file name, e.g. orders.csv
    D  Transpose               TRUE / "true" to transpose (anything else = false)
    E  Comment Read            TRUE / "true" to keep the Comment column and drop "#" rows
    F  Range                   rows to export, e.g. "2-4,7,A12"; blank or NA = all rows
    G  Exclude From Transpose  comma-separated sheet names never transposed
    H  Output Directory        sub-folder of the base output directory

Where it runs: Imported by the config loader, the converter and the tools. Never run directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CONFIG_SHEET_NAME = "SHEETS"

HEADERS: list[str] = [
    "No.",
    "Sheet Name",
    "CSV Name",
    "Transpose",
    "Comment Read",
    "Range",
    "Exclude From Transpose",
    "Output Directory",
]

# 0-based column positions in the config sheet
COLUMNS: dict[str, int] = {
    "sheet_name": 1,
    "csv_name": 2,
    "transpose": 3,
    "comment_read": 4,
    "range": 5,
    "exclude_from_transpose": 6,
    "output_directory": 7,
}


@dataclass(frozen=True)
class SheetConfig:
    sheet_name: str
    csv_name: str
    transpose: bool = False
    comment_read: bool = False
    range: str = ""
    exclude_from_transpose: frozenset[str] = field(default_factory=frozenset)
    output_directory: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "sheet_name": self.sheet_name,
            "csv_name": self.csv_name,
            "transpose": self.transpose,
            "comment_read": self.comment_read,
            "range": self.range,
            "exclude_from_transpose": sorted(self.exclude_from_transpose),
            "output_directory": self.output_directory,
        }

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "SheetConfig":
        return cls(
            sheet_name=str(record.get("sheet_name") or ""),
            csv_name=str(record.get("csv_name") or ""),
            transpose=bool(record.get("transpose", False)),
            comment_read=bool(record.get("comment_read", False)),
            range=str(record.get("range") or ""),
            exclude_from_transpose=frozenset(record.get("exclude_from_transpose") or ()),
            output_directory=str(record.get("output_directory") or ""),
        )
