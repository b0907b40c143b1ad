"""
INSTRUCTION HEADER

What this file does (plain English):
- Parses the "Range" column of the converter config into the set of sheet rows
  to export, and filters a list of row indices against it.
- Main exports: RangeSpec, parse_range_spec(text, strict=False), select_rows(spec, row_indices).

Range spec format (all row numbers are 1-based, as shown in Excel):
    ""  / "NA"          -> no restriction, every row is eligible
    "2-4"               -> rows 2, 3 and 4
    "7"                 -> row 7
    "A12", "$B$7"       -> row 12 / row 7 (the column letters are ignored)
    "2-4,7,A12"         -> any mix of the above, comma separated

Unparseable tokens are logged and skipped; the other tokens still apply. If no
token parses at all, the spec falls back to "every row". With strict=True
unparseable tokens raise RangeSpecError instead.

Where it runs: Imported by sheetcsv.extract. Never run directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from openpyxl.utils.cell import coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException

from .errors import RangeSpecError
from .logger import get_logger

logger = get_logger(__name__)

UNRESTRICTED_VALUES = {"", "na"}

_SPAN_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")
_SINGLE_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class RangeSpec:
    """
    0-based rows selected by a range spec.

    rows holds single rows, spans holds inclusive (start, end) pairs; rows=None
    means every row. Spans stay as bounds so "1-1000000000" costs nothing.
    """

    rows: frozenset[int] | None = None
    spans: tuple[tuple[int, int], ...] = ()
    malformed: tuple[str, ...] = ()

    @property
    def unrestricted(self) -> bool:
        return self.rows is None

    def includes(self, row_index: int) -> bool:
        if self.rows is None or row_index in self.rows:
            return True
        return any(start <= row_index <= end for start, end in self.spans)

    def select(self, row_indices: Iterable[int]) -> list[int]:
        """Keep the indices this spec includes, in input order, without repeats."""
        seen: set[int] = set()
        selected: list[int] = []
        for idx in row_indices:
            if idx in seen or not self.includes(idx):
                continue
            seen.add(idx)
            selected.append(idx)
        return selected


def _parse_token(token: str) -> int | tuple[int, int] | None:
    """A single 0-based row, an inclusive 0-based (start, end) span, or None if unparseable."""
    m = _SPAN_RE.match(token)
    if m:
        start, end = int(m.group(1)), int(m.group(2))
        if start < 1:
            return None
        return (start - 1, end - 1)

    if _SINGLE_RE.match(token):
        row = int(token)
        return row - 1 if row >= 1 else None

    try:
        _column, row = coordinate_from_string(token)
    except (CellCoordinatesException, ValueError):
        return None
    return row - 1


def parse_range_spec(text: str | None, *, strict: bool = False) -> RangeSpec:
    spec = (text or "").strip()
    if spec.lower() in UNRESTRICTED_VALUES:
        return RangeSpec()

    rows: set[int] = set()
    spans: list[tuple[int, int]] = []
    malformed: list[str] = []
    for raw in spec.split(","):
        token = raw.strip()
        if not token:
            continue
        parsed = _parse_token(token)
        if parsed is None:
            malformed.append(token)
        elif isinstance(parsed, tuple):
            spans.append(parsed)
        else:
            rows.add(parsed)

    if malformed:
        if strict:
            raise RangeSpecError(spec, malformed)
        logger.warning("Invalid range format: %r (ignored tokens: %s)", spec, ", ".join(malformed))
        if not rows and not spans:
            # nothing usable left: fall back to every row
            return RangeSpec(malformed=tuple(malformed))

    return RangeSpec(rows=frozenset(rows), spans=tuple(spans), malformed=tuple(malformed))


def select_rows(spec: RangeSpec | str | None, row_indices: Iterable[int], *, strict: bool = False) -> list[int]:
    if not isinstance(spec, RangeSpec):
        spec = parse_range_spec(spec, strict=strict)
    return spec.select(row_indices)
