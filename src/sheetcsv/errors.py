"""
INSTRUCTION HEADER
What this file does: Defines the exception types raised by the converter.
Where it runs: Imported by library modules. Never run directly.
Notes: Everything derives from ConverterError so the orchestrator can contain
failures to a single sheet configuration with one except clause.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for all sheetcsv failures."""


class ConfigLoadError(ConverterError):
    """The configuration source could not be read."""


class WorkbookOpenError(ConverterError):
    """The data workbook could not be opened."""


class SheetNotFoundError(ConverterError):
    def __init__(self, sheet_name: str):
        super().__init__(f"Sheet not found: {sheet_name}")
        self.sheet_name = sheet_name


class RangeSpecError(ConverterError, ValueError):
    """A Range setting contained tokens that could not be parsed (strict mode)."""

    def __init__(self, spec: str, tokens: list[str] | tuple[str, ...]):
        super().__init__(f"Invalid range format: {spec!r} (bad tokens: {', '.join(tokens)})")
        self.spec = spec
        self.tokens = tuple(tokens)


class OutputWriteError(ConverterError):
    """A CSV file or its output directory could not be written."""
