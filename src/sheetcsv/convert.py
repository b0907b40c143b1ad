"""
INSTRUCTION HEADER

What this file does (plain English):
- Runs the conversion: for every SheetConfig, read the sheet, extract the rows,
  transpose/clean the headers, and write the CSV.
- Each config is handled on its own. If one fails (missing sheet, bad range in
  strict mode, unwritable folder, ...) the error is logged, recorded in the run
  report, and the next config still runs.
- Main exports: convert_sheet, convert_all, run_conversion, ConversionReport, SheetResult.

Where it runs: Called by sheetcsv.cli. Never run directly.
Inputs:  RunSettings (paths, strictness) and a list of SheetConfig.
Outputs: One CSV per config under <base_output_dir>/<Output Directory>/<CSV Name>;
         returns a ConversionReport (optionally written to JSON with write_report).
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import orjson

from .config.schema import SheetConfig
from .csv_writer import write_csv
from .errors import ConverterError, OutputWriteError
from .extract import extract_matrix
from .logger import get_logger
from .settings import RunSettings
from .transform import transform_matrix
from .workbook import DataWorkbook, open_workbook

logger = get_logger(__name__)

STATUS_WRITTEN = "written"
STATUS_FAILED = "failed"


@dataclass
class SheetResult:
    sheet_name: str
    csv_path: str | None
    status: str
    rows: int = 0
    error: str | None = None


@dataclass
class ConversionReport:
    results: list[SheetResult] = field(default_factory=list)
    started_at: dt.datetime = field(default_factory=dt.datetime.now)
    finished_at: dt.datetime | None = None

    @property
    def written(self) -> list[SheetResult]:
        return [r for r in self.results if r.status == STATUS_WRITTEN]

    @property
    def failed(self) -> list[SheetResult]:
        return [r for r in self.results if r.status == STATUS_FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed

    def finish(self) -> None:
        self.finished_at = dt.datetime.now()

    def log_summary(self) -> None:
        logger.info(
            "Conversion summary: configs=%d, written=%d, failed=%d",
            len(self.results),
            len(self.written),
            len(self.failed),
        )
        for r in self.failed:
            logger.info("  failed: %s (%s)", r.sheet_name, r.error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "started_at": self.started_at.isoformat(timespec="seconds"),
            "finished_at": self.finished_at.isoformat(timespec="seconds") if self.finished_at else None,
            "ok": self.ok,
            "results": [
                {
                    "sheet_name": r.sheet_name,
                    "csv_path": r.csv_path,
                    "status": r.status,
                    "rows": r.rows,
                    "error": r.error,
                }
                for r in self.results
            ],
        }

    def write_report(self, output_path: str | Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2))
        return output_path


def convert_sheet(book: DataWorkbook, config: SheetConfig, settings: RunSettings) -> tuple[Path, int]:
    """Convert one configured sheet; returns (csv_path, rows_written). Raises ConverterError."""
    if not config.csv_name:
        raise OutputWriteError(f"No CSV name configured for sheet: {config.sheet_name}")
    csv_path = settings.csv_path_for(config.output_directory, config.csv_name)

    sheet = book.sheet(config.sheet_name)
    matrix = extract_matrix(sheet, config, strict_ranges=settings.strict_ranges)
    matrix = transform_matrix(matrix, config)
    write_csv(csv_path, matrix)

    logger.info("Wrote %s (%d row(s))", csv_path, len(matrix))
    return csv_path, len(matrix)


def convert_all(book: DataWorkbook, configs: Iterable[SheetConfig], settings: RunSettings) -> ConversionReport:
    report = ConversionReport()
    for config in configs:
        try:
            csv_path, rows = convert_sheet(book, config, settings)
        except ConverterError as exc:
            logger.error("Error processing sheet: %s. %s", config.sheet_name, exc)
            report.results.append(SheetResult(config.sheet_name, None, STATUS_FAILED, error=str(exc)))
            continue
        except Exception as exc:
            logger.exception("Unexpected error processing sheet: %s", config.sheet_name)
            report.results.append(SheetResult(config.sheet_name, None, STATUS_FAILED, error=repr(exc)))
            continue
        report.results.append(SheetResult(config.sheet_name, str(csv_path), STATUS_WRITTEN, rows=rows))

    report.finish()
    return report


def run_conversion(settings: RunSettings, configs: Iterable[SheetConfig]) -> ConversionReport:
    """Open the data workbook once and convert every config. Raises WorkbookOpenError."""
    with open_workbook(settings.workbook_path) as book:
        report = convert_all(book, configs, settings)

    report.log_summary()
    if settings.report_path is not None:
        report.write_report(settings.report_path)
    logger.info("Conversion completed%s.", " successfully" if report.ok else " with errors")
    return report
