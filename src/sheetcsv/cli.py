"""
INSTRUCTION HEADER
What this file does: Command-line entry point that converts workbook sheets to CSV files.
Where it runs: Terminal (repo root), as `sheetcsv ...` once installed, or via tools/convert_workbook.py.
Inputs: `--config` converter config workbook (.xlsx) or snapshot (.json); `--workbook` data workbook.
Outputs: One CSV per config row under `--output-dir`; optional JSON run report (`--report`).
How to run: `sheetcsv --config config/converter_config.xlsx --workbook data/Internal.xlsx --output-dir output`
What success looks like: log ends with `Conversion completed successfully.` and exit code 0.
Exit codes: 0 = every sheet written; 1 = finished, but some sheets failed; 2 = config or workbook unreadable.
Common failures + fixes: "Sheet not found" -> fix the Sheet Name column (case-sensitive);
"Invalid range format" -> fix the Range column, or run with --strict-ranges to make it fail loudly.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Sequence

from .config import load_sheet_configs, load_snapshot_configs
from .config.schema import SheetConfig
from .convert import run_conversion
from .errors import ConfigLoadError, WorkbookOpenError
from .logger import get_logger, set_level
from .settings import DEFAULT_OUTPUT_DIR, ENV_CONFIG, ENV_OUTPUT_DIR, ENV_WORKBOOK, RunSettings

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetcsv",
        description="Convert workbook sheets to CSV files as described by a converter config workbook.",
    )
    parser.add_argument(
        "--config",
        default=os.environ.get(ENV_CONFIG),
        metavar="PATH",
        help=f"Converter config workbook (.xlsx) or JSON snapshot (default: ${ENV_CONFIG}).",
    )
    parser.add_argument(
        "--workbook",
        default=os.environ.get(ENV_WORKBOOK),
        metavar="PATH",
        help=f"Data workbook whose sheets are converted (default: ${ENV_WORKBOOK}).",
    )
    parser.add_argument(
        "--output-dir",
        default=os.environ.get(ENV_OUTPUT_DIR, str(DEFAULT_OUTPUT_DIR)),
        metavar="DIR",
        help=f"Base output directory (default: ${ENV_OUTPUT_DIR} or ./{DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--strict-ranges",
        action="store_true",
        help="Fail a sheet whose Range contains an unparseable token instead of ignoring the token.",
    )
    parser.add_argument(
        "--report",
        default=None,
        metavar="PATH",
        help="Write a JSON run report to this path.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> RunSettings:
    return RunSettings(
        config_path=Path(args.config),
        workbook_path=Path(args.workbook),
        base_output_dir=Path(args.output_dir),
        strict_ranges=args.strict_ranges,
        report_path=Path(args.report) if args.report else None,
        log_level=args.log_level,
    )


def load_configs(config_path: Path) -> list[SheetConfig]:
    if config_path.suffix.lower() == ".json":
        return load_snapshot_configs(config_path)
    return load_sheet_configs(config_path, raise_on_error=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.config:
        parser.error(f"--config is required (or set {ENV_CONFIG})")
    if not args.workbook:
        parser.error(f"--workbook is required (or set {ENV_WORKBOOK})")

    settings = settings_from_args(args)
    set_level(settings.log_level)

    try:
        configs = load_configs(settings.config_path)
    except ConfigLoadError as exc:
        logger.error("Cannot load sheet configurations: %s", exc)
        return EXIT_FATAL

    try:
        report = run_conversion(settings, configs)
    except WorkbookOpenError as exc:
        logger.error("%s", exc)
        return EXIT_FATAL

    return EXIT_OK if report.ok else EXIT_PARTIAL


if __name__ == "__main__":
    raise SystemExit(main())
