#!/usr/bin/env python3
"""
Taxonomy Guard - game plan taxonomy validation
Main entry point for the command line
"""

import sys
import json
import logging
import argparse
from dataclasses import replace
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config import APP_NAME, APP_VERSION, get_settings
from config.constants import SQLITE_EXTENSIONS
from data import create_reference_source
from domain.exceptions import TaxonomyGuardBaseException
from operations import build_report, export_issues_csv, validate_upload
from services import UploadReader

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """
    Configure logging for the application.

    Logs go to stderr so the JSON report on stdout stays machine-readable.
    Suppresses noisy third-party loggers.
    """
    # Create formatter with timestamp, level, module name
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger('openpyxl').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    logging.info("=" * 60)
    logging.info(f"{APP_NAME} {APP_VERSION}")
    logging.info(f"Logging initialized - Level: {level.upper()}")
    logging.info("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taxonomy-guard",
        description="Validate a game plan upload against the master taxonomy.",
    )
    parser.add_argument("--reference", required=True, type=Path,
                        help="Reference data (.json snapshot or SQLite database)")
    parser.add_argument("--rows", required=True, type=Path,
                        help="Upload to validate (.csv, .xlsx, .xls)")
    parser.add_argument("--sheet", default=None, help="Excel sheet name (default: first sheet)")
    parser.add_argument("--business-unit", default=None,
                        help="Business unit assumed for rows without one")
    parser.add_argument("--abp-year", type=int, default=None,
                        help="Financial cycle year that dates must fall in")
    parser.add_argument("--auto-create", action="store_true",
                        help="Report unknown ranges/campaigns as pending creation")
    parser.add_argument("--max-issues", type=int, default=None,
                        help="Cap for issues listed in the report (0 = no cap)")
    parser.add_argument("--export-csv", type=Path, default=None,
                        help="Also write every issue to this CSV file")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def main(argv=None) -> int:
    """
    Main application entry point.

    Returns:
        0 if the upload can be imported, 1 if critical issues block it,
        2 if the settings are invalid or the reference data or upload
        could not be read
    """
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.abp_year is not None:
        overrides["abp_year"] = args.abp_year
    if args.auto_create:
        overrides["auto_create"] = True
    if args.max_issues is not None:
        overrides["max_reported_issues"] = args.max_issues
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        settings = replace(get_settings(), **overrides)
    except ValueError as e:
        print(json.dumps({"error": "Invalid settings", "details": {"reason": str(e)}}, indent=2))
        return 2

    # Setup logging FIRST
    setup_logging(settings.log_level)

    backend = "sqlite" if args.reference.suffix.lower() in SQLITE_EXTENSIONS else "json"
    try:
        source = create_reference_source(backend, args.reference)
        logger.info(f"Reference data: {source.describe()}")
        rows = UploadReader(args.rows).read_rows(sheet_name=args.sheet)
        run = validate_upload(
            source,
            rows,
            settings=settings,
            default_business_unit=args.business_unit,
        )
    except TaxonomyGuardBaseException as e:
        logger.error(f"Validation aborted: {e}")
        print(json.dumps({"error": e.message, "details": e.details}, indent=2, default=str))
        return 2

    report = build_report(
        run.issues,
        max_issues=settings.max_reported_issues,
        diagnostics=run.diagnostics,
    )
    report["rows"] = run.row_count
    print(json.dumps(report, indent=2, default=str))

    if args.export_csv:
        export_issues_csv(run.issues, args.export_csv)

    return 0 if run.can_import else 1


if __name__ == "__main__":
    sys.exit(main())
