"""Command line entry point that runs the pipeline and writes the payload."""
import argparse
import logging
import sys
from pathlib import Path

from stoneledger.core.config import load_settings
from stoneledger.core.errors import ConfigurationError, SourceFetchError
from stoneledger.core.logging import configure_logging
from stoneledger.ingestion.sources import build_row_source
from stoneledger.processing.pipeline import fetch_raw_rows, run_pipeline
from stoneledger.reporting.sinks import write_excel, write_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(
        description="Fetch CRM sheets and emit companies, orders, contacts and notes as JSON"
    )
    parser.add_argument(
        "--output",
        default="-",
        help="JSON file to write the payload to ('-' for stdout)",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Also write an Excel workbook with one sheet per collection",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write the raw debug ranges instead of the mapped payload",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Env file with sheet ids and credentials (defaults to secrets/sheets.env)",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL for this run")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the pipeline from the command line."""

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.env_file)
        source = build_row_source(settings)
        if args.debug:
            write_json(fetch_raw_rows(settings, source), args.output)
            return 0
        data = run_pipeline(settings, source)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    except SourceFetchError as exc:
        print(f"Failed to fetch data from sheets: {exc}", file=sys.stderr)
        return 1

    write_json(data.to_dict(), args.output)
    if args.excel_output:
        write_excel(data, args.excel_output)
        logger.info("Wrote Excel output to %s", args.excel_output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
