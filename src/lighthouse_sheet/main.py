"""Entry point: append one Lighthouse result row to a Google Sheet."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Optional, Sequence

from .appender import append_row
from .auth import build_session
from .cli import parse_args
from .config import load_config
from .errors import (
    AppendError,
    AuthenticationError,
    ConfigurationError,
    LighthouseSheetError,
    ParseError,
)
from .git_state import GitStateReader
from .models import SheetTarget
from .report import read_report
from .row import compose_row, header_row
from .sheets_client import SheetsClient

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_PARSE = 4
EXIT_APPEND = 5

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def run_pipeline(argv: Optional[Sequence[str]] = None) -> int:
    """Run one reporting pass and map failures to process exit codes.

    Order: configuration, credentials, report parsing, git state, row
    composition, sheet append. Credentials are resolved before the report is
    read so authorization problems fail fast.

    Returns:
        ``0`` on success, ``2`` for configuration errors, ``3`` for
        authentication errors, ``4`` for report parse errors, ``5`` for
        sheet append errors and ``1`` for anything else.
    """
    try:
        args = parse_args(argv)
        config = load_config(
            lighthouse_result=args.lighthouse_result,
            spreadsheet_id=args.spreadsheet_id,
            sheet_name=args.sheet_name,
            project_name=args.project,
            service_account=args.service_account,
            log_level=args.log_level,
        )
        logging.getLogger().setLevel(config.log_level)
        logger.info(
            "Starting Lighthouse upload",
            extra={
                "lighthouse_result": str(config.lighthouse_result_path),
                "spreadsheet_id": config.spreadsheet_id,
                "sheet_name": config.sheet_name,
            },
        )

        session = build_session(config.service_account_file)
        sheets_client = SheetsClient(session=session)

        report = read_report(config.lighthouse_result_path)
        repo_state = GitStateReader().read()

        row = compose_row(
            report=report,
            repo=repo_state,
            project_name=config.project_name,
            timestamp=datetime.now(),
        )
        target = SheetTarget(spreadsheet_id=config.spreadsheet_id, sheet_name=config.sheet_name)
        append_row(sheets_client, target, header_row(), row)

        print(
            f"Appended Lighthouse result for '{config.project_name}' "
            f"to sheet '{config.sheet_name}'."
        )
        return EXIT_OK
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except AuthenticationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_AUTHENTICATION
    except ParseError as exc:
        print(f"ERROR: Failed to read Lighthouse result: {exc}", file=sys.stderr)
        return EXIT_PARSE
    except AppendError as exc:
        print(f"ERROR: Failed to append spreadsheet: {exc}", file=sys.stderr)
        return EXIT_APPEND
    except LighthouseSheetError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except Exception:
        logger.exception("Unexpected error during Lighthouse upload")
        return EXIT_UNEXPECTED


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return run_pipeline(argv)


if __name__ == "__main__":
    raise SystemExit(main())
