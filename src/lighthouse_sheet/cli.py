"""Command-line argument parsing for the Lighthouse-to-spreadsheet reporter."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for a reporting run.

    Every option is optional here; values left unset fall back to the
    environment and ``.env`` file in :func:`lighthouse_sheet.config.load_config`.
    """
    parser = argparse.ArgumentParser(
        prog="lighthouse-to-spreadsheet",
        description=(
            "Append a Lighthouse performance result, tagged with git state, "
            "as one row of a Google Sheet."
        ),
    )

    parser.add_argument(
        "--lighthouse-result",
        default=None,
        help="Path to the Lighthouse JSON report (env: LIGHTHOUSE_RESULT_PATH).",
    )
    parser.add_argument(
        "--spreadsheet-id",
        default=None,
        help="Target Google spreadsheet id (env: SPREADSHEET_ID).",
    )
    parser.add_argument(
        "--sheet-name",
        default=None,
        help="Target sheet name inside the spreadsheet (env: SHEET_NAME).",
    )
    parser.add_argument(
        "--project",
        default=None,
        help="Project label for the row (env: PROJECT_NAME, default: current directory name).",
    )
    parser.add_argument(
        "--service-account",
        default=None,
        help="Path to the Google service-account key file (env: SERVICE_ACCOUNT_FILE).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (env: LOG_LEVEL, default: INFO).",
    )

    return parser.parse_args(argv)
