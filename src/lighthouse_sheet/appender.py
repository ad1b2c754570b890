"""Header-bootstrapping row append against a Google Sheet.

The header is written when, and only when, column A of the target sheet reads
back empty. There is no stored "header written" flag: the read-then-append
sequence is re-run on every call. The Sheets API offers no conditional write,
so two runs racing against an empty sheet can both see it empty and both write
a header. That race is accepted; callers needing a single writer must
serialize runs themselves.
"""

from __future__ import annotations

import logging
from typing import Any, List, Protocol, Sequence

from .errors import AppendError, SheetsApiError
from .models import Row, SheetTarget

logger = logging.getLogger(__name__)


class ValuesClient(Protocol):
    """The two Sheets operations the appender depends on."""

    def get_values(self, spreadsheet_id: str, range_ref: str) -> List[List[Any]]:
        ...

    def append_values(
        self,
        spreadsheet_id: str,
        range_ref: str,
        rows: Sequence[Sequence[Any]],
    ) -> Any:
        ...


def append_row(client: ValuesClient, target: SheetTarget, header: Row, row: Row) -> bool:
    """Append ``row`` to ``target``, writing ``header`` first if the sheet is empty.

    Steps:
    - Read the full column-A range of the sheet.
    - If no rows come back, append ``header``.
    - Append ``row``.

    A header already appended is not rolled back if the data append fails.

    Returns:
        ``True`` when the header row was written by this call.

    Raises:
        ValueError: If ``header`` and ``row`` differ in length.
        AppendError: If the probe or either append fails; the Sheets error is
            chained as the cause.
    """
    if len(header) != len(row):
        raise ValueError(
            f"Row has {len(row)} cells but the header has {len(header)} columns."
        )

    range_ref = target.column_a_range

    try:
        existing = client.get_values(target.spreadsheet_id, range_ref)
    except SheetsApiError as exc:
        raise AppendError(f"Failed to read '{range_ref}' from spreadsheet {target.spreadsheet_id}: {exc}") from exc

    header_written = False
    if not existing:
        try:
            client.append_values(target.spreadsheet_id, range_ref, [header])
        except SheetsApiError as exc:
            raise AppendError(f"Failed to write header row to '{range_ref}': {exc}") from exc
        header_written = True
        logger.info(
            "Wrote header row to empty sheet",
            extra={"spreadsheet_id": target.spreadsheet_id, "sheet_name": target.sheet_name},
        )

    try:
        client.append_values(target.spreadsheet_id, range_ref, [row])
    except SheetsApiError as exc:
        raise AppendError(f"Failed to append data row to '{range_ref}': {exc}") from exc

    logger.info(
        "Appended data row",
        extra={
            "spreadsheet_id": target.spreadsheet_id,
            "sheet_name": target.sheet_name,
            "header_written": header_written,
        },
    )
    return header_written
