"""Tests for header bootstrapping and row appends against an in-memory sheet."""

import sys
import threading
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lighthouse_sheet.appender import append_row
from lighthouse_sheet.errors import AppendError, SheetsApiError
from lighthouse_sheet.models import MetricKey, MetricSample, PerformanceReport, RepositoryState, SheetTarget
from lighthouse_sheet.row import compose_row, header_row

TARGET = SheetTarget(spreadsheet_id="sheet-id", sheet_name="Perf")


class InMemorySheet:
    """Append-only stand-in for a Sheets tab."""

    def __init__(self, rows=None, probe_barrier=None):
        self.rows = [list(row) for row in rows or []]
        self.ranges = []
        self._lock = threading.Lock()
        self._probe_barrier = probe_barrier

    def get_values(self, spreadsheet_id, range_ref):
        self.ranges.append(range_ref)
        with self._lock:
            snapshot = [[row[0]] for row in self.rows]
        if self._probe_barrier is not None:
            self._probe_barrier.wait(timeout=5)
        return snapshot

    def append_values(self, spreadsheet_id, range_ref, rows):
        with self._lock:
            self.rows.extend(list(row) for row in rows)
        return {"updates": {"updatedRows": len(rows)}}


def _row(project: str = "demo"):
    report = PerformanceReport(
        overall_score=0.87,
        metrics={key: MetricSample(value=1000.0, score=0.5) for key in MetricKey},
    )
    return compose_row(report, RepositoryState(branch="main"), project, datetime(2024, 5, 1, 10, 0, 0))


def test_append_row_to_empty_sheet_writes_header_then_row():
    """Verify an empty sheet receives exactly one header followed by the row."""
    sheet = InMemorySheet()
    row = _row()

    header_written = append_row(sheet, TARGET, header_row(), row)

    assert header_written is True
    assert sheet.rows == [header_row(), row]
    assert sheet.ranges == ["Perf!A:A"]


def test_append_row_to_non_empty_sheet_only_appends_row():
    """Verify existing content is kept and only the data row is added."""
    existing = [header_row(), _row("previous")]
    sheet = InMemorySheet(rows=existing)
    row = _row()

    header_written = append_row(sheet, TARGET, header_row(), row)

    assert header_written is False
    assert sheet.rows == existing + [row]


def test_second_append_does_not_duplicate_header():
    """Verify two sequential runs give one header and two data rows."""
    sheet = InMemorySheet()
    first, second = _row("first"), _row("second")

    append_row(sheet, TARGET, header_row(), first)
    append_row(sheet, TARGET, header_row(), second)

    assert sheet.rows == [header_row(), first, second]


def test_appended_row_reads_back_as_last_row():
    """Verify the stored last row equals the composed row, column for column."""
    sheet = InMemorySheet()
    row = _row()

    append_row(sheet, TARGET, header_row(), row)

    assert sheet.rows[-1] == row


def test_concurrent_appends_to_empty_sheet_can_duplicate_header():
    """Verify the check-then-act race: both runs see an empty sheet and both write a header."""
    sheet = InMemorySheet(probe_barrier=threading.Barrier(2))
    rows = [_row("a"), _row("b")]
    errors = []

    def run(row):
        try:
            append_row(sheet, TARGET, header_row(), row)
        except Exception as exc:  # pragma: no cover - surfaced via assertion
            errors.append(exc)

    threads = [threading.Thread(target=run, args=(row,)) for row in rows]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert errors == []
    assert sum(1 for stored in sheet.rows if stored == header_row()) == 2
    assert len(sheet.rows) == 4


def test_probe_failure_raises_append_error_without_writing():
    """Verify a failed column read aborts before any append."""
    client = Mock()
    client.get_values.side_effect = SheetsApiError("403 forbidden")

    with pytest.raises(AppendError) as excinfo:
        append_row(client, TARGET, header_row(), _row())

    assert isinstance(excinfo.value.__cause__, SheetsApiError)
    client.append_values.assert_not_called()


def test_header_failure_raises_append_error_and_skips_row():
    """Verify a failed header write aborts before the data row."""
    client = Mock()
    client.get_values.return_value = []
    client.append_values.side_effect = SheetsApiError("500 backend error")

    with pytest.raises(AppendError, match="header"):
        append_row(client, TARGET, header_row(), _row())

    assert client.append_values.call_count == 1


def test_row_failure_after_header_keeps_header():
    """Verify a data-row failure does not roll back a header already written."""
    client = Mock()
    client.get_values.return_value = []
    client.append_values.side_effect = [{"updates": {}}, SheetsApiError("503 unavailable")]

    with pytest.raises(AppendError, match="data row"):
        append_row(client, TARGET, header_row(), _row())

    assert client.append_values.call_count == 2
    first_call = client.append_values.call_args_list[0]
    assert first_call.args == ("sheet-id", "Perf!A:A", [header_row()])


def test_mismatched_row_length_raises_before_io():
    """Verify a row that does not fit the header is rejected without touching the sheet."""
    client = Mock()

    with pytest.raises(ValueError):
        append_row(client, TARGET, header_row(), ["demo"])

    client.get_values.assert_not_called()
