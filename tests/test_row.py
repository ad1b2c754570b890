"""Tests for sheet row composition."""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lighthouse_sheet.models import MetricKey, MetricSample, PerformanceReport, RepositoryState
from lighthouse_sheet.row import HEADER, compose_row, format_timestamp, header_row, scale_score


def _report(overall: float = 0.87) -> PerformanceReport:
    metrics = {
        MetricKey.LCP: MetricSample(value=2400.0, score=0.9),
        MetricKey.CLS: MetricSample(value=0.042, score=0.99),
        MetricKey.TBT: MetricSample(value=180.5, score=0.92),
        MetricKey.FCP: MetricSample(value=1200.0, score=0.97),
        MetricKey.FMP: MetricSample(value=1350.0, score=0.95),
        MetricKey.SI: MetricSample(value=2100.25, score=0.88),
        MetricKey.TTFB: MetricSample(value=95.3, score=1.0),
        MetricKey.TTI: MetricSample(value=3800.0, score=0.8),
    }
    return PerformanceReport(overall_score=overall, metrics=metrics)


def _cell(row, column):
    return row[HEADER.index(column)]


def test_compose_row_end_to_end_example():
    """Verify the documented demo row renders scores, values and flags."""
    repo = RepositoryState(commit_id="abc123", branch="main")

    row = compose_row(_report(), repo, "demo", datetime(2024, 5, 1, 10, 0, 0))

    assert _cell(row, "project") == "demo"
    assert _cell(row, "timestamp") == "2024-05-01 10:00:00"
    assert _cell(row, "branch") == "main"
    assert _cell(row, "commit_id") == "abc123"
    assert _cell(row, "tags") == ""
    assert _cell(row, "performance_score") == 87
    assert _cell(row, "lcp_score") == 90
    assert _cell(row, "lcp_value") == 2400
    assert _cell(row, "uncommitted_changes") == "N"


def test_compose_row_matches_header_length_and_order():
    """Verify every column is filled in header order."""
    repo = RepositoryState(
        commit_id="abc123",
        message="Tune images",
        branch="feature/lcp",
        tags=("v1.0.0", "rc"),
        has_uncommitted_changes=True,
    )

    row = compose_row(_report(), repo, "demo", datetime(2024, 5, 1, 10, 0, 0))

    assert len(row) == len(HEADER) == 21
    assert row == [
        "demo",
        "2024-05-01 10:00:00",
        "feature/lcp",
        "Tune images",
        "v1.0.0, rc",
        "abc123",
        "Y",
        87.0,
        90.0,
        99.0,
        92.0,
        97.0,
        88.0,
        2400.0,
        0.042,
        180.5,
        1200.0,
        1350.0,
        2100.25,
        95.3,
        3800.0,
    ]


def test_compose_row_is_deterministic():
    """Verify identical inputs yield identical rows."""
    args = (_report(), RepositoryState(branch="main"), "demo", datetime(2024, 5, 1, 10, 0, 0))

    assert compose_row(*args) == compose_row(*args)
    assert repr(compose_row(*args)) == repr(compose_row(*args))


def test_scale_score_drops_float_noise():
    """Verify 0-1 scores scale to clean 0-100 values."""
    assert scale_score(0.87) == 87.0
    assert scale_score(0.29) == 29.0
    assert scale_score(1) == 100.0
    assert scale_score(0.0) == 0.0


def test_format_timestamp_converts_aware_datetimes_to_local_time():
    """Verify aware datetimes are rendered in local time."""
    aware = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)

    expected = aware.astimezone().strftime("%Y-%m-%d %H:%M:%S")

    assert format_timestamp(aware) == expected


def test_header_row_returns_a_copy():
    """Verify callers cannot mutate the shared header."""
    header = header_row()
    header.append("extra")

    assert len(HEADER) == 21
