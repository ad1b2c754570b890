"""Row composition for the performance history sheet."""

from __future__ import annotations

from datetime import datetime

from .models import MetricKey, PerformanceReport, RepositoryState, Row

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

HEADER: Row = [
    "project",
    "timestamp",
    "branch",
    "commit_message",
    "tags",
    "commit_id",
    "uncommitted_changes",
    "performance_score",
    "lcp_score",
    "cls_score",
    "tbt_score",
    "fcp_score",
    "si_score",
    "lcp_value",
    "cls_value",
    "tbt_value",
    "fcp_value",
    "fmp_value",
    "si_value",
    "ttfb_value",
    "tti_value",
]

SCORED_METRICS = (MetricKey.LCP, MetricKey.CLS, MetricKey.TBT, MetricKey.FCP, MetricKey.SI)

VALUE_METRICS = (
    MetricKey.LCP,
    MetricKey.CLS,
    MetricKey.TBT,
    MetricKey.FCP,
    MetricKey.FMP,
    MetricKey.SI,
    MetricKey.TTFB,
    MetricKey.TTI,
)


def header_row() -> Row:
    """Return a fresh copy of the column labels."""
    return list(HEADER)


def scale_score(score: float) -> float:
    """Scale a 0-1 score to 0-100, rounded to two decimals (``0.87 -> 87.0``)."""
    return round(score * 100, 2)


def format_timestamp(timestamp: datetime) -> str:
    """Format as local ``YYYY-MM-DD HH:MM:SS``; naive datetimes are taken as local."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime(TIMESTAMP_FORMAT)


def compose_row(
    report: PerformanceReport,
    repo: RepositoryState,
    project_name: str,
    timestamp: datetime,
) -> Row:
    """Join a parsed report, repository state and run time into one sheet row.

    The cell order matches :data:`HEADER`. Scores are scaled to 0-100, metric
    values are copied in their natural units (ms, unitless for CLS), tags are
    comma-joined and the dirty flag is rendered ``"Y"``/``"N"``.
    """
    row: Row = [
        project_name,
        format_timestamp(timestamp),
        repo.branch,
        repo.message,
        ", ".join(repo.tags),
        repo.commit_id,
        "Y" if repo.has_uncommitted_changes else "N",
        scale_score(report.overall_score),
    ]
    row.extend(scale_score(report.metric(key).score) for key in SCORED_METRICS)
    row.extend(report.metric(key).value for key in VALUE_METRICS)
    return row
