"""Domain models for Lighthouse report ingestion and sheet rows.

These dataclasses model only the subset of the Lighthouse report, the git
working tree and the Sheets target that a single reporting run needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Tuple, Union


class MetricKey(Enum):
    """Lighthouse metrics recorded per run, keyed to their audit ids."""

    LCP = "largest-contentful-paint"
    CLS = "cumulative-layout-shift"
    TBT = "total-blocking-time"
    FCP = "first-contentful-paint"
    FMP = "first-meaningful-paint"
    SI = "speed-index"
    TTFB = "server-response-time"
    TTI = "interactive"

    @property
    def audit_id(self) -> str:
        return self.value


@dataclass(frozen=True)
class MetricSample:
    """One audit's raw value (ms, or unitless for CLS) and its 0-1 score."""

    value: float
    score: float


@dataclass(frozen=True)
class PerformanceReport:
    """Performance category score plus every tracked metric sample."""

    overall_score: float
    metrics: Mapping[MetricKey, MetricSample]

    def metric(self, key: MetricKey) -> MetricSample:
        return self.metrics[key]


@dataclass(frozen=True)
class RepositoryState:
    """Best-effort snapshot of the git working tree; failed fields stay empty."""

    commit_id: str = ""
    message: str = ""
    branch: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    has_uncommitted_changes: bool = False


@dataclass(frozen=True)
class SheetTarget:
    """Spreadsheet id and sub-sheet name receiving the rows."""

    spreadsheet_id: str
    sheet_name: str

    @property
    def column_a_range(self) -> str:
        """A1 reference covering the whole first column of the sheet."""
        return f"{self.sheet_name}!A:A"


CellValue = Union[str, float]
Row = List[CellValue]
