"""Lighthouse JSON report parsing.

Only the performance category score and the eight tracked audits are read.
Every field is required: a missing or ``null`` value is a parse failure rather
than a zero, since a silent zero is indistinguishable from a genuinely bad
score once it lands in the sheet.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Union

from .errors import ParseError
from .models import MetricKey, MetricSample, PerformanceReport

logger = logging.getLogger(__name__)


def _require_object(container: Dict[str, Any], key: str, path: str) -> Dict[str, Any]:
    value = container.get(key)
    if not isinstance(value, dict):
        raise ParseError(f"Lighthouse report is missing object '{path}'.")
    return value


def _require_number(container: Dict[str, Any], key: str, path: str) -> float:
    value = container.get(key)
    # bool is an int subclass but never a valid metric.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(
            f"Lighthouse report field '{path}' must be a number, got {value!r}."
        )
    try:
        number = float(value)
    except OverflowError as exc:
        raise ParseError(f"Lighthouse report field '{path}' is out of range.") from exc
    if not math.isfinite(number):
        raise ParseError(f"Lighthouse report field '{path}' must be finite, got {value!r}.")
    return number


def _require_score(container: Dict[str, Any], key: str, path: str) -> float:
    score = _require_number(container, key, path)
    if not 0 <= score <= 1:
        raise ParseError(f"Lighthouse report field '{path}' must be within [0, 1], got {score!r}.")
    return score


def parse_report(raw_document: Union[bytes, str]) -> PerformanceReport:
    """Decode a Lighthouse report into a :class:`PerformanceReport`.

    Args:
        raw_document: Raw JSON bytes (or text) of a Lighthouse result.

    Returns:
        The performance score and one sample per :class:`MetricKey`, with
        values and scores exactly as they appear in the report.

    Raises:
        ParseError: If the document is not valid JSON, is not an object, or
            lacks any required score or metric field, or a value is
            non-finite or a score falls outside [0, 1].
    """
    try:
        document = json.loads(raw_document)
    except (ValueError, TypeError) as exc:
        raise ParseError(f"Lighthouse report is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise ParseError("Lighthouse report root must be a JSON object.")

    categories = _require_object(document, "categories", "categories")
    performance = _require_object(categories, "performance", "categories.performance")
    overall_score = _require_score(performance, "score", "categories.performance.score")

    audits = _require_object(document, "audits", "audits")
    metrics: Dict[MetricKey, MetricSample] = {}
    for key in MetricKey:
        audit_path = f"audits.{key.audit_id}"
        audit = _require_object(audits, key.audit_id, audit_path)
        metrics[key] = MetricSample(
            value=_require_number(audit, "numericValue", f"{audit_path}.numericValue"),
            score=_require_score(audit, "score", f"{audit_path}.score"),
        )

    logger.debug(
        "Parsed Lighthouse report",
        extra={"performance_score": overall_score, "metrics": len(metrics)},
    )
    return PerformanceReport(overall_score=overall_score, metrics=MappingProxyType(metrics))


def read_report(path: Union[str, Path]) -> PerformanceReport:
    """Read and parse a Lighthouse report file.

    Raises:
        ParseError: If the file cannot be read or its content does not parse.
    """
    report_path = Path(path)
    try:
        raw_document = report_path.read_bytes()
    except OSError as exc:
        raise ParseError(f"Unable to read Lighthouse report '{report_path}': {exc}") from exc

    return parse_report(raw_document)
