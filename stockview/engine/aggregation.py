"""Count aggregations behind the dashboard cards and report charts."""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, TypeVar

from stockview.config import get_config
from stockview.data.models import ProductSnapshot, ReportRecord, ReportSummary, StockStatus
from stockview.utils.dates import get_timezone, parse_timestamp

T = TypeVar("T")

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _label(value: Any, unspecified_label: str) -> str:
    if value is None:
        return unspecified_label
    text = str(value).strip()
    return text or unspecified_label


def aggregate_by_dimension(
    records: Iterable[T],
    dimension: Callable[[T], Any],
    unspecified_label: Optional[str] = None,
) -> Dict[str, int]:
    """Count records per dimension value, in first-seen order.

    Records whose value is None or blank are counted under ``unspecified_label``
    (default: the configured label) instead of being dropped.
    """
    unspecified_label = unspecified_label or get_config().unspecified_label
    counts: Dict[str, int] = {}
    for record in records:
        label = _label(dimension(record), unspecified_label)
        counts[label] = counts.get(label, 0) + 1
    return counts


def aggregate_by_month(
    records: Iterable[T],
    timestamp: Callable[[T], Any],
    tz: Optional[tzinfo] = None,
    unspecified_label: Optional[str] = None,
) -> Dict[str, int]:
    """Count records per calendar month, ordered chronologically.

    Labels look like ``"Jan 2024"``. Records whose selector returns None or an
    unparseable value are counted under ``unspecified_label``, which comes last. For
    movements select ``recorded_at`` so unknown timestamps are not bucketed as 1970.
    """
    tz = tz or get_timezone()
    unspecified_label = unspecified_label or get_config().unspecified_label
    by_month: Dict[Tuple[int, int], int] = {}
    unspecified = 0
    for record in records:
        parsed = parse_timestamp(timestamp(record))
        if parsed is None:
            unspecified += 1
            continue
        local = parsed.astimezone(tz)
        month = (local.year, local.month)
        by_month[month] = by_month.get(month, 0) + 1

    counts = {
        f"{MONTH_LABELS[month - 1]} {year}": count
        for (year, month), count in sorted(by_month.items())
    }
    if unspecified:
        counts[unspecified_label] = counts.get(unspecified_label, 0) + unspecified
    return counts


def status_counts(snapshots: Iterable[ProductSnapshot]) -> Dict[StockStatus, int]:
    """Snapshots per status; every status is present, possibly with 0."""
    counts = {status: 0 for status in StockStatus}
    for snapshot in snapshots:
        counts[snapshot.status] += 1
    return counts


def summarize_reports(records: Iterable[ReportRecord], tz: Optional[tzinfo] = None) -> ReportSummary:
    records = list(records)
    return ReportSummary(
        by_branch=aggregate_by_dimension(records, lambda r: r.branch),
        by_category=aggregate_by_dimension(records, lambda r: r.category),
        by_month=aggregate_by_month(records, lambda r: r.created_on, tz=tz),
    )
