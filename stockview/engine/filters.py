from __future__ import annotations

from datetime import date, timedelta, tzinfo
from typing import Iterable, List, Optional

from stockview.data.models import DateRange, FilterCriteria, ProductSnapshot, QuantityBucket
from stockview.utils.dates import get_timezone, local_date, today_in_tz

# "Last 7 days" covers today and the 6 days before it
RECENT_WINDOW_DAYS = 7


def matches_search(snapshot: ProductSnapshot, text: str) -> bool:
    return text in snapshot.product_name.lower() or text in snapshot.category.lower()


def matches_quantity_bucket(snapshot: ProductSnapshot, bucket: QuantityBucket) -> bool:
    current = snapshot.current_quantity
    if bucket == QuantityBucket.ZERO:
        return current == 0
    if bucket == QuantityBucket.BELOW_MINIMUM:
        return current < snapshot.minimum
    if bucket == QuantityBucket.WITHIN_RANGE:
        return snapshot.minimum <= current <= snapshot.maximum
    return current > snapshot.maximum


def date_window(criteria: FilterCriteria, tz: tzinfo) -> tuple[Optional[date], Optional[date]]:
    """Inclusive (first, last) day selected by the criteria; None leaves a side open."""
    date_range = criteria.effective_date_range
    if date_range == DateRange.CUSTOM:
        return criteria.start_date, criteria.end_date

    today = criteria.reference_date or today_in_tz(tz)
    if date_range == DateRange.TODAY:
        return today, today
    return today - timedelta(days=RECENT_WINDOW_DAYS - 1), today


def matches_date_window(
    snapshot: ProductSnapshot,
    first: Optional[date],
    last: Optional[date],
    tz: tzinfo,
) -> bool:
    day = local_date(snapshot.last_updated, tz)
    if first is not None and day < first:
        return False
    if last is not None and day > last:
        return False
    return True


def filter_snapshots(
    snapshots: Iterable[ProductSnapshot],
    criteria: Optional[FilterCriteria] = None,
    tz: Optional[tzinfo] = None,
) -> List[ProductSnapshot]:
    """Keep the snapshots that satisfy every predicate set in ``criteria``.

    Free-text search, when non-empty, searches across all categories and the category
    filter is ignored. Days are compared in ``tz`` (default: the configured timezone).
    """
    result = list(snapshots)
    if criteria is None or criteria.is_empty:
        return result

    text = criteria.search_text
    if text:
        result = [s for s in result if matches_search(s, text)]
    elif criteria.category:
        result = [s for s in result if s.category == criteria.category]

    if criteria.status is not None:
        result = [s for s in result if s.status == criteria.status]

    if criteria.quantity_bucket is not None:
        result = [s for s in result if matches_quantity_bucket(s, criteria.quantity_bucket)]

    if criteria.effective_date_range is not None:
        tz = tz or get_timezone()
        first, last = date_window(criteria, tz)
        result = [s for s in result if matches_date_window(s, first, last, tz)]

    return result
