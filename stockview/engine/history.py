from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Iterable, List, Optional

from stockview.config import get_config
from stockview.data.models import HistoryPoint, MovementRecord, ProductSnapshot
from stockview.utils.dates import get_timezone, local_date, parse_date, parse_timestamp


def product_history(
    movements: Iterable[MovementRecord],
    snapshot: ProductSnapshot,
    days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[HistoryPoint]:
    """Quantity series of one product over the last ``days`` days, oldest first.

    When no movement falls inside the window the series is a single point at ``now``
    holding the snapshot's current quantity.
    """
    days = days if days is not None else get_config().history_days
    # A naive now is taken as UTC, like movement timestamps
    now = parse_timestamp(now) if now is not None else datetime.now(timezone.utc)
    cutoff = now - timedelta(days=days)

    window = [
        m for m in movements
        if m.key == snapshot.key and m.has_valid_timestamp and m.timestamp >= cutoff
    ]
    window.sort(key=lambda m: m.timestamp)
    if not window:
        return [HistoryPoint(timestamp=now, quantity=snapshot.current_quantity)]
    return [HistoryPoint(timestamp=m.timestamp, quantity=m.quantity) for m in window]


def filter_movements(
    movements: Iterable[MovementRecord],
    start_date: Any = None,
    end_date: Any = None,
    category: Optional[str] = None,
    tz: Optional[tzinfo] = None,
    descending: bool = True,
) -> List[MovementRecord]:
    """Movements recorded between ``start_date`` and ``end_date`` (whole days, inclusive).

    Bounds may be dates or ISO strings; an empty or unparseable bound is ignored. The
    category is matched case-insensitively. Results are newest first unless
    ``descending`` is False.
    """
    tz = tz or get_timezone()
    first = parse_date(start_date)
    last = parse_date(end_date)
    wanted = category.strip().lower() if category else ""

    result = []
    for movement in movements:
        day = local_date(movement.timestamp, tz)
        if first is not None and day < first:
            continue
        if last is not None and day > last:
            continue
        if wanted and movement.category.lower() != wanted:
            continue
        result.append(movement)

    result.sort(key=lambda m: m.timestamp, reverse=descending)
    return result
