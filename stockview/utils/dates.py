"""Datetime helpers shared by the models and the engine."""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd

from stockview.config import get_config
from stockview.logging import get_logger

logger = get_logger(__name__)

# Stand-in for missing or unparseable movement timestamps: sorts as the oldest record.
UNPARSEABLE_TIMESTAMP = datetime(1970, 1, 1, tzinfo=timezone.utc)


def get_timezone(name: Optional[str] = None) -> tzinfo:
    """Resolve ``name`` (default: the configured timezone), falling back to UTC."""
    name = name or get_config().timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {name!r}, using UTC")
        return timezone.utc


def today_in_tz(tz: Optional[tzinfo] = None) -> date:
    return datetime.now(tz or get_timezone()).date()


# Scalar types handed to pandas; numbers would otherwise be read as epoch offsets
_PARSEABLE = (str, date)


def _to_timestamp(value: Any, utc: bool) -> Optional[pd.Timestamp]:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, _PARSEABLE):
        return None
    parsed = pd.to_datetime(value, utc=utc, errors="coerce")
    return None if pd.isna(parsed) else parsed


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a datetime, date or date string into an aware UTC datetime.

    Strings go through ``pd.to_datetime``, so ISO-8601 as well as forms like
    ``"Mar 5, 2024 10:00 AM"`` are accepted. Naive values are taken as UTC.
    Returns None for anything that cannot be parsed.
    """
    parsed = _to_timestamp(value, utc=True)
    if parsed is None:
        return None
    return parsed.to_pydatetime().astimezone(timezone.utc)


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date. Returns None when ``value`` is empty or unparseable.

    The date is the one written in the value; offsets are not converted.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = _to_timestamp(value, utc=False)
    return None if parsed is None else parsed.date()


def local_date(value: datetime, tz: Optional[tzinfo] = None) -> date:
    return value.astimezone(tz or get_timezone()).date()
