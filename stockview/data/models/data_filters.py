from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockview.utils.dates import parse_date

from .snapshots import StockStatus


class QuantityBucket(str, Enum):
    ZERO = "zero"
    BELOW_MINIMUM = "below_minimum"
    WITHIN_RANGE = "within_range"
    ABOVE_MAXIMUM = "above_maximum"


class DateRange(str, Enum):
    TODAY = "today"
    LAST_7_DAYS = "last_7_days"
    CUSTOM = "custom"


class SortField(str, Enum):
    PRODUCT_NAME = "product_name"
    LAST_UPDATED = "last_updated"
    PRIORITY = "priority"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterCriteria(BaseModel):
    """Filters for the snapshot view.

    Every field left as None is ignored; the ones that are set are combined with AND.
    A non-empty ``search`` supersedes ``category``. Setting ``start_date`` or ``end_date``
    without ``date_range`` implies a custom range.
    """
    model_config = ConfigDict(frozen=True)

    search: Optional[str] = Field(default=None, description="Case-insensitive text matched against product name or category")
    category: Optional[str] = Field(default=None, description="Exact category, applied only when search is empty")
    status: Optional[StockStatus] = Field(default=None, description="Status filter, None for any")
    quantity_bucket: Optional[QuantityBucket] = Field(default=None, description="Quantity relative to the thresholds")
    date_range: Optional[DateRange] = Field(default=None, description="Window over last_updated")
    start_date: Optional[date] = Field(default=None, description="First day of a custom range (inclusive)")
    end_date: Optional[date] = Field(default=None, description="Last day of a custom range (inclusive)")
    reference_date: Optional[date] = Field(default=None, description="Day treated as today, defaults to today in the configured timezone")

    @field_validator("start_date", "end_date", "reference_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Optional[date]:
        # Unparseable boundaries leave that side of the range open
        return parse_date(value)

    @property
    def search_text(self) -> str:
        return (self.search or "").strip().lower()

    @property
    def effective_date_range(self) -> Optional[DateRange]:
        if self.date_range is None and (self.start_date or self.end_date):
            return DateRange.CUSTOM
        return self.date_range

    @property
    def is_empty(self) -> bool:
        return (
            not self.search_text
            and not self.category
            and self.status is None
            and self.quantity_bucket is None
            and self.effective_date_range is None
        )
