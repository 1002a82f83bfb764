from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from stockview.utils.dates import local_date


class StringList(BaseModel):
    """Sorted unique labels for a dropdown, e.g. the categories that have movements."""
    values: List[str] = Field(default_factory=list, description="Sorted unique labels")


class DateBounds(BaseModel):
    """First and last valid movement timestamps, used to seed the custom date range."""
    first_movement: datetime = Field(description="Oldest valid movement timestamp")
    last_movement: datetime = Field(description="Newest valid movement timestamp")

    def local_dates(self, tz: Optional[tzinfo] = None) -> Tuple[date, date]:
        return local_date(self.first_movement, tz), local_date(self.last_movement, tz)
