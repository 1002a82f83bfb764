from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from stockview.utils.dates import parse_timestamp


class ReportRecord(BaseModel):
    """Response model for a request record used by the report charts."""
    branch: Optional[str] = Field(default=None, description="Branch that raised the request")
    category: Optional[str] = Field(default=None, description="Request category")
    created_on: Optional[datetime] = Field(default=None, description="Creation timestamp, None when unparseable")

    @field_validator("created_on", mode="before")
    @classmethod
    def _coerce_created_on(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)


class ReportSummary(BaseModel):
    """Counts behind the report charts."""
    by_branch: Dict[str, int] = Field(default_factory=dict, description="Records per branch")
    by_category: Dict[str, int] = Field(default_factory=dict, description="Records per category")
    by_month: Dict[str, int] = Field(default_factory=dict, description="Records per month, chronological")
