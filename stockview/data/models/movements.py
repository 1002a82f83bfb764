from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stockview.utils.dates import UNPARSEABLE_TIMESTAMP, parse_timestamp


class MovementRecord(BaseModel):
    """A timestamped observation of one product's quantity."""
    model_config = ConfigDict(frozen=True)

    product_name: str = Field(description="Product name, unique within a category")
    category: str = Field(description="Inventory category the product belongs to")
    quantity: float = Field(description="Quantity observed, may be fractional")
    timestamp: datetime = Field(description="When the movement was recorded, in UTC; UNPARSEABLE_TIMESTAMP when unknown")
    priority: Optional[str] = Field(default=None, description="Priority label, when the source carries one")
    valid_timestamp: bool = Field(default=True, description="False when the source timestamp was missing or unparseable")

    @model_validator(mode="before")
    @classmethod
    def _coerce_timestamp(cls, data: Any) -> Any:
        if isinstance(data, dict):
            parsed = parse_timestamp(data.get("timestamp"))
            data = {
                **data,
                "timestamp": parsed or UNPARSEABLE_TIMESTAMP,
                "valid_timestamp": parsed is not None and data.get("valid_timestamp", True),
            }
        return data

    @property
    def key(self) -> tuple[str, str]:
        return (self.product_name, self.category)

    @property
    def has_valid_timestamp(self) -> bool:
        return self.valid_timestamp

    @property
    def recorded_at(self) -> Optional[datetime]:
        """The timestamp, or None when the source value could not be parsed."""
        return self.timestamp if self.valid_timestamp else None
