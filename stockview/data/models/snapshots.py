from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StockStatus(str, Enum):
    CRITICAL = "critical"
    LOW = "low"
    NORMAL = "normal"


class ProductSnapshot(BaseModel):
    """Current state of one product within one category, derived from its latest movement."""
    model_config = ConfigDict(frozen=True)

    product_name: str = Field(description="Product name")
    category: str = Field(description="Category")
    current_quantity: float = Field(description="Quantity of the most recent movement")
    last_updated: datetime = Field(description="Timestamp of the most recent movement")
    minimum: float = Field(default=0.0, description="Threshold minimum, 0 when undefined")
    maximum: float = Field(default=0.0, description="Threshold maximum, 0 when undefined")
    status: StockStatus = Field(description="Derived stock health")
    priority: Optional[str] = Field(default=None, description="Priority of the most recent movement")

    @property
    def key(self) -> tuple[str, str]:
        return (self.product_name, self.category)


class HistoryPoint(BaseModel):
    """One point of a product's quantity history."""
    timestamp: datetime = Field(description="Observation time")
    quantity: float = Field(description="Observed quantity")
