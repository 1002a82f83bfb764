from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ThresholdDefinition(BaseModel):
    """Administrator-configured stock bounds for a product."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Opaque identifier used for updates")
    product_name: str = Field(description="Product the bounds apply to")
    category: str = Field(default="", description="Category of the product")
    minimum: float = Field(default=0.0, description="Inclusive upper bound of the critical range")
    maximum: float = Field(default=0.0, description="Inclusive upper bound of the normal range")


class ThresholdUpdate(BaseModel):
    """New bounds for a threshold; validated before anything is written."""
    minimum: float = Field(ge=0, description="New minimum")
    maximum: float = Field(ge=0, description="New maximum")

    @model_validator(mode="after")
    def _check_bounds(self) -> "ThresholdUpdate":
        if self.maximum < self.minimum:
            raise ValueError(
                f"maximum ({self.maximum}) must be greater than or equal to minimum ({self.minimum})"
            )
        return self
