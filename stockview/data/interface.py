from __future__ import annotations

from typing import List, Optional, Protocol

from .models import (
    # Source records
    MovementRecord,
    ThresholdDefinition,
    ThresholdUpdate,
    ReportRecord,
    # List response models
    StringList,
    DateBounds,
)


# ---- Data access protocol ----

class DataAccess(Protocol):
    """
    Backend-agnostic contract for the inventory service and dashboard.

    IMPORTANT:
    - Implementations MUST avoid result caching inside these methods.
      Each call should read fresh data from the underlying source, which is the
      single source of truth.
    """

    # Queries to populate dropdowns and filters

    def list_categories(self) -> StringList:
        """List all categories that have movements."""
        ...

    def get_movement_date_bounds(self) -> DateBounds:
        """Get the first and last movement timestamps."""
        ...

    # Inventory queries

    def list_movements(self, category: Optional[str] = None) -> List[MovementRecord]:
        """List movement records, optionally scoped to one category (case-insensitive)."""
        ...

    def list_thresholds(self) -> List[ThresholdDefinition]:
        """List all threshold definitions."""
        ...

    def update_threshold(self, threshold_id: str, update: ThresholdUpdate) -> ThresholdDefinition:
        """Set the minimum/maximum of one threshold and return the stored definition."""
        ...

    # Report queries

    def list_report_records(self) -> List[ReportRecord]:
        """List the request records behind the report charts."""
        ...
