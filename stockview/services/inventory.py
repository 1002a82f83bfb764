"""Owning-application layer: fetch from a DataAccess backend and run the engine."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from stockview.data.interface import DataAccess
from stockview.data.models import (
    FilterCriteria,
    MovementRecord,
    ProductSnapshot,
    ReportSummary,
    SortDirection,
    SortField,
    StockStatus,
    ThresholdDefinition,
    ThresholdUpdate,
)
from stockview.engine import (
    build_snapshots,
    filter_snapshots,
    sort_snapshots,
    status_counts,
    summarize_reports,
)
from stockview.logging import get_logger

logger = get_logger(__name__)


class InventoryView(BaseModel):
    """Everything one dashboard render needs, computed from a single fetch."""
    movements: List[MovementRecord] = Field(default_factory=list, description="Raw movements fetched for this view")
    snapshots: List[ProductSnapshot] = Field(default_factory=list, description="All snapshots, before filtering")
    filtered: List[ProductSnapshot] = Field(default_factory=list, description="Snapshots matching the criteria")
    counts: Dict[StockStatus, int] = Field(default_factory=dict, description="Status counts of the filtered snapshots")


def fetch_inventory(
    data_access: DataAccess,
    domain: Optional[str] = None,
) -> Tuple[List[MovementRecord], List[ThresholdDefinition]]:
    """Fetch movements and thresholds concurrently and wait for both.

    Errors from either fetch propagate to the caller.
    """
    with ThreadPoolExecutor(max_workers=2) as ex:
        movements_future = ex.submit(data_access.list_movements, domain)
        thresholds_future = ex.submit(data_access.list_thresholds)
        movements = movements_future.result()
        thresholds = thresholds_future.result()
    logger.info(f"Fetched {len(movements)} movement(s) and {len(thresholds)} threshold(s)")
    return movements, thresholds


def load_inventory_view(
    data_access: DataAccess,
    criteria: Optional[FilterCriteria] = None,
    domain: Optional[str] = None,
    sort_field: Optional[SortField] = None,
    direction: SortDirection = SortDirection.DESC,
) -> InventoryView:
    """Fetch, build and filter the snapshot view from scratch.

    Args:
        data_access: Backend to read from.
        criteria: Filters to apply. None keeps every snapshot.
        domain: Category scope forwarded to the movement fetch.
        sort_field: Re-sort the filtered snapshots; None keeps the product-name order.
        direction: Direction used with ``sort_field``.
    Returns:
        InventoryView: Movements, all snapshots, filtered snapshots and their status counts.
    """
    movements, thresholds = fetch_inventory(data_access, domain)
    snapshots = build_snapshots(movements, thresholds)
    filtered = filter_snapshots(snapshots, criteria)
    if sort_field is not None:
        filtered = sort_snapshots(filtered, sort_field, direction)
    return InventoryView(
        movements=movements,
        snapshots=snapshots,
        filtered=filtered,
        counts=status_counts(filtered),
    )


def save_threshold(
    data_access: DataAccess,
    threshold_id: str,
    minimum: float,
    maximum: float,
) -> ThresholdDefinition:
    """Validate new bounds and write them through the backend.

    Raises:
        pydantic.ValidationError: If a bound is negative or maximum < minimum.
    """
    update = ThresholdUpdate(minimum=minimum, maximum=maximum)
    return data_access.update_threshold(threshold_id, update)


def load_report_summary(data_access: DataAccess) -> ReportSummary:
    records = data_access.list_report_records()
    logger.info(f"Summarizing {len(records)} report record(s)")
    return summarize_reports(records)
