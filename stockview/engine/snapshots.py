"""Derive the current per-product inventory view from raw movements."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from stockview.data.models import (
    MovementRecord,
    ProductSnapshot,
    SortDirection,
    SortField,
    ThresholdDefinition,
)
from stockview.logging import get_logger

from .classification import classify
from .sorting import sort_snapshots

logger = get_logger(__name__)


def latest_movements(movements: Iterable[MovementRecord]) -> Dict[Tuple[str, str], MovementRecord]:
    """Most recent movement per (product_name, category).

    Movements are ordered newest first with a stable sort, so among records sharing a
    timestamp the one seen first in the input wins.
    """
    newest_first = sorted(movements, key=lambda m: m.timestamp, reverse=True)
    latest: Dict[Tuple[str, str], MovementRecord] = {}
    for movement in newest_first:
        if movement.key not in latest:
            latest[movement.key] = movement
    return latest


def threshold_lookup(thresholds: Iterable[ThresholdDefinition]) -> Dict[str, ThresholdDefinition]:
    # Keyed by product name only; a later definition for the same name replaces an earlier one
    return {t.product_name: t for t in thresholds}


def build_snapshots(
    movements: Iterable[MovementRecord],
    thresholds: Iterable[ThresholdDefinition],
    order_by: SortField = SortField.PRODUCT_NAME,
    direction: SortDirection = SortDirection.ASC,
) -> List[ProductSnapshot]:
    """Build one classified snapshot per product and category seen in ``movements``.

    Args:
        movements: Raw movement records, in any order.
        thresholds: Threshold definitions; products without one get minimum = maximum = 0.
        order_by: Sort field of the result. Defaults to product name.
        direction: Sort direction of the result. Defaults to ascending.
    Returns:
        list[ProductSnapshot]: Empty when there are no movements.
    """
    movements = list(movements)
    if not movements:
        return []

    invalid = sum(1 for m in movements if not m.has_valid_timestamp)
    if invalid:
        logger.debug(f"{invalid} movement(s) without a valid timestamp ranked as oldest")

    bounds = threshold_lookup(thresholds)
    snapshots = []
    for movement in latest_movements(movements).values():
        threshold = bounds.get(movement.product_name)
        minimum = threshold.minimum if threshold else 0.0
        maximum = threshold.maximum if threshold else 0.0
        snapshots.append(
            ProductSnapshot(
                product_name=movement.product_name,
                category=movement.category,
                current_quantity=movement.quantity,
                last_updated=movement.timestamp,
                minimum=minimum,
                maximum=maximum,
                status=classify(movement.quantity, minimum, maximum),
                priority=movement.priority,
            )
        )

    logger.debug(f"Built {len(snapshots)} snapshot(s) from {len(movements)} movement(s)")
    return sort_snapshots(snapshots, order_by, direction)
