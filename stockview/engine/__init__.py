from .classification import classify
from .snapshots import build_snapshots, latest_movements
from .filters import filter_snapshots
from .sorting import PRIORITY_WEIGHTS, priority_weight, sort_snapshots
from .aggregation import (
    aggregate_by_dimension,
    aggregate_by_month,
    status_counts,
    summarize_reports,
)
from .history import filter_movements, product_history

__all__ = [
    # Snapshot view
    "build_snapshots",
    "classify",
    "latest_movements",
    "filter_snapshots",
    "sort_snapshots",
    "priority_weight",
    "PRIORITY_WEIGHTS",
    # Aggregations
    "aggregate_by_dimension",
    "aggregate_by_month",
    "status_counts",
    "summarize_reports",
    # Movement history
    "filter_movements",
    "product_history",
]
