from .data_filters import (
    DateRange,
    FilterCriteria,
    QuantityBucket,
    SortDirection,
    SortField,
)

from .movements import MovementRecord
from .thresholds import ThresholdDefinition, ThresholdUpdate
from .snapshots import HistoryPoint, ProductSnapshot, StockStatus
from .reports import ReportRecord, ReportSummary
from .list_response import (
    StringList,
    DateBounds,
)

__all__ = [
    # Filter classes
    "DateRange",
    "FilterCriteria",
    "QuantityBucket",
    "SortDirection",
    "SortField",
    # Source records
    "MovementRecord",
    "ThresholdDefinition",
    "ThresholdUpdate",
    "ReportRecord",
    # Derived models
    "HistoryPoint",
    "ProductSnapshot",
    "StockStatus",
    "ReportSummary",
    # List response models
    "StringList",
    "DateBounds",
]
