from __future__ import annotations

import unicodedata
from typing import Callable, Dict, Iterable, List, Optional

from stockview.data.models import ProductSnapshot, SortDirection, SortField

PRIORITY_WEIGHTS: Dict[str, int] = {
    "critical": 3,
    "high": 2,
    "low": 1,
}


def priority_weight(priority: Optional[str]) -> int:
    """Weight of a priority label; unknown or missing labels weigh 0."""
    if not priority:
        return 0
    return PRIORITY_WEIGHTS.get(priority.strip().lower(), 0)


def name_sort_key(name: str) -> tuple:
    """Collation key that orders accented and unaccented letters together, case-insensitively."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name)


_SORT_KEYS: Dict[SortField, Callable[[ProductSnapshot], object]] = {
    SortField.PRODUCT_NAME: lambda s: name_sort_key(s.product_name),
    SortField.LAST_UPDATED: lambda s: s.last_updated,
    SortField.PRIORITY: lambda s: priority_weight(s.priority),
}


def sort_snapshots(
    snapshots: Iterable[ProductSnapshot],
    field: SortField = SortField.LAST_UPDATED,
    direction: SortDirection = SortDirection.DESC,
) -> List[ProductSnapshot]:
    """Stable sort; snapshots with equal keys keep their input order in both directions."""
    key = _SORT_KEYS[SortField(field)]
    descending = SortDirection(direction) == SortDirection.DESC
    return sorted(snapshots, key=key, reverse=descending)
