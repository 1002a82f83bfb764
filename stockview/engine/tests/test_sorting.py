from datetime import datetime, timedelta, timezone

import pytest

from stockview.data.models import ProductSnapshot, SortDirection, SortField, StockStatus
from stockview.engine import priority_weight, sort_snapshots

BASE = datetime(2024, 3, 1, tzinfo=timezone.utc)


def snap(name, day, priority=None):
    return ProductSnapshot(
        product_name=name,
        category="c",
        current_quantity=1,
        last_updated=BASE + timedelta(days=day),
        status=StockStatus.NORMAL,
        priority=priority,
    )


def names(result):
    return [s.product_name for s in result]


@pytest.mark.parametrize("priority, weight", [
    ("critical", 3),
    ("High", 2),
    (" low ", 1),
    ("medium", 0),
    ("", 0),
    (None, 0),
])
def test_priority_weight(priority, weight):
    assert priority_weight(priority) == weight


def test_default_is_most_recent_first():
    snapshots = [snap("a", 1), snap("b", 3), snap("c", 2)]
    assert names(sort_snapshots(snapshots)) == ["b", "c", "a"]


def test_last_updated_ascending():
    snapshots = [snap("a", 1), snap("b", 3), snap("c", 2)]
    assert names(sort_snapshots(snapshots, SortField.LAST_UPDATED, SortDirection.ASC)) == ["a", "c", "b"]


def test_priority_descending_puts_highest_weight_first():
    snapshots = [
        snap("none", 0),
        snap("low", 0, "low"),
        snap("critical", 0, "critical"),
        snap("high", 0, "high"),
    ]
    result = sort_snapshots(snapshots, SortField.PRIORITY, SortDirection.DESC)
    assert names(result) == ["critical", "high", "low", "none"]


def test_product_name_ascending():
    snapshots = [snap("Tarima", 0), snap("cartón", 0), snap("Bandas", 0)]
    assert names(sort_snapshots(snapshots, "product_name", "asc")) == ["Bandas", "cartón", "Tarima"]


@pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
def test_equal_keys_keep_input_order(direction):
    snapshots = [snap("first", 0, "high"), snap("second", 0, "high"), snap("third", 0, "high")]
    assert names(sort_snapshots(snapshots, SortField.PRIORITY, direction)) == ["first", "second", "third"]
    assert names(sort_snapshots(snapshots, SortField.LAST_UPDATED, direction)) == ["first", "second", "third"]


@pytest.mark.parametrize("field", list(SortField))
@pytest.mark.parametrize("direction", list(SortDirection))
def test_sorting_sorted_input_is_a_no_op(field, direction):
    snapshots = [
        snap("b", 2, "low"),
        snap("a", 2, "high"),
        snap("c", 1, "high"),
        snap("a", 1, None),
    ]
    once = sort_snapshots(snapshots, field, direction)
    assert sort_snapshots(once, field, direction) == once
