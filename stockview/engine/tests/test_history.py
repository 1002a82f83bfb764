from datetime import datetime, timedelta, timezone

from stockview.data.models import MovementRecord, ProductSnapshot, StockStatus
from stockview.engine import filter_movements, product_history

UTC = timezone.utc
NOW = datetime(2024, 3, 31, 12, 0, tzinfo=UTC)


def movement(name, category, quantity, ts):
    return MovementRecord(product_name=name, category=category, quantity=quantity, timestamp=ts)


def snapshot(name="A", category="Vinil", quantity=42):
    return ProductSnapshot(
        product_name=name, category=category, current_quantity=quantity,
        last_updated=NOW, status=StockStatus.NORMAL,
    )


def test_history_is_windowed_and_oldest_first():
    movements = [
        movement("A", "Vinil", 3, NOW - timedelta(days=2)),
        movement("A", "Vinil", 1, NOW - timedelta(days=40)),
        movement("A", "Vinil", 2, NOW - timedelta(days=10)),
        movement("A", "Tarima", 9, NOW - timedelta(days=1)),
        movement("B", "Vinil", 9, NOW - timedelta(days=1)),
        movement("A", "Vinil", 7, "not a date"),
    ]
    points = product_history(movements, snapshot(), days=30, now=NOW)
    assert [p.quantity for p in points] == [2, 3]
    assert points[0].timestamp == NOW - timedelta(days=10)


def test_window_start_is_inclusive():
    movements = [movement("A", "Vinil", 5, NOW - timedelta(days=7))]
    assert [p.quantity for p in product_history(movements, snapshot(), days=7, now=NOW)] == [5]


def test_empty_window_falls_back_to_current_quantity():
    movements = [movement("A", "Vinil", 1, NOW - timedelta(days=90))]
    points = product_history(movements, snapshot(quantity=42), days=30, now=NOW)
    assert len(points) == 1
    assert points[0].timestamp == NOW
    assert points[0].quantity == 42


def test_history_days_default_from_config():
    movements = [
        movement("A", "Vinil", 1, NOW - timedelta(days=29)),
        movement("A", "Vinil", 2, NOW - timedelta(days=31)),
    ]
    assert [p.quantity for p in product_history(movements, snapshot(), now=NOW)] == [1]


def test_filter_movements_by_days_and_category():
    movements = [
        movement("A", "Vinil", 1, "2024-03-01T00:00:00Z"),
        movement("B", "vinil", 2, "2024-03-05T23:59:59Z"),
        movement("C", "Tarima", 3, "2024-03-03T00:00:00Z"),
        movement("D", "Vinil", 4, "2024-03-06T00:00:00Z"),
        movement("E", "Vinil", 5, "2024-02-29T23:59:59Z"),
    ]
    result = filter_movements(movements, "2024-03-01", "2024-03-05", category="VINIL", tz=UTC)
    assert [m.product_name for m in result] == ["B", "A"]


def test_filter_movements_ascending_and_open_bounds():
    movements = [
        movement("A", "Vinil", 1, "2024-03-02T00:00:00Z"),
        movement("B", "Vinil", 2, "2024-03-01T00:00:00Z"),
        movement("C", "Vinil", 3, "2024-03-03T00:00:00Z"),
    ]
    result = filter_movements(movements, start_date="not-a-date", end_date=None, tz=UTC, descending=False)
    assert [m.product_name for m in result] == ["B", "A", "C"]


def test_naive_now_is_taken_as_utc():
    movements = [
        movement("A", "Vinil", 1, NOW - timedelta(days=3)),
        movement("A", "Vinil", 2, NOW - timedelta(days=40)),
    ]
    naive_now = NOW.replace(tzinfo=None)
    points = product_history(movements, snapshot(), days=30, now=naive_now)
    assert [p.quantity for p in points] == [1]

    fallback = product_history([], snapshot(quantity=42), days=30, now=naive_now)
    assert fallback[0].timestamp == NOW
