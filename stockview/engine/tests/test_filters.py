from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from stockview.data.models import (
    DateRange,
    FilterCriteria,
    ProductSnapshot,
    QuantityBucket,
    StockStatus,
)
from stockview.engine import classify, filter_snapshots

UTC = timezone.utc
REFERENCE = date(2024, 3, 10)


def snap(name, category, quantity, minimum=5, maximum=15, ts=datetime(2024, 3, 10, 12, tzinfo=UTC)):
    return ProductSnapshot(
        product_name=name,
        category=category,
        current_quantity=quantity,
        last_updated=ts,
        minimum=minimum,
        maximum=maximum,
        status=classify(quantity, minimum, maximum),
    )


@pytest.fixture
def snapshots():
    return [
        snap("Vinil Blanco", "Vinil", 0),
        snap("Vinil Negro", "Vinil", 8),
        snap("Tarima Estándar", "Tarima", 12),
        snap("Tarima Europea", "Tarima", 30),
        snap("Cartón", "Material de Empaque", 4),
    ]


def names(result):
    return [s.product_name for s in result]


def test_no_criteria_is_identity(snapshots):
    assert filter_snapshots(snapshots) == snapshots
    assert filter_snapshots(snapshots, FilterCriteria()) == snapshots


def test_search_is_case_insensitive_on_name_or_category(snapshots):
    assert names(filter_snapshots(snapshots, FilterCriteria(search="NEGRO"))) == ["Vinil Negro"]
    assert names(filter_snapshots(snapshots, FilterCriteria(search="empaque"))) == ["Cartón"]


def test_search_supersedes_category(snapshots):
    criteria = FilterCriteria(search="tarima", category="Vinil")
    assert names(filter_snapshots(snapshots, criteria)) == ["Tarima Estándar", "Tarima Europea"]


def test_blank_search_falls_back_to_category(snapshots):
    criteria = FilterCriteria(search="   ", category="Vinil")
    assert names(filter_snapshots(snapshots, criteria)) == ["Vinil Blanco", "Vinil Negro"]


def test_category_is_exact_and_case_sensitive(snapshots):
    assert filter_snapshots(snapshots, FilterCriteria(category="vinil")) == []
    assert names(filter_snapshots(snapshots, FilterCriteria(category="Tarima"))) == [
        "Tarima Estándar", "Tarima Europea",
    ]


@pytest.mark.parametrize("status, expected", [
    (StockStatus.CRITICAL, ["Vinil Blanco", "Cartón"]),
    (StockStatus.LOW, ["Vinil Negro"]),
    (StockStatus.NORMAL, ["Tarima Estándar", "Tarima Europea"]),
])
def test_status_filter(snapshots, status, expected):
    assert names(filter_snapshots(snapshots, FilterCriteria(status=status))) == expected


@pytest.mark.parametrize("bucket, expected", [
    (QuantityBucket.ZERO, ["Vinil Blanco"]),
    (QuantityBucket.BELOW_MINIMUM, ["Vinil Blanco", "Cartón"]),
    (QuantityBucket.WITHIN_RANGE, ["Vinil Negro", "Tarima Estándar"]),
    (QuantityBucket.ABOVE_MAXIMUM, ["Tarima Europea"]),
])
def test_quantity_buckets(snapshots, bucket, expected):
    assert names(filter_snapshots(snapshots, FilterCriteria(quantity_bucket=bucket))) == expected


def test_within_range_includes_both_bounds():
    at_bounds = [snap("min", "c", 5), snap("max", "c", 15), snap("over", "c", 15.5)]
    result = filter_snapshots(at_bounds, FilterCriteria(quantity_bucket=QuantityBucket.WITHIN_RANGE))
    assert names(result) == ["min", "max"]


def test_predicates_are_combined(snapshots):
    criteria = FilterCriteria(category="Vinil", status=StockStatus.CRITICAL)
    assert names(filter_snapshots(snapshots, criteria)) == ["Vinil Blanco"]


@pytest.fixture
def dated():
    return [
        snap("d03", "c", 1, ts=datetime(2024, 3, 3, 23, 59, tzinfo=UTC)),
        snap("d04", "c", 1, ts=datetime(2024, 3, 4, 0, 0, tzinfo=UTC)),
        snap("d07", "c", 1, ts=datetime(2024, 3, 7, 23, 59, 59, tzinfo=UTC)),
        snap("d08", "c", 1, ts=datetime(2024, 3, 8, 0, 0, tzinfo=UTC)),
        snap("d10", "c", 1, ts=datetime(2024, 3, 10, 18, 0, tzinfo=UTC)),
        snap("d11", "c", 1, ts=datetime(2024, 3, 11, 1, 0, tzinfo=UTC)),
    ]


def test_today(dated):
    criteria = FilterCriteria(date_range=DateRange.TODAY, reference_date=REFERENCE)
    assert names(filter_snapshots(dated, criteria, tz=UTC)) == ["d10"]


def test_last_7_days_includes_today_and_6_days_back(dated):
    criteria = FilterCriteria(date_range=DateRange.LAST_7_DAYS, reference_date=REFERENCE)
    assert names(filter_snapshots(dated, criteria, tz=UTC)) == ["d04", "d07", "d08", "d10"]


def test_custom_range_covers_whole_days(dated):
    criteria = FilterCriteria(
        date_range=DateRange.CUSTOM, start_date="2024-03-04", end_date=date(2024, 3, 7)
    )
    assert names(filter_snapshots(dated, criteria, tz=UTC)) == ["d04", "d07"]


def test_bounds_without_range_imply_custom(dated):
    criteria = FilterCriteria(start_date="2024-03-08")
    assert names(filter_snapshots(dated, criteria, tz=UTC)) == ["d08", "d10", "d11"]


def test_unparseable_bound_leaves_side_open(dated):
    criteria = FilterCriteria(date_range=DateRange.CUSTOM, start_date="garbage", end_date="2024-03-07")
    assert names(filter_snapshots(dated, criteria, tz=UTC)) == ["d03", "d04", "d07"]


def test_custom_range_with_no_usable_bounds_keeps_everything(dated):
    criteria = FilterCriteria(date_range=DateRange.CUSTOM, start_date="??", end_date="")
    assert filter_snapshots(dated, criteria, tz=UTC) == dated


def test_days_are_compared_in_local_time():
    mexico = ZoneInfo("America/Mexico_City")
    # 03:00 UTC on the 10th is still the evening of the 9th in Mexico City
    late = [snap("late", "c", 1, ts=datetime(2024, 3, 10, 3, 0, tzinfo=UTC))]
    criteria = FilterCriteria(date_range=DateRange.TODAY, reference_date=REFERENCE)
    assert filter_snapshots(late, criteria, tz=UTC) == late
    assert filter_snapshots(late, criteria, tz=mexico) == []


def test_configured_timezone_is_the_default(dated):
    criteria = FilterCriteria(date_range=DateRange.TODAY, reference_date=REFERENCE)
    # The test config uses UTC
    assert names(filter_snapshots(dated, criteria)) == ["d10"]
