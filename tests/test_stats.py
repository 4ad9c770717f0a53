"""
Unit tests for tireshop.stats
=============================

Totals, groupings, top lists and percentage guards of ``summarize``.
"""
# =========================
# Imports
# =========================
import pytest

from tireshop.entities import VehicleType, Season, Condition
from tireshop.filters import FilterSpec, filter_records
from tireshop.stats import summarize, percentage_of_total, stock_by


# -------------------------
# Tests: empty input
# -------------------------
def test_summarize_empty():
    s = summarize([])
    assert s.total_stock == 0
    assert s.total_value == 0
    assert s.average_price == 0
    assert s.low_stock_count == 0
    assert s.category_count == 0
    assert s.top_brands_by_stock == []
    assert s.top_value_records == []
    assert s.low_stock_records == []
    assert s.share(0) == 0


def test_percentage_of_total_zero_total():
    assert percentage_of_total(5, 0) == 0
    assert percentage_of_total(1, 4) == 25


# -------------------------
# Tests: totals
# -------------------------
def test_summarize_end_to_end(make_tire):
    records = [
        make_tire(brand="X", model="Y", stock=2, min_stock=5, price=100),
        make_tire(brand="X", model="Z", stock=10, min_stock=5, price=50),
    ]
    s = summarize(records)
    assert s.total_stock == 12
    assert s.total_value == 700
    assert s.low_stock_count == 1
    assert s.category_count == 2
    assert s.average_price == 75


def test_total_stock_is_sum_of_stock(make_tire):
    records = [make_tire(stock=n) for n in (0, 3, 7, 11)]
    assert summarize(records).total_stock == 21


def test_category_count_is_case_sensitive(make_tire):
    records = [
        make_tire(brand="Pirelli", model="P Zero"),
        make_tire(brand="pirelli", model="P Zero"),
        make_tire(brand="Pirelli", model="P Zero", size="225/45R17"),
    ]
    assert summarize(records).category_count == 2


def test_low_stock_is_inclusive(make_tire):
    records = [make_tire(stock=5, min_stock=5), make_tire(stock=6, min_stock=5)]
    s = summarize(records)
    assert s.low_stock_count == 1
    assert s.low_stock_records == [records[0]]


def test_low_stock_count_matches_filter(make_tire):
    records = [make_tire(stock=n, min_stock=4) for n in range(10)]
    low = filter_records(records, FilterSpec(low_stock_only=True))
    assert summarize(records).low_stock_count == len(low) == 5


# -------------------------
# Tests: groupings
# -------------------------
def test_top_brands_first_seen_tie_break(make_tire):
    records = [
        make_tire(brand="A", stock=3),
        make_tire(brand="B", stock=3),
        make_tire(brand="A", stock=1),
    ]
    s = summarize(records)
    assert s.stock_by_brand == {"A": 4, "B": 3}
    assert s.top_brands_by_stock == [("A", 4), ("B", 3)]


def test_top_brands_ties_keep_input_order(make_tire):
    records = [make_tire(brand=b, stock=2) for b in "CAB"]
    assert [b for b, _ in summarize(records).top_brands_by_stock] == \
        ["C", "A", "B"]


def test_top_brands_truncated_to_five(make_tire):
    records = [make_tire(brand=f"B{i}", stock=i) for i in range(8)]
    top = summarize(records).top_brands_by_stock
    assert len(top) == 5
    assert top[0] == ("B7", 7)
    assert [n for _, n in top] == sorted([n for _, n in top], reverse=True)


def test_groupings_use_raw_values(make_tire):
    records = [
        make_tire(vehicle_type=VehicleType.TRUCK, season=Season.WINTER,
                  condition=Condition.USED, stock=4),
        make_tire(vehicle_type=VehicleType.AUTO, season=Season.WINTER,
                  stock=1),
        make_tire(vehicle_type=VehicleType.TRUCK, season=Season.ALLSEASON,
                  stock=2),
    ]
    s = summarize(records)
    assert s.stock_by_vehicle_type == {"truck": 6, "auto": 1}
    assert list(s.stock_by_vehicle_type) == ["truck", "auto"]
    assert s.stock_by_season == {"winter": 5, "all-season": 2}
    assert s.stock_by_condition == {"used": 4, "new": 3}


def test_stock_by_custom_key(make_tire):
    records = [make_tire(size="15"), make_tire(size="16"), make_tire(size="15")]
    assert stock_by(records, lambda r: r.size) == {"15": 20, "16": 10}


def test_share_of_group(make_tire):
    records = [make_tire(brand="A", stock=1), make_tire(brand="B", stock=3)]
    s = summarize(records)
    assert s.share(s.stock_by_brand["B"]) == pytest.approx(75.0)


# -------------------------
# Tests: top value records
# -------------------------
def test_top_value_records(make_tire):
    records = [
        make_tire(brand="low", price=10, stock=1),
        make_tire(brand="tie1", price=50, stock=2),
        make_tire(brand="high", price=300, stock=4),
        make_tire(brand="tie2", price=100, stock=1),
        make_tire(brand="zero", price=999, stock=0),
        make_tire(brand="mid", price=60, stock=3),
    ]
    top = summarize(records).top_value_records
    assert [r.brand for r in top] == ["high", "mid", "tie1", "tie2", "low"]


def test_summarize_does_not_mutate(make_tire):
    records = [make_tire(brand="A", stock=1), make_tire(brand="B", stock=9)]
    before = list(records)
    summarize(records)
    assert records == before
