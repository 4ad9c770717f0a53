"""
Unit tests for tireshop.filters
===============================
"""
# =========================
# Imports
# =========================
import pytest

from tireshop.entities import VehicleType, Season, Condition
from tireshop.filters import FilterSpec, filter_records


# -------------------------
# Fixtures
# -------------------------
@pytest.fixture
def records(make_tire):
    return [
        make_tire(brand="Michelin", model="Primacy 4", size="205/55R16",
                  stock=2),
        make_tire(brand="Pirelli", model="P Zero", size="205/55R16",
                  vehicle_type=VehicleType.AUTO, stock=20),
        make_tire(brand="Bridgestone", model="Duravis", size="215/65R16C",
                  vehicle_type=VehicleType.LIGHT_TRUCK, season=Season.WINTER,
                  condition=Condition.USED, stock=1),
        make_tire(brand="Dunlop", model="Sportmax", size="120/70 ZR17",
                  vehicle_type=VehicleType.MOTORCYCLE, stock=5, min_stock=5),
    ]


# -------------------------
# Tests: search
# -------------------------
def test_search_is_case_insensitive(records):
    out = filter_records(records, FilterSpec(search_term="MICH"))
    assert [r.brand for r in out] == ["Michelin"]


def test_search_excludes_non_matching(make_tire):
    pirelli = make_tire(brand="Pirelli", model="P Zero", size="205/55R16")
    assert filter_records([pirelli], FilterSpec(search_term="MICH")) == []


def test_search_matches_model_and_size(records):
    assert [r.brand for r in filter_records(
        records, FilterSpec(search_term="zero"))] == ["Pirelli"]
    assert [r.brand for r in filter_records(
        records, FilterSpec(search_term="205/55"))] == ["Michelin", "Pirelli"]


def test_whitespace_search_is_not_trimmed(records):
    # Only "Primacy 4", "P Zero" and "120/70 ZR17" contain a space
    out = filter_records(records, FilterSpec(search_term=" "))
    assert [r.brand for r in out] == ["Michelin", "Pirelli", "Dunlop"]


# -------------------------
# Tests: exact filters
# -------------------------
def test_vehicle_type_and_low_stock(records):
    out = filter_records(records, FilterSpec(vehicle_type="auto",
                                             low_stock_only=True))
    assert [r.brand for r in out] == ["Michelin"]
    assert all(r.vehicle_type == VehicleType.AUTO and r.stock <= r.min_stock
               for r in out)


def test_enum_members_accepted(records):
    out = filter_records(records, FilterSpec(season=Season.WINTER,
                                             condition=Condition.USED))
    assert [r.brand for r in out] == ["Bridgestone"]


def test_empty_values_do_not_constrain(records):
    spec = FilterSpec(search_term="", vehicle_type="", season=None,
                      condition="")
    assert spec.is_empty()
    assert filter_records(records, spec) == records


def test_unknown_value_yields_nothing(records):
    assert filter_records(records, FilterSpec(vehicle_type="tractor")) == []


def test_low_stock_inclusive(records):
    out = filter_records(records, FilterSpec(low_stock_only=True))
    assert [r.brand for r in out] == ["Michelin", "Bridgestone", "Dunlop"]


# -------------------------
# Tests: general properties
# -------------------------
def test_empty_input():
    assert filter_records([], FilterSpec(search_term="x",
                                         low_stock_only=True)) == []


@pytest.mark.parametrize("spec", [
    FilterSpec(),
    FilterSpec(search_term="p"),
    FilterSpec(vehicle_type="auto", low_stock_only=True),
    FilterSpec(season="winter", condition="used"),
])
def test_filter_is_idempotent(records, spec):
    once = filter_records(records, spec)
    assert filter_records(once, spec) == once


def test_returns_new_list(records):
    out = filter_records(records, FilterSpec())
    assert out == records
    assert out is not records


# -------------------------
# Tests: query args
# -------------------------
def test_from_args():
    spec = FilterSpec.from_args({"q": " mich", "vehicle_type": "truck",
                                 "season": "", "low_stock": "on"})
    assert spec.search_term == " mich"
    assert spec.vehicle_type == "truck"
    assert spec.season is None
    assert spec.condition is None
    assert spec.low_stock_only is True


def test_from_args_defaults():
    spec = FilterSpec.from_args({})
    assert spec.is_empty()
    assert spec.to_args() == {}


def test_to_args_round_trip():
    spec = FilterSpec(search_term="zero", season=Season.SUMMER,
                      low_stock_only=True)
    assert spec.to_args() == {"q": "zero", "season": "summer",
                              "low_stock": "1"}
    assert FilterSpec.from_args(spec.to_args()) == FilterSpec(
        search_term="zero", season="summer", low_stock_only=True)
