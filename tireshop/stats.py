"""
Statistics Module
=================

Aggregates the in-memory tire list into the figures shown on the dashboard
and the statistics page. Everything here is a pure function of the record
list handed in; nothing touches the database.

Grouping maps are plain dicts, so keys keep the order in which they were
first seen. Sorting uses ``sorted`` which is stable, so ties in the "top"
lists keep input order as well.
"""
# =========================
# Imports
# =========================
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from tireshop.config import TOP_N
from tireshop.entities import TireRecord, is_low_stock


# =========================
# Class: Summary
# =========================
@dataclass
class Summary:
    """Aggregate statistics over a list of tire records."""
    total_stock: int = 0
    total_value: float = 0
    low_stock_count: int = 0
    category_count: int = 0
    average_price: float = 0
    stock_by_brand: Dict[str, int] = field(default_factory=dict)
    stock_by_vehicle_type: Dict[str, int] = field(default_factory=dict)
    stock_by_season: Dict[str, int] = field(default_factory=dict)
    stock_by_condition: Dict[str, int] = field(default_factory=dict)
    top_brands_by_stock: List[Tuple[str, int]] = field(default_factory=list)
    top_value_records: List[TireRecord] = field(default_factory=list)
    low_stock_records: List[TireRecord] = field(default_factory=list)

    def share(self, stock: int) -> float:
        """Percentage of the total stock represented by ``stock``."""
        return percentage_of_total(stock, self.total_stock)


# =========================
# Functions
# =========================
def percentage_of_total(part: float, total: float) -> float:
    """
    Return ``part`` as a percentage of ``total``.

    An empty total yields 0 so templates never render NaN.
    """
    if not total:
        return 0.0
    return part / total * 100


def _raw(value) -> str:
    return getattr(value, "value", value)


def stock_by(records: Iterable[TireRecord],
             key: Callable[[TireRecord], object]) -> Dict[str, int]:
    """
    Sum ``stock`` per grouping key.

    Parameters
    ----------
    records : iterable of TireRecord
        Records to group.
    key : callable
        Returns the grouping field of a record. Enum members are grouped by
        their raw value.

    Returns
    -------
    dict
        Key -> summed stock, in first-seen order.
    """
    groups: Dict[str, int] = {}
    for r in records:
        k = _raw(key(r))
        groups[k] = groups.get(k, 0) + r.stock
    return groups


def top_n(items: Sequence, key: Callable, n: int = TOP_N) -> list:
    """Highest ``n`` items by ``key``, ties kept in input order."""
    return sorted(items, key=key, reverse=True)[:n]


def summarize(records: Sequence[TireRecord]) -> Summary:
    """
    Compute the full summary of the tire inventory.

    Parameters
    ----------
    records : sequence of TireRecord
        The complete list as loaded from the store.

    Returns
    -------
    Summary
        Totals, groupings, top lists and the low stock alerts.
    """
    records = list(records)
    by_brand = stock_by(records, lambda r: r.brand)
    low = [r for r in records if is_low_stock(r)]

    return Summary(
        total_stock=sum(r.stock for r in records),
        total_value=sum(r.stock_value for r in records),
        low_stock_count=len(low),
        category_count=len({(r.brand, r.model) for r in records}),
        average_price=(sum(r.price for r in records) / len(records)
                       if records else 0),
        stock_by_brand=by_brand,
        stock_by_vehicle_type=stock_by(records, lambda r: r.vehicle_type),
        stock_by_season=stock_by(records, lambda r: r.season),
        stock_by_condition=stock_by(records, lambda r: r.condition),
        top_brands_by_stock=top_n(list(by_brand.items()),
                                  key=lambda kv: kv[1]),
        top_value_records=top_n(records, key=lambda r: r.stock_value),
        low_stock_records=low,
    )
