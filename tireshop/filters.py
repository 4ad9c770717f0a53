"""
Inventory filtering: search term plus the drop-down filters of the list view.
"""
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from tireshop.entities import TireRecord, is_low_stock

TRUE_VALUES = ("1", "true", "on", "yes")


@dataclass
class FilterSpec:
    """Optional narrowing criteria; unset fields don't constrain."""
    search_term: str = ""
    vehicle_type: Optional[str] = None
    season: Optional[str] = None
    condition: Optional[str] = None
    low_stock_only: bool = False

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "FilterSpec":
        """Build a spec from request query args (the search term is not trimmed)."""
        return cls(
            search_term=args.get("q", "") or "",
            vehicle_type=args.get("vehicle_type") or None,
            season=args.get("season") or None,
            condition=args.get("condition") or None,
            low_stock_only=(args.get("low_stock", "") or "").lower()
            in TRUE_VALUES,
        )

    def is_empty(self) -> bool:
        return not (self.search_term or self.vehicle_type or self.season
                    or self.condition or self.low_stock_only)

    def to_args(self) -> dict:
        """Inverse of from_args, for building export links."""
        args = {}
        if self.search_term:
            args["q"] = self.search_term
        for name in ("vehicle_type", "season", "condition"):
            value = getattr(self, name)
            if value:
                args[name] = getattr(value, "value", value)
        if self.low_stock_only:
            args["low_stock"] = "1"
        return args


def matches_search(record: TireRecord, term: str) -> bool:
    term = term.lower()
    return (term in record.brand.lower()
            or term in record.model.lower()
            or term in record.size.lower())


def filter_records(records: Sequence[TireRecord],
                   spec: FilterSpec) -> List[TireRecord]:
    """Return the records matching every criterion of ``spec``, in input order."""
    out = list(records)
    if spec.search_term:
        out = [r for r in out if matches_search(r, spec.search_term)]
    if spec.vehicle_type:
        out = [r for r in out if r.vehicle_type == spec.vehicle_type]
    if spec.season:
        out = [r for r in out if r.season == spec.season]
    if spec.condition:
        out = [r for r in out if r.condition == spec.condition]
    if spec.low_stock_only:
        out = [r for r in out if is_low_stock(r)]
    return out
