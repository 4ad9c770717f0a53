import csv
import math
from typing import List

import pandas as pd

from tireshop.config import DEFAULT_MIN_STOCK
from tireshop.entities import TireRecord, VehicleType, Season, Condition

REQUIRED_COLS = ["brand", "model", "size", "vehicle_type", "price", "stock"]
EXPORT_COLS = ["brand", "model", "size", "vehicle_type", "price", "stock",
               "min_stock", "season", "load_index", "speed_rating",
               "condition", "notes", "images"]

# Spreadsheets from the old console carry the Spanish values
VEHICLE_ALIASES = {
    VehicleType.AUTO: ("auto", "car", "pkw"),
    VehicleType.LIGHT_TRUCK: ("light-truck", "light truck", "lt",
                              "camioneta", "suv"),
    VehicleType.TRUCK: ("truck", "camión", "camion", "lkw"),
    VehicleType.MOTORCYCLE: ("motorcycle", "moto", "motorbike"),
}
SEASON_ALIASES = {
    Season.SUMMER: ("summer", "s", "verano", "sommer"),
    Season.WINTER: ("winter", "w", "invierno"),
    Season.ALLSEASON: ("all-season", "allseason", "all season", "as",
                       "all", "todo el año", "ganzjahr"),
}
CONDITION_ALIASES = {
    Condition.NEW: ("new", "nuevo", "neu"),
    Condition.USED: ("used", "usado", "gebraucht"),
}


def _normalize(val, aliases: dict, what: str):
    v = str(val).strip().lower()
    for member, names in aliases.items():
        if v in names:
            return member
    raise ValueError(f"Invalid {what} value: {val!r}")


def normalize_vehicle_type(val) -> VehicleType:
    """Normalize various vehicle type inputs into a VehicleType enum."""
    return _normalize(val, VEHICLE_ALIASES, "vehicle type")


def normalize_season(val) -> Season:
    """Normalize various season inputs into a Season enum."""
    return _normalize(val, SEASON_ALIASES, "season")


def normalize_condition(val) -> Condition:
    return _normalize(val, CONDITION_ALIASES, "condition")


def _cell(row, cols, name, default=""):
    if name not in cols:
        return default
    value = row[cols[name]]
    if pd.isna(value):
        return default
    return value


def _text(row, cols, name) -> str:
    return str(_cell(row, cols, name)).strip()


def _whole(value, name) -> int:
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(number)


def read_excel(path) -> List[TireRecord]:
    """Read tire records from an Excel file (path or file-like object)."""
    df = pd.read_excel(path)
    cols = {str(c).lower().strip(): c for c in df.columns}
    for rc in REQUIRED_COLS:
        if rc not in cols:
            raise ValueError(
                f"Missing required column: {rc}. Found: {list(df.columns)}")

    out = []
    # Header is row 1 in the sheet
    for line, (_, row) in enumerate(df.iterrows(), start=2):
        brand = _text(row, cols, "brand")
        if not brand:
            raise ValueError(f"Row {line}: brand is required")
        model = _text(row, cols, "model")
        size = _text(row, cols, "size")
        if not (model and size):
            raise ValueError(f"Row {line}: model and size are required")
        raw_price = _cell(row, cols, "price", None)
        raw_stock = _cell(row, cols, "stock", None)
        if raw_price is None or raw_stock is None:
            raise ValueError(f"Row {line}: price and stock are required")
        try:
            price = float(raw_price)
            stock = _whole(raw_stock, "stock")
            min_stock = _whole(
                _cell(row, cols, "min_stock", DEFAULT_MIN_STOCK), "min_stock")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Row {line}: {e}") from e
        if not math.isfinite(price):
            raise ValueError(f"Row {line}: price must be a number")
        if price < 0 or stock < 0 or min_stock < 0:
            raise ValueError(f"Row {line}: numbers must not be negative")

        out.append(TireRecord(
            id=None,
            brand=brand,
            model=model,
            size=size,
            vehicle_type=normalize_vehicle_type(
                _cell(row, cols, "vehicle_type")),
            price=price,
            stock=stock,
            min_stock=min_stock,
            season=normalize_season(
                _cell(row, cols, "season", Season.ALLSEASON.value)),
            load_index=_text(row, cols, "load_index"),
            speed_rating=_text(row, cols, "speed_rating"),
            condition=normalize_condition(
                _cell(row, cols, "condition", Condition.NEW.value)),
            notes=_text(row, cols, "notes"),
            images=_text(row, cols, "images").split(),
        ))
    return out


def _row(r: TireRecord) -> dict:
    return {
        "brand": r.brand,
        "model": r.model,
        "size": r.size,
        "vehicle_type": r.vehicle_type.value,
        "price": r.price,
        "stock": r.stock,
        "min_stock": r.min_stock,
        "season": r.season.value,
        "load_index": r.load_index,
        "speed_rating": r.speed_rating,
        "condition": r.condition.value,
        "notes": r.notes,
        "images": " ".join(r.images),
    }


def export_excel(path, records: List[TireRecord]) -> None:
    """Export tire records to an Excel file (path or file-like object)."""
    df = pd.DataFrame([_row(r) for r in records], columns=EXPORT_COLS)
    df.to_excel(path, index=False)


def write_csv(stream, records: List[TireRecord]) -> None:
    """Write tire records as ';'-separated CSV to a text stream."""
    w = csv.writer(stream, delimiter=";")
    w.writerow(EXPORT_COLS + ["created_at", "updated_at"])
    for r in records:
        row = _row(r)
        w.writerow([row[c] for c in EXPORT_COLS] + [
            (r.created_at.isoformat() if r.created_at else ""),
            (r.updated_at.isoformat() if r.updated_at else ""),
        ])
