from contextlib import nullcontext
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from tireshop.entities import TireRecord, VehicleType, Season, Condition
from tireshop.locking import WriteLock
from tireshop.models import Tire

# Columns replaced on update; id and timestamps belong to the store
EDITABLE_FIELDS = (
    "brand", "model", "size", "vehicle_type", "price", "stock", "min_stock",
    "season", "load_index", "speed_rating", "condition", "notes", "images",
)


class RecordNotFound(LookupError):
    """Raised when no tire exists for a given id."""


def to_record(row: Tire) -> TireRecord:
    """Convert an ORM row into a TireRecord."""
    return TireRecord(
        id=row.id,
        brand=row.brand,
        model=row.model,
        size=row.size,
        vehicle_type=VehicleType(row.vehicle_type),
        price=float(row.price or 0),
        stock=row.stock,
        min_stock=row.min_stock,
        season=Season(row.season),
        load_index=row.load_index or "",
        speed_rating=row.speed_rating or "",
        condition=Condition(row.condition),
        notes=row.notes or "",
        images=list(row.images or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _columns(record: TireRecord) -> dict:
    values = {name: getattr(record, name) for name in EDITABLE_FIELDS}
    for name in ("vehicle_type", "season", "condition"):
        values[name] = getattr(values[name], "value", values[name])
    values["images"] = list(record.images)
    return values


class TireRepository:
    """Repository for CRUD operations on tire records."""

    def __init__(self, session: Session, lock_path: Optional[str] = None):
        self.session = session
        self._lock_path = lock_path

    def _write_lock(self):
        if self._lock_path:
            return WriteLock(self._lock_path)
        return nullcontext()

    def list_all(self) -> List[TireRecord]:
        """All records, newest first."""
        rows = self.session.scalars(
            select(Tire).order_by(Tire.created_at.desc())).all()
        return [to_record(r) for r in rows]

    def get(self, record_id: str) -> Optional[TireRecord]:
        """Fetch a single tire record by ID."""
        row = self.session.get(Tire, record_id)
        return to_record(row) if row else None

    def add(self, record: TireRecord) -> str:
        """Insert a new tire record and return its ID."""
        with self._write_lock():
            row = Tire(**_columns(record))
            self.session.add(row)
            self.session.commit()
            return row.id

    def update(self, record: TireRecord) -> None:
        """Replace every editable field of an existing record."""
        if record.id is None:
            raise ValueError("Record ID required for update")
        with self._write_lock():
            row = self.session.get(Tire, record.id)
            if row is None:
                raise RecordNotFound(record.id)
            for name, value in _columns(record).items():
                setattr(row, name, value)
            self.session.commit()

    def delete(self, record_id: str) -> None:
        """Delete a tire record by ID."""
        with self._write_lock():
            row = self.session.get(Tire, record_id)
            if row is None:
                raise RecordNotFound(record_id)
            self.session.delete(row)
            self.session.commit()

    def bulk_insert(self, records: List[TireRecord]) -> int:
        """Insert multiple records at once. Returns count of inserted records."""
        with self._write_lock():
            self.session.add_all([Tire(**_columns(r)) for r in records])
            self.session.commit()
        return len(records)
