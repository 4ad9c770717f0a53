from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from tireshop.config import DEFAULT_MIN_STOCK


class VehicleType(str, Enum):
    """Vehicle class a tire is made for."""
    AUTO = "auto"
    LIGHT_TRUCK = "light-truck"
    TRUCK = "truck"
    MOTORCYCLE = "motorcycle"


class Season(str, Enum):
    """Valid tire seasons."""
    SUMMER = "summer"
    WINTER = "winter"
    ALLSEASON = "all-season"


class Condition(str, Enum):
    NEW = "new"
    USED = "used"


@dataclass
class TireRecord:
    """One tire inventory entry."""
    id: Optional[str]               # Store identifier (None for new records)
    brand: str
    model: str
    size: str                       # Free-form, e.g. 205/55R16
    vehicle_type: VehicleType
    price: float                    # Unit price
    stock: int                      # Units on hand
    min_stock: int = DEFAULT_MIN_STOCK
    season: Season = Season.ALLSEASON
    load_index: str = ""
    speed_rating: str = ""
    condition: Condition = Condition.NEW
    notes: str = ""
    images: List[str] = field(default_factory=list)  # URLs only
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def stock_value(self) -> float:
        """Inventory value of this record (price * stock)."""
        return self.price * self.stock

    @property
    def is_low_stock(self) -> bool:
        return is_low_stock(self)


def is_low_stock(record: TireRecord) -> bool:
    """A record is low on stock when stock is at or below its minimum."""
    return record.stock <= record.min_stock
