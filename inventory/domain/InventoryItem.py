"""InventoryItem domain entity: id, name, quantity, unit, low-stock threshold, last update time."""
from datetime import datetime
from typing import Optional


class InventoryItem:
    def __init__(self, id: int, name: str = "", quantity: int = 0, unit: str = "",
                 low_stock_threshold: int = 0, last_updated: Optional[datetime] = None):
        self._id = id
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.low_stock_threshold = low_stock_threshold
        self.last_updated = last_updated or datetime.now()

    @property
    def id(self) -> int:
        return self._id

    @property
    def match_name(self) -> str:
        return self.name.lower()

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.low_stock_threshold

    def matches(self, fragment: str) -> bool:
        '''True when the name contains the fragment or the fragment contains the name.'''
        fragment = fragment.lower()
        return fragment in self.match_name or self.match_name in fragment

    def set_quantity(self, quantity: int, timestamp: datetime):
        '''Sets a new absolute quantity and refreshes last_updated.'''
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.quantity = quantity
        self.last_updated = timestamp

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} (low at {self.low_stock_threshold})"

    def __repr__(self) -> str:
        return f"InventoryItem(id={self.id!r}, name={self.name!r}, quantity={self.quantity!r})"

    @staticmethod
    def from_dict(data):
        '''Creates an InventoryItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "id" not in d:
            raise ValueError("Inventory item is missing an id")
        last_updated = d.get("last_updated")
        if isinstance(last_updated, str):
            try:
                last_updated = datetime.fromisoformat(last_updated)
            except ValueError:
                last_updated = None
        elif not isinstance(last_updated, datetime):
            last_updated = None
        return InventoryItem(
            id=int(d["id"]),
            name=str(d.get("name", "")),
            quantity=max(0, int(d.get("quantity", 0) or 0)),
            unit=str(d.get("unit", "")),
            low_stock_threshold=max(0, int(d.get("low_stock_threshold", 0) or 0)),
            last_updated=last_updated,
        )

    def to_dict(self):
        '''Converts the InventoryItem to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "low_stock_threshold": self.low_stock_threshold,
            "last_updated": self.last_updated.isoformat(),
        }
