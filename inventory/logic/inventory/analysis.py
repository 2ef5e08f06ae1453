"""Inventory analysis helpers used by the alerts endpoint."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from inventory.domain.InventoryItem import InventoryItem

__all__ = ["compute_low_stock", "serialize_item"]


def serialize_item(item: InventoryItem, *, highlighted_id: int | None = None) -> Dict[str, Any]:
    data = item.to_dict()
    data['low_stock'] = item.is_low_stock
    data['highlighted'] = highlighted_id is not None and item.id == highlighted_id
    return data


def compute_low_stock(items: Iterable[InventoryItem]) -> List[Dict[str, Any]]:
    """Return items whose quantity is at or below their own threshold, emptiest first."""
    low = [
        {
            'id': item.id,
            'name': item.name,
            'quantity': item.quantity,
            'unit': item.unit,
            'threshold': item.low_stock_threshold,
        }
        for item in items if item.is_low_stock
    ]
    low.sort(key=lambda x: (x['quantity'], x['name']))
    return low
