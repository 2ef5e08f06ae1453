"""Ledger aggregate: ordered collection of InventoryItem entries with low-stock tracking."""
from datetime import datetime
from typing import List, Optional
from inventory.domain.InventoryItem import InventoryItem
from inventory.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from inventory.events.event_helpers import publish_low_stock


class Ledger:
    def __init__(self, bus: Optional[EventBus] = None):
        self.items: List[InventoryItem] = []
        self._event_bus = bus or GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def _notify_low_stock(self, item: InventoryItem):
        publish_low_stock(item, item.quantity, item.low_stock_threshold, bus=self._event_bus)

    def add_item(self, item: InventoryItem):
        '''
        Appends an item to the ledger. Ids must stay unique.
        '''
        if self.get_item(item.id) is not None:
            raise ValueError(f"Duplicate inventory id: {item.id}")
        self.items.append(item)

    def get_items(self) -> List[InventoryItem]:
        return self.items

    def get_item(self, item_id: int) -> Optional[InventoryItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def find_match(self, fragment: str) -> Optional[InventoryItem]:
        '''
        Returns the first item, in ledger order, whose name contains the
        fragment or is contained in it (case-insensitive).
        '''
        for item in self.items:
            if item.matches(fragment):
                return item
        return None

    def item_names(self) -> List[str]:
        return [item.name for item in self.items]

    def next_id(self) -> int:
        return max((item.id for item in self.items), default=0) + 1

    def apply_quantity(self, item_id: int, quantity: int, timestamp: datetime) -> InventoryItem:
        '''
        Sets the stored quantity of an item and re-evaluates its low-stock state.
        '''
        item = self.get_item(item_id)
        if item is None:
            raise KeyError(item_id)
        item.set_quantity(quantity, timestamp)
        self._evaluate_item(item)
        return item

    # --- Evaluation logic --------------------------------------------------
    def _evaluate_item(self, item: InventoryItem):
        if item.is_low_stock:
            self._notify_low_stock(item)

    def scan_and_notify(self):
        for item in self.items:
            self._evaluate_item(item)
        return self

    def low_stock_items(self) -> List[InventoryItem]:
        return [item for item in self.items if item.is_low_stock]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Ledger from a list of dictionaries, keeping their order.
        '''
        for item_data in data:
            self.add_item(InventoryItem.from_dict(item_data))
        return self

    def to_dict(self):
        '''
        Converts the Ledger to a list of dictionaries.
        '''
        return [item.to_dict() for item in self.items]
