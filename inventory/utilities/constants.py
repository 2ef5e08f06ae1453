from typing import Final

DEFAULT_HIGHLIGHT_SECONDS: Final[float] = 2.0

DEFAULT_UNIT: Final[str] = "pieces"
DEFAULT_QUANTITY: Final[int] = 20
DEFAULT_LOW_STOCK_THRESHOLD: Final[int] = 5
SAMPLE_ITEM_NAME: Final[str] = "Sample Item {n}"

EXAMPLE_PHRASES: Final[list[str]] = [
    "I used 5 syringes",
    "Remove 3 bandages",
    "Used 2 vials of lidocaine",
    "Add 10 gloves to inventory",
]

SEED_INVENTORY: Final[list[dict]] = [
    {"id": 1, "name": "Syringes", "quantity": 25, "unit": "pieces", "low_stock_threshold": 10},
    {"id": 2, "name": "Bandages", "quantity": 15, "unit": "rolls", "low_stock_threshold": 5},
    {"id": 3, "name": "Lidocaine", "quantity": 8, "unit": "vials", "low_stock_threshold": 3},
    {"id": 4, "name": "Gloves", "quantity": 50, "unit": "pairs", "low_stock_threshold": 20},
    {"id": 5, "name": "Gauze", "quantity": 12, "unit": "packs", "low_stock_threshold": 5},
]
