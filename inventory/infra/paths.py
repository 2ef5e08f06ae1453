from pathlib import Path

from inventory.utilities.config import INVENTORY_DATA_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
INVENTORY_FILE = Path(INVENTORY_DATA_FILE).resolve() if INVENTORY_DATA_FILE else DATA_DIR / 'inventory.json'

__all__ = ['DATA_DIR', 'INVENTORY_FILE']
