"""Configuration management for the Voice Inventory Assistant."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from inventory.utilities.constants import DEFAULT_HIGHLIGHT_SECONDS

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Inventory storage ('json' file or process-local 'memory')
INVENTORY_STORE: Final[str] = os.getenv('INVENTORY_STORE', 'json').strip().lower()
INVENTORY_DATA_FILE: Final[str] = os.getenv('INVENTORY_DATA_FILE', '')
INVENTORY_SEED_DEMO: Final[bool] = _flag('INVENTORY_SEED_DEMO', 'true')

# Voice commands
# Off keeps the historical behaviour: any "add" in the phrase means Add.
STRICT_DIRECTION: Final[bool] = _flag('INVENTORY_STRICT_DIRECTION', 'false')
HIGHLIGHT_SECONDS: Final[float] = float(os.getenv('HIGHLIGHT_SECONDS', str(DEFAULT_HIGHLIGHT_SECONDS)))
