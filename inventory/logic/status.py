"""Human-readable status and transcript strings shown next to the inventory."""
from typing import Iterable

IDLE_STATUS = "Click the button and speak your inventory update"
LISTENING_STATUS = "Listening... Speak your command"
LISTENING_TRANSCRIPT = "Listening for your voice command..."
ERROR_TRANSCRIPT = "Error occurred. Please try again."
UNSUPPORTED_STATUS = "Speech recognition not supported. Please use Chrome, Edge, or Safari."
UNRECOGNIZED_STATUS = 'Could not understand command. Try: "I used 5 syringes" or "Add 10 gloves"'


def transcript_echo(transcript: str) -> str:
    return f'You said: "{transcript}"'


def updated(action: str, delta: int, name: str, before: int, after: int) -> str:
    return f"✅ {action} {delta} {name}. Stock: {before} → {after}"


def not_found(fragment: str, names: Iterable[str]) -> str:
    return f'❌ Item "{fragment}" not found. Available items: {", ".join(names)}'


def unrecognized() -> str:
    return UNRECOGNIZED_STATUS


def persistence_failed(name: str, error: object) -> str:
    return f"❌ Failed to update {name}: {error}"


def load_failed(error: object) -> str:
    return f"❌ Failed to load inventory: {error}"


def registered(name: str) -> str:
    return f"✅ Added new item {name}"


def capture_error(error: object) -> str:
    return f"Error: {error}"


def out_of_sync(name: str) -> str:
    return f"❌ {name} was saved but the inventory shown is out of date. Refresh to see it."
