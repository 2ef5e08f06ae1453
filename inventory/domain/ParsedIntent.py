"""ParsedIntent: the structured form of a recognised voice command (never persisted)."""
from enum import Enum


class Direction(Enum):
    CONSUME = "consume"
    ADD = "add"


class ParsedIntent:
    def __init__(self, quantity_delta: int, item_fragment: str, direction: Direction):
        self.quantity_delta = quantity_delta
        self.item_fragment = item_fragment
        self.direction = direction

    @property
    def is_adding(self) -> bool:
        return self.direction is Direction.ADD

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParsedIntent):
            return NotImplemented
        return (self.quantity_delta, self.item_fragment, self.direction) == \
            (other.quantity_delta, other.item_fragment, other.direction)

    def __repr__(self) -> str:
        return (f"ParsedIntent(quantity_delta={self.quantity_delta!r}, "
                f"item_fragment={self.item_fragment!r}, direction={self.direction.name})")
