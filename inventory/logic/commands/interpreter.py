"""Voice command interpreter.

Turns a final speech transcript into a ParsedIntent. Patterns are tried in
order and the first one that matches wins:

    1. "[I] used <N> <item>"            -> consume
    2. "remove <N> <item>"              -> consume
    3. "add <N> <item> [to inventory]"  -> add
    4. "<N> <item> used"                -> consume

Direction is decided by looking for the word "add" anywhere in the phrase,
not by which pattern matched, so "used 3 adductor pads" counts as an Add.
Pass ``strict_direction=True`` to take the direction from the pattern instead.
"""
from __future__ import annotations
import logging
import re
from typing import List, Tuple, Union

from inventory.domain.ParsedIntent import Direction, ParsedIntent
from inventory.logic import status
from inventory.logic.results import Unrecognized

logger = logging.getLogger(__name__)

__all__ = ["PATTERNS", "interpret", "infer_direction"]

PATTERNS: List[Tuple[re.Pattern, Direction]] = [
    (re.compile(r"(?:i\s+)?used\s+(\d+)\s+(.+)", re.IGNORECASE), Direction.CONSUME),
    (re.compile(r"remove\s+(\d+)\s+(.+)", re.IGNORECASE), Direction.CONSUME),
    (re.compile(r"add\s+(\d+)\s+(.+?)(?:\s+to\s+inventory)?[\s.!?]*$", re.IGNORECASE), Direction.ADD),
    (re.compile(r"(\d+)\s+(.+?)\s+used", re.IGNORECASE), Direction.CONSUME),
]


def infer_direction(lowered: str) -> Direction:
    """Add if the literal word 'add' occurs anywhere, otherwise Consume."""
    return Direction.ADD if "add" in lowered else Direction.CONSUME


def interpret(transcript, *, strict_direction: bool = False) -> Union[ParsedIntent, Unrecognized]:
    """Parse a transcript into a ParsedIntent, or return Unrecognized. Never raises."""
    if not isinstance(transcript, str) or not transcript.strip():
        return Unrecognized(transcript or "", status.unrecognized())

    lowered = transcript.lower()
    for pattern, pattern_direction in PATTERNS:
        match = pattern.search(lowered)
        if not match:
            continue
        fragment = match.group(2).strip()
        if not fragment:
            continue
        try:
            quantity = int(match.group(1), 10)
        except ValueError:
            # numerals past the interpreter's int conversion limit
            logger.info("Quantity too long in voice command: %.40r", transcript)
            return Unrecognized(transcript, status.unrecognized())
        direction = pattern_direction if strict_direction else infer_direction(lowered)
        intent = ParsedIntent(quantity, fragment, direction)
        logger.debug("Interpreted %r as %r", transcript, intent)
        return intent

    logger.info("Unrecognized voice command: %r", transcript)
    return Unrecognized(transcript, status.unrecognized())
