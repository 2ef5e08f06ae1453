"""Transcript -> intent -> ledger update pipeline used by the API."""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from inventory.domain.Ledger import Ledger
from inventory.domain.ParsedIntent import ParsedIntent
from inventory.infra.Inventory_Repository import InventoryStore
from inventory.logic import status
from inventory.logic.commands.interpreter import interpret
from inventory.logic.inventory.reconciler import reconcile
from inventory.logic.results import Outcome, Updated

logger = logging.getLogger(__name__)


class CommandOutcome:
    """What the caller shows after one voice command."""

    def __init__(self, transcript: str, result: Outcome, intent: Optional[ParsedIntent] = None):
        self.transcript = transcript
        self.result = result
        self.intent = intent

    @property
    def matched(self) -> bool:
        return self.intent is not None

    @property
    def status(self) -> str:
        return self.result.status

    @property
    def transcript_echo(self) -> str:
        return status.transcript_echo(self.transcript)

    @property
    def changed_item_id(self) -> Optional[int]:
        return self.result.changed_item_id

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'matched': self.matched,
            'kind': self.result.kind,
            'status': self.status,
            'transcript': self.transcript_echo,
            'changed_item_id': self.changed_item_id,
            'intent': None,
            'item': None,
        }
        if self.intent is not None:
            data['intent'] = {
                'quantity_delta': self.intent.quantity_delta,
                'item_fragment': self.intent.item_fragment,
                'direction': self.intent.direction.value,
            }
        if isinstance(self.result, Updated):
            data['item'] = self.result.item.to_dict()
            data['item']['low_stock'] = self.result.low_stock
        return data


class VoiceCommandProcessor:
    def __init__(self, ledger: Ledger, store: Optional[InventoryStore] = None, *,
                 strict_direction: bool = False):
        self.ledger = ledger
        self.store = store
        self.strict_direction = strict_direction

    def process(self, transcript: str, *, now: Optional[datetime] = None) -> CommandOutcome:
        parsed = interpret(transcript, strict_direction=self.strict_direction)
        if not isinstance(parsed, ParsedIntent):
            return CommandOutcome(transcript, parsed)
        result = reconcile(parsed, self.ledger, self.store, now=now)
        return CommandOutcome(transcript, result, parsed)


__all__ = ['CommandOutcome', 'VoiceCommandProcessor']
