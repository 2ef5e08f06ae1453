from typing import Optional

from fastapi import APIRouter, Depends, Query

from inventory.api.deps import get_service
from inventory.api.state import InventoryService
from inventory.events.web_observers import get_events
from inventory.logic.results import LedgerOutOfSync, Registered
from inventory.utilities.validators import ItemInput

router = APIRouter()


@router.get('/api/inventory')
def list_inventory(refresh: bool = Query(default=False, description="Re-read every item from the store first"),
                   service: InventoryService = Depends(get_service)):
    if refresh:
        service.reload()
    return service.snapshot()


@router.get('/api/inventory/low-stock')
def low_stock(service: InventoryService = Depends(get_service)):
    return service.low_stock()


@router.get('/api/inventory/alerts')
def inventory_alerts(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
    service: InventoryService = Depends(get_service),
):
    """
    Return recent inventory events (low stock, updates, new items).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/inventory/alerts?since=<next_cursor>
    """
    return get_events(since)


@router.post('/api/inventory/items')
def add_item(payload: Optional[ItemInput] = None, service: InventoryService = Depends(get_service)):
    result = service.register(payload or ItemInput())
    return {
        'success': result.ok,
        'kind': result.kind,
        'status': result.status,
        'item': result.item.to_dict() if isinstance(result, (Registered, LedgerOutOfSync)) else None,
    }
