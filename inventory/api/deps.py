from fastapi import Request

from inventory.api.state import InventoryService


def get_service(request: Request) -> InventoryService:
    """Return the app's InventoryService, creating it on first use."""
    service = getattr(request.app.state, 'inventory', None)
    if service is None:
        service = InventoryService()
        request.app.state.inventory = service
    return service
