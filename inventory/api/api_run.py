from typing import Optional
import logging

from fastapi import FastAPI

from inventory.api.routes import items, voice
from inventory.api.state import InventoryService
from inventory.events.web_observers import start as start_event_observers

# Logging
logger = logging.getLogger("inventory_app")


def create_app(service: Optional[InventoryService] = None) -> FastAPI:
    """Build the FastAPI app. Without a service one is created from config on first request."""
    app = FastAPI(title="Voice Inventory Assistant API")
    app.state.inventory = service

    app.include_router(items.router)
    app.include_router(voice.router)

    @app.on_event("startup")
    def _startup():
        """Load the ledger and register event observers when the app starts."""
        if app.state.inventory is None:
            app.state.inventory = InventoryService()
        start_event_observers(app.state.inventory.bus)
        logger.info("Inventory loaded: %s", app.state.inventory.status)

    @app.on_event("shutdown")
    def _shutdown():
        if app.state.inventory is not None:
            app.state.inventory.shutdown()

    return app


app = create_app()
