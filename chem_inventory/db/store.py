from fastapi import Request

from chem_inventory.services.inventory_store import InventoryStore


def get_store(request: Request) -> InventoryStore:
    """Dependency to get the inventory store owned by the running app."""
    return request.app.state.inventory_store
