"""FastAPI dependencies that build services from the app's settings."""

from fastapi import Depends

from ..core.config import Settings, get_settings
from ..services.contact_service import ContactService
from ..services.identity_service import IdentityService
from ..services.inventory_service import InventoryService


def get_identity_service(settings: Settings = Depends(get_settings)) -> IdentityService:
    return IdentityService(settings)


def get_inventory_service(settings: Settings = Depends(get_settings)) -> InventoryService:
    return InventoryService(settings)


def get_contact_service(settings: Settings = Depends(get_settings)) -> ContactService:
    return ContactService(settings)
