"""
Inventory item endpoints.

All routes require a bearer token and only ever touch items owned by
the authenticated account.  Quantity changes go through
``PATCH /items/{item_id}/quantity`` with a signed ``delta``; there is no
route that sets a quantity directly.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from qr_inventory_api.app.api.deps import get_inventory_service
from qr_inventory_api.app.core.security import CurrentAccount, get_current_account
from qr_inventory_api.app.schemas.item import ItemCreate, ItemRead, QuantityAdjust
from qr_inventory_api.app.services.inventory_service import InventoryService


router = APIRouter()


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_in: ItemCreate,
    current_account: CurrentAccount = Depends(get_current_account),
    service: InventoryService = Depends(get_inventory_service),
) -> ItemRead:
    """Create an item and generate the QR code for its identifier."""
    return await service.create_item(current_account.id, item_in)


@router.get("", response_model=List[ItemRead])
async def list_items(
    current_account: CurrentAccount = Depends(get_current_account),
    service: InventoryService = Depends(get_inventory_service),
) -> List[ItemRead]:
    """Return the caller's items, newest first."""
    return await service.list_items(current_account.id)


@router.get("/{item_id}", response_model=ItemRead)
async def get_item(
    item_id: str,
    current_account: CurrentAccount = Depends(get_current_account),
    service: InventoryService = Depends(get_inventory_service),
) -> ItemRead:
    return await service.get_item(current_account.id, item_id)


@router.patch("/{item_id}/quantity", response_model=ItemRead)
async def adjust_quantity(
    item_id: str,
    body: QuantityAdjust,
    current_account: CurrentAccount = Depends(get_current_account),
    service: InventoryService = Depends(get_inventory_service),
) -> ItemRead:
    """Apply a signed delta to the item's quantity.

    Returns 400 when the result would be negative; the stored quantity
    is left as it was.
    """
    return await service.adjust_quantity(current_account.id, item_id, body.delta)
