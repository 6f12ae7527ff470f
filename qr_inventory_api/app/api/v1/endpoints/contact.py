"""Public contact form endpoint."""

from fastapi import APIRouter, Depends, status

from qr_inventory_api.app.api.deps import get_contact_service
from qr_inventory_api.app.schemas.contact import ContactAck, ContactCreate
from qr_inventory_api.app.services.contact_service import ContactService


router = APIRouter()


@router.post("", response_model=ContactAck, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    payload: ContactCreate,
    service: ContactService = Depends(get_contact_service),
) -> ContactAck:
    return await service.submit(payload)
