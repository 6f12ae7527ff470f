"""
Pydantic schemas for inventory items.

The JSON wire format uses camelCase names (``itemName``, ``qrCode``,
``createdAt``) because that is what the web client sends and reads.
Python code uses the snake_case attribute names; ``populate_by_name``
lets either form be used when building the models.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt

# Largest value SQLite stores as an INTEGER; anything above turns into REAL.
MAX_QUANTITY = 2**63 - 1


class ItemCreate(BaseModel):
    """Schema for registering a new item.

    ``quantity`` may be zero but must be present.
    """

    item_name: str = Field(..., alias="itemName", min_length=1, examples=["USB Cable"])
    category: str = Field(..., min_length=1, examples=["Electronics"])
    quantity: StrictInt = Field(..., ge=0, le=MAX_QUANTITY, examples=[3])
    location: str = Field(..., min_length=1, examples=["Shelf A2"])

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class QuantityAdjust(BaseModel):
    """Signed change to apply to an item's quantity."""

    delta: StrictInt = Field(..., ge=-MAX_QUANTITY, le=MAX_QUANTITY, examples=[-1])


class ItemRead(BaseModel):
    """Schema for reading an item.

    ``qr_code`` holds a PNG data URI whose QR payload is ``str(id)``.
    """

    id: int
    item_name: str = Field(..., alias="itemName")
    category: str
    quantity: int
    location: str
    qr_code: Optional[str] = Field(None, alias="qrCode")
    user_id: int = Field(..., alias="userId")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }
