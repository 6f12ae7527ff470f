"""Pydantic schemas for the public contact form."""

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    model_config = {
        "str_strip_whitespace": True,
    }


class ContactAck(BaseModel):
    message: str
