"""
Pydantic models for account data.

Defines schemas for signing up, logging in and reading account
information.  The password hash never leaves the service layer: only
``AccountRead`` is returned through the API.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SignupRequest(BaseModel):
    """Schema for registering an account.

    Email format and password length are checked by ``IdentityService``
    because the minimum length comes from the application settings.
    """

    name: str = Field(..., min_length=1, examples=["Ana"])
    email: str = Field(..., min_length=1, examples=["ana@example.com"])
    password: str = Field(..., min_length=1, examples=["secret1"])

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, examples=["ana@example.com"])
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class AccountRead(BaseModel):
    """Public fields of an account."""

    id: int
    name: str
    email: str

    model_config = {
        "from_attributes": True,
    }


class AuthResponse(BaseModel):
    """Returned by signup and login: the account and a bearer token."""

    user: AccountRead
    token: str
    message: Optional[str] = None
