"""
Authentication endpoints.

``/auth/signup`` creates an account and ``/auth/login`` exchanges an
email and password for a bearer token.  Both return ``{user, token}``.
"""

from fastapi import APIRouter, Depends, status

from qr_inventory_api.app.api.deps import get_identity_service
from qr_inventory_api.app.schemas.user import AuthResponse, LoginRequest, SignupRequest
from qr_inventory_api.app.services.identity_service import IdentityService


router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: SignupRequest,
    service: IdentityService = Depends(get_identity_service),
) -> AuthResponse:
    """Register a new account.

    Returns 400 if a field is missing, the email is malformed or the
    password is too short, and 409 if the email is already registered.
    """
    return await service.register(payload)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> AuthResponse:
    """Authenticate and return a fresh token (401 on bad credentials)."""
    return await service.authenticate(payload)
