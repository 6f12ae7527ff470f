"""
Top-level router for the API.

Aggregates the domain routers under one prefix.  When new endpoints
are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, contact, items


router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
