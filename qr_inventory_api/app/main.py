"""
Main entrypoint for the QR Inventory API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app from an explicit
``Settings`` object; ``app`` is created at import time from the process
environment so that uvicorn can discover it::

    uvicorn qr_inventory_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as api_router
from .core.config import Settings
from .core.db import init_db
from .core.errors import ServiceError
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)

RANGE_ERRORS = {"greater_than_equal", "less_than_equal"}


def _validation_message(exc: RequestValidationError) -> str:
    """Reduce pydantic's error list to one sentence for the client."""
    errors = exc.errors()
    for err in errors:
        if tuple(err.get("loc", ()))[-1:] == ("delta",) and err.get("type") not in RANGE_ERRORS:
            return "delta (number) is required."
    if any(err.get("type") == "missing" for err in errors):
        return "All fields are required."
    if not errors:
        return "Invalid request."
    err = errors[0]
    loc = err.get("loc", ())
    field = str(loc[-1]) if len(loc) > 1 else "body"
    return f"Invalid value for '{field}': {err.get('msg', 'invalid')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Map the service error taxonomy and unexpected failures to responses."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this app instance.  Read from the environment
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.from_env()

    # Initialise logging before anything else so that the startup
    # messages below are emitted.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", tags=["health"])
    async def health() -> dict:
        return {"message": "Inventory API is running"}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db(settings)
        logger.info("Database ready, API mounted at %s", settings.api_prefix or "/")

    return app


app = create_app()
