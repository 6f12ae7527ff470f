"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these exceptions; ``main.create_app`` registers a handler
that renders any ``ServiceError`` as ``{"detail": message}`` with the
status code carried by the exception class.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: dict | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required."


class InvalidOperation(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation not allowed."


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email is already registered."


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class AuthenticationError(ServiceError):
    """Any failure to establish who the caller is (HTTP 401)."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class Unauthenticated(AuthenticationError):
    default_message = "No token provided. Please log in."


class InvalidCredential(AuthenticationError):
    default_message = "Invalid token. Please log in again."


class ExpiredCredential(AuthenticationError):
    default_message = "Token expired. Please log in again."
