"""
Storage for the bearer token held by a client.

The API client never decides where a token lives; it is handed a
``CredentialStore`` and calls ``get``/``set``/``clear`` on it.  A web
front end would back this with local storage, a CLI with a file.
"""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialStore(ABC):
    """Interface for keeping the current bearer token."""

    @abstractmethod
    def get(self) -> Optional[str]:
        """Return the stored token, or ``None`` when logged out."""

    @abstractmethod
    def set(self, token: str) -> None:
        """Replace the stored token."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored token."""


class MemoryCredentialStore(CredentialStore):
    """Keeps the token in process memory."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None
