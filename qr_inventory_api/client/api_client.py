"""QR inventory API client.

A thin wrapper around the REST API built on ``requests``.  Every public
method returns a tuple ``(data, error)``: on success ``data`` holds the
parsed JSON and ``error`` is ``None``; on failure ``data`` is ``None``
and ``error`` is a dictionary with ``status_code`` and ``message``.

The bearer token lives in a :class:`CredentialStore`.  Whenever an
authenticated call comes back with HTTP 401 (missing, invalid or
expired token) the client clears the store and invokes the
``on_unauthenticated`` callback so the caller can send the user back to
the login screen.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

from .credentials import CredentialStore, MemoryCredentialStore


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class InventoryClient:
    """Client for the inventory, auth and contact endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        credentials: Optional[CredentialStore] = None,
        on_unauthenticated: Optional[Callable[[str], None]] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
            api_prefix: Path the API is mounted under.
            credentials: Where the bearer token is kept.  Defaults to an
                in-memory store.
            on_unauthenticated: Called with the server's message after a
                401 on an authenticated call.
            session: Optional requests session (or anything with the same
                ``request`` method).  Created automatically when omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.credentials = credentials or MemoryCredentialStore()
        self.on_unauthenticated = on_unauthenticated
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user: Optional[Dict[str, Any]] = None

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        authenticated: bool = True,
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path below the API prefix (e.g. ``/items``).
            json_body: JSON body to send with the request.
            authenticated: Attach the stored token and treat a 401 as a
                lost session.
        """
        url = f"{self.base_url}{self.api_prefix}{path}"
        headers: Dict[str, str] = {}
        if authenticated:
            token = self.credentials.get()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            if authenticated and response.status_code == 401:
                self._session_lost(message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            err_json = response.json()
        except ValueError:
            return response.text or "Request failed"
        if isinstance(err_json, dict):
            return err_json.get("detail") or err_json.get("message") or str(err_json)
        return str(err_json)

    def _session_lost(self, message: str) -> None:
        self.credentials.clear()
        self.user = None
        if self.on_unauthenticated is not None:
            self.on_unauthenticated(message)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def signup(self, name: str, email: str, password: str) -> Result:
        """Register an account and keep the returned token."""
        data, error = self._request(
            "POST",
            "/auth/signup",
            json_body={"name": name, "email": email, "password": password},
            authenticated=False,
        )
        if error:
            return None, error
        self._remember(data)
        return data, None

    def login(self, email: str, password: str) -> Result:
        """Log in and keep the returned token."""
        data, error = self._request(
            "POST",
            "/auth/login",
            json_body={"email": email, "password": password},
            authenticated=False,
        )
        if error:
            return None, error
        self._remember(data)
        return data, None

    def logout(self) -> None:
        self.credentials.clear()
        self.user = None

    def _remember(self, data: Dict[str, Any]) -> None:
        self.credentials.set(data["token"])
        self.user = data.get("user")

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Return the caller's items, newest first."""
        data, error = self._request("GET", "/items")
        if error:
            return [], error
        return data or [], None

    def get_item(self, item_id: Any) -> Result:
        return self._request("GET", f"/items/{item_id}")

    def create_item(self, item_name: str, category: str, quantity: int, location: str) -> Result:
        return self._request(
            "POST",
            "/items",
            json_body={
                "itemName": item_name,
                "category": category,
                "quantity": quantity,
                "location": location,
            },
        )

    def adjust_quantity(self, item_id: Any, delta: int) -> Result:
        """Add ``delta`` (positive or negative) to an item's quantity."""
        return self._request("PATCH", f"/items/{item_id}/quantity", json_body={"delta": delta})

    def set_quantity(self, item: Dict[str, Any], target: int) -> Result:
        """Bring ``item`` to an absolute quantity.

        The server only accepts deltas, so ``target - item["quantity"]`` is
        sent.  A negative target is rejected locally and an unchanged
        quantity sends nothing.
        """
        if target < 0:
            return None, {"status_code": None, "message": "Invalid quantity. Please enter a number >= 0"}
        delta = target - item["quantity"]
        if delta == 0:
            return item, None
        return self.adjust_quantity(item["id"], delta)

    # ------------------------------------------------------------------
    # Contact form
    # ------------------------------------------------------------------
    def submit_contact(self, name: str, email: str, message: str) -> Result:
        return self._request(
            "POST",
            "/contact",
            json_body={"name": name, "email": email, "message": message},
            authenticated=False,
        )
