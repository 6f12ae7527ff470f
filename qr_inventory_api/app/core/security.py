"""
Security helpers for password hashing and JWT authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC-SHA256 signatures and base64url encoding.  Tokens carry the
account id (``sub``), the account email, the issue time (``iat``) and an
expiration timestamp (``exp``).  The signing secret is always passed in
from ``Settings``; nothing here reads configuration on its own.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt.

``get_current_account`` is the credential verification gate used by every
inventory route.  It distinguishes a missing token, an invalid token and
an expired token so that clients get a precise message, while all three
surface as HTTP 401.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, get_settings
from .errors import ExpiredCredential, InvalidCredential, Unauthenticated


PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    settings: Settings,
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` fields (UNIX
    timestamps).  The token is a string of the form
    ``header.payload.signature``, where each part is base64url encoded.
    Clients must include this token in the ``Authorization`` header as
    ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "1", "email": ...}``).
    settings : Settings
        Supplies the signing secret and the default lifetime.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = settings.access_token_expire_minutes * 60
    now = int(time.time())
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_delta
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, verifies the
    HMAC signature and checks the ``exp`` field.

    Raises
    ------
    InvalidCredential
        If the token is malformed, uses another algorithm or its
        signature does not match.
    ExpiredCredential
        If the signature is valid but ``exp`` has passed.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise InvalidCredential()
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        actual_sig = _b64_url_decode(signature_b64)
    except ValueError:
        raise InvalidCredential()
    if not isinstance(header, dict) or header.get("alg") != settings.algorithm:
        raise InvalidCredential()

    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    # Constant-time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        raise InvalidCredential()

    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        expires_at = int(data["exp"])
    except (ValueError, KeyError, TypeError):
        raise InvalidCredential()
    if expires_at < int(time.time()):
        raise ExpiredCredential()
    return data


@dataclass(frozen=True)
class CurrentAccount:
    """Identity attached to a request once its bearer token is verified."""

    id: int
    email: str


security = HTTPBearer(auto_error=False)


def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> CurrentAccount:
    """Dependency that verifies the bearer token and returns the caller.

    A missing ``Authorization`` header or one that does not use the
    ``Bearer`` scheme raises ``Unauthenticated``; a bad token raises
    ``InvalidCredential`` and an expired one ``ExpiredCredential``.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    payload = decode_access_token(credentials.credentials, settings)
    try:
        account_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise InvalidCredential()
    return CurrentAccount(id=account_id, email=str(payload.get("email", "")))


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Splits the stored string into salt and hash, recomputes the
    PBKDF2-HMAC digest and compares it using constant-time comparison.
    A stored value that is not in ``salt$hash`` form never matches.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
