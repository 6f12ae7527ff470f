"""
Business logic for accounts: sign-up and login.

Both operations return the public account fields together with a
freshly signed bearer token.  Emails are stored lowercased and the
``users.email`` column is ``COLLATE NOCASE``, so uniqueness and lookups
ignore case.
"""

import logging
import sqlite3

from ..core.config import Settings
from ..core.db import get_connection
from ..core.errors import AuthenticationError, ConflictError, ValidationError
from ..core.security import create_access_token, hash_password, verify_password
from ..core.validators import is_valid_email
from ..schemas.user import AccountRead, AuthResponse, LoginRequest, SignupRequest


logger = logging.getLogger(__name__)

# Checked against when the email is unknown so both failure paths cost one
# PBKDF2 run.
_DUMMY_HASH = hash_password("unknown-account-placeholder")


class IdentityService:
    """Registers accounts and verifies their credentials."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def register(self, data: SignupRequest) -> AuthResponse:
        """Create an account and return it with a bearer token.

        Raises
        ------
        ValidationError
            If the email is malformed or the password is too short.
        ConflictError
            If the email (compared case-insensitively) is already taken.
        """
        if not is_valid_email(data.email):
            raise ValidationError("Invalid email format.")
        if len(data.password) < self.settings.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.settings.min_password_length} characters long."
            )
        email = data.email.lower()
        conn = get_connection(self.settings)
        try:
            cursor = conn.cursor()
            existing = cursor.execute(
                "SELECT id FROM users WHERE email = ?", (email,)
            ).fetchone()
            if existing:
                raise ConflictError("Email is already registered.")
            try:
                cursor.execute(
                    "INSERT INTO users (name, email, password) VALUES (?, ?, ?)",
                    (data.name, email, hash_password(data.password)),
                )
            except sqlite3.IntegrityError:
                # Lost a race with a concurrent signup for the same address
                raise ConflictError("Email is already registered.")
            account_id = cursor.lastrowid
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.info("Registered account %s (%s)", account_id, email)
        return self._issue(
            AccountRead(id=account_id, name=data.name, email=email),
            "Account created successfully.",
        )

    async def authenticate(self, data: LoginRequest) -> AuthResponse:
        """Check an email/password pair and return the account with a new token.

        Unknown emails and wrong passwords raise the same
        ``AuthenticationError`` so callers cannot tell which one happened.
        """
        conn = get_connection(self.settings)
        try:
            row = conn.execute(
                "SELECT id, name, email, password FROM users WHERE email = ?",
                (data.email.lower(),),
            ).fetchone()
        finally:
            conn.close()
        stored_hash = row["password"] if row else _DUMMY_HASH
        password_ok = verify_password(data.password, stored_hash)
        if not row or not password_ok:
            logger.warning("Failed login attempt for %s", data.email)
            raise AuthenticationError("Invalid credentials")
        logger.info("Account %s logged in", row["id"])
        return self._issue(
            AccountRead(id=row["id"], name=row["name"], email=row["email"]),
            f"Welcome back, {row['name']}!",
        )

    def _issue(self, account: AccountRead, message: str) -> AuthResponse:
        token = create_access_token({"sub": str(account.id), "email": account.email}, self.settings)
        return AuthResponse(user=account, token=token, message=message)
