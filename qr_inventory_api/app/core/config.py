"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields.  A ``Settings`` instance
is built once at process start (``Settings.from_env``) and handed to
``create_app``, which keeps it on ``app.state`` so that routes and services
receive it explicitly instead of importing a module global.
"""

import os
from dataclasses import dataclass

from fastapi import Request


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "QR Inventory API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = ""

    # Signing secret and lifetime for bearer tokens.  Tokens are valid for
    # seven days unless ACCESS_TOKEN_EXPIRE_MINUTES says otherwise.
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    # Path to the SQLite database.  Relative paths are resolved against the
    # project root by ``core.db``.
    database_url: str = "qr_inventory.db"

    host: str = "0.0.0.0"
    port: int = 5000

    min_password_length: int = 6

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            api_prefix=os.getenv("API_PREFIX", cls.api_prefix),
            debug=_env_bool("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE", cls.log_file),
            secret_key=os.getenv("SECRET_KEY", cls.secret_key),
            algorithm=os.getenv("ALGORITHM", cls.algorithm),
            access_token_expire_minutes=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(cls.access_token_expire_minutes))
            ),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            min_password_length=int(os.getenv("MIN_PASSWORD_LENGTH", str(cls.min_password_length))),
        )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
