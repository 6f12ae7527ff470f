"""
Logging setup for the inventory API.

``setup_logging`` reads the level, the optional log file and the debug
flag from ``Settings``.  Handlers are attached to the root logger only
once per process, so repeated ``create_app`` calls (as in the test
suite) do not stack them; levels are reapplied on every call.

Uvicorn's per-request access log is kept at WARNING outside debug mode
because the services already log every item change and login.
"""

import logging
from pathlib import Path

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are noisy at INFO.
QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet chatty libraries.

    Parameters
    ----------
    settings : Settings
        ``log_level`` (case insensitive level name), ``log_file`` (empty
        for console only) and ``debug`` are used.
    """
    root = logging.getLogger()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    root.setLevel(level)

    quiet_level = logging.NOTSET if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
