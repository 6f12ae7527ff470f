"""Entry point for the QR inventory API server.

Reads configuration from the environment (see
``qr_inventory_api.app.core.config.Settings``), builds the FastAPI app
and serves it with Uvicorn on ``HOST``:``PORT``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from qr_inventory_api.app.core.config import Settings
from qr_inventory_api.app.main import create_app


async def run_api(settings: Settings) -> None:
    """Start the API using Uvicorn."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    settings = Settings.from_env()
    try:
        asyncio.run(run_api(settings))
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
