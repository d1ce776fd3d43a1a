"""Entry point for the Todo API.

Starts the FastAPI application with Uvicorn.  Host and port are read
once from the ``HOST`` and ``PORT`` environment variables (see
``todo_api.app.core.config``); defaults are ``0.0.0.0`` and ``3002``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app  # importing the app also configures logging


async def main() -> None:
    """Serve the API until the process is stopped."""
    logging.getLogger(__name__).info("Server on port %s", settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
