"""Serve the GymChain API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  Other configuration is
read by ``gymchain_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server


async def main() -> None:
    """Start the API server and block until it stops."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()
    config = Config(app="gymchain_api.app.main:app", host=host, port=port, reload=False, log_level=log_level)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
