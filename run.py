"""Entry point for the message board server.

Serves the FastAPI application with Uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``message_board_api/app/core/config.py``.  It is intended to be
executed from the project root::

    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from message_board_api.app.core.config import settings
from message_board_api.app.core.logging_config import setup_logging
from message_board_api.app.main import app


async def run_api() -> None:
    """Start the API server and wait until it shuts down."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by setup_logging.
        log_config=None,
        # Access logs only at DEBUG.
        access_log=settings.log_level.upper() == "DEBUG",
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    setup_logging(settings.log_level, settings.log_file)
    logging.getLogger(__name__).info("Listening on %s:%s...", settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
