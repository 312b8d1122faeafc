"""
Main entrypoint for the Message Board API.

This module assembles the FastAPI application: it sets up logging,
creates the message store, includes the API router under ``/api`` and
serves the browser client from the static directory for every other
path.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn message_board_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, get_static_path, settings as default_settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .services.message_service import MessageStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    store : Optional[MessageStore]
        Store backing the board.  A fresh, empty store is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.message_store = store if store is not None else MessageStore()

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    # Anything that is not an API route is looked up in the static
    # directory.  This mount must stay last so it does not shadow the
    # API routes.
    static_path = get_static_path(settings)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="static")
    else:
        logger.warning("Static directory %s does not exist; serving the API only", static_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
