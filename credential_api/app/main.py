"""
Main entrypoint for the Credential API.

This module assembles the FastAPI application, sets up logging and
includes the user router.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``, so
it can be served with::

    uvicorn credential_api.app.main:app --reload
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.storage import resolve_user_data_path


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module level ``settings``.  The
        chosen settings are stored on ``app.state.settings`` where the
        endpoint dependencies read them.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    setup_logging(config.log_level, config.log_file, debug=config.debug)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.settings = config

    app.include_router(router, prefix=config.mount_path.rstrip("/"))

    @app.on_event("startup")
    async def startup_event() -> None:
        logger = logging.getLogger(__name__)
        data_path = resolve_user_data_path(config.user_data_path)
        if os.path.exists(data_path):
            logger.info("Serving user record from %s", data_path)
        else:
            # Not fatal: /profile and /login answer with 500 until the file exists.
            logger.warning("User record file %s does not exist yet", data_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
