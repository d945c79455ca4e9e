"""
Main entrypoint for the Fleet Management API.

This module assembles the FastAPI application, sets up logging, error
handlers and CORS and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn fleet_manager_api.app.main:app --reload

The API is served twice: at the root (``/vessels``) and under
``settings.api_prefix`` (``/api/vessels``), so clients written against
either layout keep working.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import FleetDatabase, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(db: Optional[FleetDatabase] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    db : Optional[FleetDatabase]
        Record storage for this application.  When omitted a new
        database is built, seeded with the demo fleet unless
        ``SEED_DATA`` is disabled.  Tests pass their own instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.db = db if db is not None else init_db(seed=settings.seed_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    prefix = settings.api_prefix.rstrip("/")
    if prefix:
        app.include_router(v1_router, prefix=prefix)
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
