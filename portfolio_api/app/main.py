"""
Main entrypoint for the Portfolio API.

This module assembles the FastAPI application, sets up logging,
creates the record store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn portfolio_api.app.main:app --reload

The store lives only in process memory: every start begins from the
sample data (or from nothing when ``SEED_SAMPLE_DATA`` is off).
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import PortfolioStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[PortfolioStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the environment‑derived
        module level settings.
    store : Optional[PortfolioStore]
        Store to serve.  When omitted a new one is built, seeded with
        the sample portfolio if ``settings.seed_sample_data`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = PortfolioStore.seeded() if settings.seed_sample_data else PortfolioStore()
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "healthy"}

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
