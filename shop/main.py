"""
==============================================================================
Shop Catalog - Application Entry Point
==============================================================================

FastAPI application exposing the in-memory product catalog:
- Add / delete products by id
- Search by product name and by producer
- Health probes

Usage:
------
    # Development
    uvicorn shop.main:app --reload

    # Production
    uvicorn shop.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shop.api.router import api_router
from shop.catalog import Catalog
from shop.config import Settings, get_settings
from shop.core.exceptions import register_exception_handlers


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Each Application owns exactly one Catalog, created on startup and
    stored on ``app.state.catalog``. The catalog is dropped on shutdown.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info(f"🚀 Starting {self._settings.app_name}")
        app.state.catalog = self._create_catalog()
        logger.info(f"✅ {self._settings.app_name} ready on http://{self._settings.host}:{self._settings.port}")

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        catalog = getattr(app.state, "catalog", None)
        if catalog is not None:
            logger.info(f"🛑 Shutting down, discarding {len(catalog)} products")
        app.state.catalog = None

    def _create_catalog(self) -> Catalog:
        """Create the catalog this application owns."""
        return Catalog(
            name_limit=self._settings.name_search_limit,
            producer_limit=self._settings.producer_search_limit,
            case_sensitive=self._settings.case_sensitive_search,
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shop.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
