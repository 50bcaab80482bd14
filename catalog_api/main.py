"""
==============================================================================
Catalog API - Application Entry Point
==============================================================================

FastAPI application with:
- Category and product CRUD over an in-memory catalog store
- Image uploads served from /uploads
- Health probes

Usage:
------
    # Development
    uvicorn catalog_api.main:app --reload --port 5000

    # Production
    uvicorn catalog_api.main:app --host 0.0.0.0 --port 5000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from catalog_api.config import Settings, get_settings
from catalog_api.core.exceptions import register_exception_handlers
from catalog_api.api.router import api_router
from catalog_api.catalog.store import CatalogStore
from catalog_api.services.upload_service import UploadService


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

    Handles application lifecycle including:
    - Catalog store creation on startup and release on shutdown
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Explicit settings (uses the global settings if None)
        """
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog with image uploads",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        app.state.settings = self._settings
        app.state.store = None

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)

        # Uploaded images, read-only
        app.mount(
            UploadService.URL_PREFIX,
            StaticFiles(directory=str(self._settings.upload_path)),
            name="uploads"
        )

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        app.state.store = self._create_store()

        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"🖼️ Uploads: {self._settings.resolved_public_base_url}{UploadService.URL_PREFIX}/")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        app.state.store = None
        logger.info("✅ Shutdown complete")

    def _create_store(self) -> CatalogStore:
        """Create the catalog store, seeded with demo data when enabled."""
        options = dict(
            fallback_category=self._settings.fallback_category,
            enforce_category_reference=self._settings.enforce_category_reference,
        )
        if self._settings.seed_demo_data:
            return CatalogStore.with_demo_data(**options)
        return CatalogStore(**options)

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

def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
