"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for application-owned resources.

The catalog store and settings live on ``app.state`` and are created by the
application lifespan. Handlers receive them through these dependencies
instead of importing module-level globals.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(store: CatalogStore = Depends(get_store)):
        return store.list_products()

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from catalog_api.catalog.store import CatalogStore
from catalog_api.config import Settings
from catalog_api.core import exceptions
from catalog_api.services.upload_service import UploadService


# Module logger
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_store(request: Request) -> CatalogStore:
    """
    Catalog store owned by the running application.

    Raises:
        AppException: INTERNAL_ERROR if the application has not started
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Catalog store requested before application startup")
        raise exceptions.internal_error("Catalog store not initialized")
    return store


def get_upload_service(settings: Settings = Depends(get_app_settings)) -> UploadService:
    """Upload service bound to the application's settings."""
    return UploadService(settings)
