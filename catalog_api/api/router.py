"""
==============================================================================
Main API Router
==============================================================================

Combines all endpoint routers. Routes are served from the root path.

==============================================================================
"""

from fastapi import APIRouter

from catalog_api.api.endpoints import health, categories, products, uploads


class MainAPIRouter:
    """
    Main API router combining all resource routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter()
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all resource routers."""
        self._router.include_router(health.router)
        self._router.include_router(categories.router)
        self._router.include_router(products.router)
        self._router.include_router(uploads.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
