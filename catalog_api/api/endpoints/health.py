"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from catalog_api.catalog.store import CatalogStore
from catalog_api.core.dependencies import get_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def get_health(self) -> dict:
        """Get full health status."""
        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "catalog": "healthy",
            },
            "details": self._store.stats(),
        }


@router.get("")
async def health_check(store: CatalogStore = Depends(get_store)):
    """Health check endpoint with catalog counts."""
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
