"""
==============================================================================
Category Endpoints
==============================================================================

Listing, creating and deleting catalog categories.

==============================================================================
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status

from catalog_api.catalog.store import CatalogStore
from catalog_api.core.dependencies import get_store
from catalog_api.schemas.category import CategoryCreate, CategoryResponse


router = APIRouter(prefix="/categories", tags=["Categories"])


class CategoryController:
    """Controller for category operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_all(self) -> List[str]:
        """List category names."""
        return self._store.list_categories()

    def create(self, data: Optional[CategoryCreate]) -> CategoryResponse:
        """Add a category."""
        name = self._store.add_category(data.name if data else None)
        return CategoryResponse(name=name)

    def delete(self, name: str) -> None:
        """Delete a category, moving its products to the fallback."""
        self._store.remove_category(name)


@router.get("", response_model=List[str])
async def list_categories(store: CatalogStore = Depends(get_store)):
    """List all categories in insertion order."""
    controller = CategoryController(store)
    return controller.list_all()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: Optional[CategoryCreate] = None,
    store: CatalogStore = Depends(get_store)
):
    """Create a category. Duplicate names are rejected with 409."""
    controller = CategoryController(store)
    return controller.create(data)


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_category(name: str, store: CatalogStore = Depends(get_store)):
    """
    Delete a category.

    Always succeeds. Products in the category are reassigned to the
    fallback category, which is created if missing.
    """
    controller = CategoryController(store)
    controller.delete(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
