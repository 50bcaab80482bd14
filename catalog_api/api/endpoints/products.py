"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD endpoints for catalog products.

==============================================================================
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from catalog_api.catalog.models import Product
from catalog_api.catalog.store import CatalogStore
from catalog_api.core.dependencies import get_store
from catalog_api.schemas.product import ProductCreate, ProductUpdate


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_products(self, category: Optional[str], query: Optional[str]) -> List[Product]:
        """List products, newest first."""
        return self._store.list_products(category=category, query=query)

    def get(self, product_id: str) -> Product:
        """Get product by ID."""
        return self._store.get_product(product_id)

    def create(self, data: Optional[ProductCreate]) -> Product:
        """Create a product."""
        return self._store.create_product(data or ProductCreate())

    def update(self, product_id: str, patch: Optional[ProductUpdate]) -> Product:
        """Patch a product."""
        return self._store.update_product(product_id, patch or ProductUpdate())

    def delete(self, product_id: str) -> None:
        """Delete a product."""
        self._store.delete_product(product_id)


@router.get("", response_model=List[Product])
async def list_products(
    category: Optional[str] = Query(None, description="Exact category filter"),
    q: Optional[str] = Query(None, description="Search in name and description"),
    store: CatalogStore = Depends(get_store)
):
    """List products, most recently created first."""
    controller = ProductController(store)
    return controller.list_products(category, q)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    """Get a single product."""
    controller = ProductController(store)
    return controller.get(product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: Optional[ProductCreate] = None,
    store: CatalogStore = Depends(get_store)
):
    """Create a product. Name, description, category and price are required."""
    controller = ProductController(store)
    return controller.create(data)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    patch: Optional[ProductUpdate] = None,
    store: CatalogStore = Depends(get_store)
):
    """Update only the fields present in the request body."""
    controller = ProductController(store)
    return controller.update(product_id, patch)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
    """Delete a product."""
    controller = ProductController(store)
    controller.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
