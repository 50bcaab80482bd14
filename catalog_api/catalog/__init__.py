"""
==============================================================================
Catalog Package - Categories and Products
==============================================================================

In-memory catalog with newest-first products and cascading category removal.

Classes:
--------
- Product: Pydantic model for products
- CatalogStore: Owner of the category and product collections

==============================================================================
"""

from .models import Product
from .store import CatalogStore

__all__ = [
    "Product",
    "CatalogStore",
]
