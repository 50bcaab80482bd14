"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- categories: Category management
- products: Product catalog CRUD
- uploads: Image upload

==============================================================================
"""

from . import health, categories, products, uploads

__all__ = ["health", "categories", "products", "uploads"]
