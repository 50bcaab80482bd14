"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Category: Category creation request/response
- Product: Product creation and patch requests
- Upload: Upload response

==============================================================================
"""

from .category import CategoryCreate, CategoryResponse
from .product import ProductCreate, ProductUpdate
from .upload import UploadResponse

__all__ = [
    # Category
    "CategoryCreate",
    "CategoryResponse",
    # Product
    "ProductCreate",
    "ProductUpdate",
    # Upload
    "UploadResponse",
]
