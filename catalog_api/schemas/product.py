"""
==============================================================================
Product Schemas Module
==============================================================================

Request schemas for product creation and partial updates.

Every field is optional at the schema level; required-field checks live in
the catalog store so missing fields are reported as a single 400 response.

==============================================================================
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Product creation request."""
    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)
    price: Optional[float] = Field(default=None)
    image: Optional[str] = Field(default=None)


class ProductUpdate(BaseModel):
    """
    Partial product update (patch).

    Only fields the client actually sent are applied. Explicit nulls are
    treated as absent.
    """
    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)
    price: Optional[float] = Field(default=None)
    image: Optional[str] = Field(default=None)

    def changes(self) -> Dict[str, Any]:
        """Fields provided by the client, in declaration order."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
