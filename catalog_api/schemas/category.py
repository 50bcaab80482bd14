"""
==============================================================================
Category Schemas Module
==============================================================================

Request and response schemas for categories.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Category creation request."""
    name: Optional[str] = Field(default=None)


class CategoryResponse(BaseModel):
    """Created category."""
    name: str
