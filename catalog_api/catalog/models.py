"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog products.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Opaque identifier assigned at creation
        name: Product display name
        description: Free-text description
        category: Name of the category the product is filed under
        price: Non-negative price
        image: Public image URL, or an empty string
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    category: str = Field(..., description="Category name")
    price: float = Field(..., ge=0, description="Product price")
    image: str = Field(default="", description="Image URL")
