"""
==============================================================================
Upload Schemas Module
==============================================================================

Response schema for image uploads.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    """Public URL of a stored upload."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl")
