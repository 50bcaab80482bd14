"""
==============================================================================
Upload Endpoints
==============================================================================

Image upload. Stored files are served by the static mount at /uploads.

==============================================================================
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile

from catalog_api.core import exceptions
from catalog_api.core.dependencies import get_upload_service
from catalog_api.schemas.upload import UploadResponse
from catalog_api.services.upload_service import UploadService


router = APIRouter(prefix="/upload", tags=["Uploads"])

UPLOAD_FIELD = "image"


@router.post("", response_model=UploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    service: UploadService = Depends(get_upload_service)
):
    """
    Upload a single image under the multipart field ``image``.

    Returns the public URL of the stored file.
    """
    if image is None or not image.filename:
        raise exceptions.missing_upload_file(UPLOAD_FIELD)

    filename = service.save(image.file, image.filename)
    return UploadResponse(image_url=service.public_url(filename))
