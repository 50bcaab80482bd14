"""
==============================================================================
Upload Service Module
==============================================================================

Stores uploaded product images on local disk and builds their public URLs.

Naming:
-------
Files are named ``<epoch milliseconds><original extension>``. If a file with
that name already exists the timestamp is bumped until a free name is found.
Uploads are never deduplicated or cleaned up.

==============================================================================
"""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path
from typing import BinaryIO, Optional

from catalog_api.config import Settings
from catalog_api.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


class UploadService:
    """
    Service for storing uploaded images.

    Attributes:
        _settings: Application settings (upload directory, public base URL)

    Example:
        >>> service = UploadService(settings)
        >>> filename = service.save(upload.file, "slika.png")
        >>> service.public_url(filename)
        'http://localhost:5000/uploads/1718000000000.png'
    """

    URL_PREFIX = "/uploads"

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def directory(self) -> Path:
        """Upload directory (created if missing)."""
        return self._settings.upload_path

    def save(self, source: BinaryIO, original_filename: Optional[str]) -> str:
        """
        Write an uploaded file to the upload directory.

        Args:
            source: Readable binary stream with the file contents
            original_filename: Client-side filename, used for its extension

        Returns:
            Stored filename (not a path)

        Raises:
            AppException: INTERNAL_ERROR if the file cannot be written
        """
        extension = Path(original_filename or "").suffix
        target = self._reserve_path(extension)

        try:
            with target.open("wb") as out:
                shutil.copyfileobj(source, out)
        except OSError as e:
            logger.error(f"❌ Failed to store upload {target.name}: {e}")
            target.unlink(missing_ok=True)
            raise exceptions.internal_error("Could not store uploaded file")

        logger.info(f"📁 Stored upload: {target.name} (from {original_filename})")
        return target.name

    def public_url(self, filename: str) -> str:
        """Public URL under which a stored file is served."""
        return f"{self._settings.resolved_public_base_url}{self.URL_PREFIX}/{filename}"

    def _reserve_path(self, extension: str) -> Path:
        directory = self.directory
        stamp = int(time.time() * 1000)
        while True:
            candidate = directory / f"{stamp}{extension}"
            if not candidate.exists():
                return candidate
            stamp += 1
