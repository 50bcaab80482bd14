"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing logic that sits outside the catalog store.

This package provides:
- UploadService: Image upload storage and public URL construction

==============================================================================
"""

from .upload_service import UploadService

__all__ = [
    "UploadService",
]
