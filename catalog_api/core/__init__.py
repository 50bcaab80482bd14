"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_api.core import AppException
    from catalog_api.core import exceptions
    raise exceptions.product_not_found(product_id)

    from catalog_api.core.dependencies import get_store

==============================================================================
"""

from .exceptions import (
    AppException,
    DuplicateError,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "DuplicateError",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
]
