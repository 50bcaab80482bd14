"""
Application Exception Handling

AppException hierarchy for all application errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Category already exists", "CATEGORY_EXISTS", 409)
        raise exceptions.product_not_found("a1B2c3D4")

    Error Codes:
        Catalog:
            - VALIDATION_ERROR (400)
            - PRODUCT_NOT_FOUND (404)
            - CATEGORY_EXISTS (409)

        General:
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Missing or invalid input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", 400, details)


class DuplicateError(AppException):
    """Resource already exists."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, 409, details)


class NotFoundError(AppException):
    """Resource does not exist."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, 404, details)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report unparseable request input as a 400 VALIDATION_ERROR.

    Keeps body parsing failures (bad JSON, non-numeric price) in the same
    shape and status as the catalog's own validation errors.
    """
    fields = [
        ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        for error in exc.errors()
    ]
    error = ValidationError(
        "Invalid request data",
        {"fields": [f for f in fields if f]}
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def missing_fields(fields: list) -> ValidationError:
    """Create missing required fields exception."""
    return ValidationError(
        f"Missing fields ({', '.join(fields)})",
        {"missing": fields}
    )


def invalid_price(value: Any) -> ValidationError:
    """Create invalid price exception."""
    return ValidationError(
        "Price must be a non-negative number",
        {"price": str(value)}
    )


def category_name_required() -> ValidationError:
    """Create missing category name exception."""
    return ValidationError("Category name is required")


def unknown_category(name: str) -> ValidationError:
    """Create unknown category exception (strict reference mode)."""
    return ValidationError(
        f"Category '{name}' does not exist",
        {"category": name}
    )


def category_exists(name: str) -> DuplicateError:
    """Create category already exists exception."""
    return DuplicateError(
        f"Category '{name}' already exists",
        "CATEGORY_EXISTS",
        {"category": name}
    )


def product_not_found(product_id: Optional[str] = None) -> NotFoundError:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return NotFoundError("Product not found", "PRODUCT_NOT_FOUND", details)


def missing_upload_file(field: str) -> ValidationError:
    """Create missing upload file exception."""
    return ValidationError(
        "No file uploaded",
        {"field": field}
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
