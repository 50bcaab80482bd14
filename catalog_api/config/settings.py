"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared across the application. Tests
and embedding code can still build their own Settings and hand it to the
application factory.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        public_base_url: Base URL used to build links to uploaded images
        upload_directory: Directory where uploaded images are written
        fallback_category: Category that receives products of a deleted category
        seed_demo_data: Populate a fresh store with the demo catalog
        enforce_category_reference: Reject products whose category is unknown
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings(port=8080)
        >>> settings.resolved_public_base_url
        'http://localhost:8080'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Catalog API",
        description="Display name for the application"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    public_base_url: Optional[str] = Field(
        default=None,
        description="Public base URL for uploaded files (defaults to http://localhost:<port>)"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    upload_directory: str = Field(
        default="uploads",
        description="Directory for uploaded product images"
    )

    fallback_category: str = Field(
        default="Drugo",
        min_length=1,
        description="Category assigned to products whose category was deleted"
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Load the demo categories and product on startup"
    )

    enforce_category_reference: bool = Field(
        default=False,
        description="Reject product writes that reference an unknown category"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        """Drop a trailing slash so URLs can be joined with '/uploads/...'."""
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def resolved_public_base_url(self) -> str:
        """Public base URL, falling back to the local listen port."""
        return self.public_base_url or f"http://localhost:{self.port}"

    @property
    def upload_path(self) -> Path:
        """
        Get upload directory as Path object.

        Creates the directory if it doesn't exist.
        """
        path = Path(self.upload_directory)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def ensure_directories(self) -> None:
        """Create the upload directory."""
        self.upload_path.mkdir(parents=True, exist_ok=True)
        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"port={self.port}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
