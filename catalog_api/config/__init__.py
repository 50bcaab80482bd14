"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from catalog_api.config import get_settings, Settings

    settings = get_settings()
    print(settings.port)
    print(settings.resolved_public_base_url)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
