"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Category name and price validation

==============================================================================
"""

from .validators import CategoryNameValidator, PriceValidator

__all__ = [
    "CategoryNameValidator",
    "PriceValidator",
]
