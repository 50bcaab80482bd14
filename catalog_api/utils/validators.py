"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for catalog input data.

This module implements:
- CategoryNameValidator: Validates category names
- PriceValidator: Coerces and validates product prices

Validation Rules for Prices:
---------------------------
- Must be a number or a numeric string
- Must be finite
- Cannot be negative

==============================================================================
"""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple


class CategoryNameValidator:
    """
    Validator for category names.

    Names are stored exactly as given; only empty or whitespace-only
    names are rejected.

    Example:
        >>> validator = CategoryNameValidator()
        >>> validator.validate("Ventili")
        (True, None)
    """

    def validate(self, name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate a category name.

        Args:
            name: Raw category name input

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name or not name.strip():
            return False, "Category name is required"

        return True, None

    def is_valid(self, name: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(name)
        return is_valid


class PriceValidator:
    """
    Validator for product prices.

    Example:
        >>> validator = PriceValidator()
        >>> validator.validate("5.50")
        (True, 5.5, None)
        >>> validator.validate(-1)
        (False, None, 'Price cannot be negative')
    """

    def validate(self, price: Any) -> Tuple[bool, Optional[float], Optional[str]]:
        """
        Coerce and validate a price value.

        Args:
            price: Raw price (number or numeric string)

        Returns:
            Tuple of (is_valid, coerced_price, error_message)
        """
        if price is None:
            return False, None, "Price is required"

        if isinstance(price, bool):
            return False, None, "Price must be a number"

        try:
            value = float(price)
        except (TypeError, ValueError):
            return False, None, "Price must be a number"

        if not math.isfinite(value):
            return False, None, "Price must be a finite number"

        if value < 0:
            return False, None, "Price cannot be negative"

        return True, value, None

    def is_valid(self, price: Any) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(price)
        return is_valid
