"""
==============================================================================
Catalog Store Module
==============================================================================

In-memory catalog of categories and products.

Features:
---------
- Ordered, duplicate-free category list
- Newest-first product list with generated identifiers
- Partial product updates (patches)
- Cascading category deletion onto a fallback category

Ownership:
----------
One store is created per application instance during startup and handed to
request handlers through a dependency. Nothing else holds references to the
underlying lists; read operations return copies.

==============================================================================
"""

from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional

from catalog_api.core import exceptions
from catalog_api.schemas.product import ProductCreate, ProductUpdate
from catalog_api.utils.validators import CategoryNameValidator, PriceValidator

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_FALLBACK_CATEGORY = "Drugo"

DEMO_CATEGORIES = ["Cevi", "Ventili", "Pipe", "Armature"]

DEMO_PRODUCTS = [
    {
        "category": "Cevi",
        "name": "PVC Cev 20mm",
        "description": "Kvalitetna cev za vodovodne inštalacije.",
        "price": 2.99,
        "image": "",
    },
]


class CatalogStore:
    """
    In-memory catalog store.

    Attributes:
        fallback_category: Category that receives products of deleted categories
        enforce_category_reference: Reject product writes with unknown categories

    Example:
        >>> store = CatalogStore()
        >>> store.add_category("Ventili")
        'Ventili'
        >>> product = store.create_product(ProductCreate(
        ...     name="Krogelni ventil", description="1/2 col",
        ...     category="Ventili", price=7.5
        ... ))
        >>> store.remove_category("Ventili")
        >>> store.get_product(product.id).category
        'Drugo'
    """

    ID_LENGTH = 8

    def __init__(
        self,
        fallback_category: str = DEFAULT_FALLBACK_CATEGORY,
        enforce_category_reference: bool = False
    ) -> None:
        """
        Initialize an empty store.

        Args:
            fallback_category: Name used when a category is deleted
            enforce_category_reference: Validate product categories on write
        """
        self.fallback_category = fallback_category
        self.enforce_category_reference = enforce_category_reference
        self._categories: List[str] = []
        self._products: List[Product] = []
        self._name_validator = CategoryNameValidator()
        self._price_validator = PriceValidator()

    @classmethod
    def with_demo_data(cls, **kwargs) -> "CatalogStore":
        """Create a store pre-populated with the demo catalog."""
        store = cls(**kwargs)
        for name in DEMO_CATEGORIES:
            store.add_category(name)
        for item in DEMO_PRODUCTS:
            store.create_product(ProductCreate(**item))
        logger.info(
            f"Seeded {len(store._categories)} categories and "
            f"{len(store._products)} products"
        )
        return store

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    def list_categories(self) -> List[str]:
        """Categories in insertion order."""
        return list(self._categories)

    def add_category(self, name: Optional[str]) -> str:
        """
        Add a new category.

        Args:
            name: Category name

        Returns:
            The added name

        Raises:
            ValidationError: If the name is empty
            DuplicateError: If the category already exists
        """
        if not self._name_validator.is_valid(name):
            raise exceptions.category_name_required()

        if name in self._categories:
            logger.warning(f"Category rejected: already exists - {name}")
            raise exceptions.category_exists(name)

        self._categories.append(name)
        logger.info(f"✅ Category added: {name}")
        return name

    def remove_category(self, name: str) -> None:
        """
        Remove a category and move its products to the fallback category.

        Removing an unknown category is a no-op apart from making sure the
        fallback category exists.
        """
        fallback = self.fallback_category
        self._categories = [c for c in self._categories if c != name]

        moved = 0
        for index, product in enumerate(self._products):
            if product.category == name:
                self._products[index] = product.model_copy(update={"category": fallback})
                moved += 1

        if fallback not in self._categories:
            self._categories.append(fallback)

        logger.info(f"🗑️ Category removed: {name} ({moved} products moved to {fallback})")

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    def list_products(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None
    ) -> List[Product]:
        """
        Products newest-first, optionally filtered.

        Args:
            category: Exact category name filter
            query: Case-insensitive substring matched against name and description

        Returns:
            List of matching products
        """
        products = self._products
        if category:
            products = [p for p in products if p.category == category]

        needle = (query or "").strip().lower()
        if needle:
            products = [
                p for p in products
                if needle in (p.name + p.description).lower()
            ]

        return [p.model_copy() for p in products]

    def get_product(self, product_id: str) -> Product:
        """
        Get product by ID.

        Raises:
            NotFoundError: If no product has this ID
        """
        return self._products[self._index_of(product_id)].model_copy()

    def create_product(self, data: ProductCreate) -> Product:
        """
        Create a product and insert it at the front of the list.

        Args:
            data: ProductCreate with name, description, category, price, image

        Returns:
            Created Product

        Raises:
            ValidationError: If a required field is missing or the price is invalid
        """
        missing = [
            field for field in ("name", "description", "category")
            if not getattr(data, field)
        ]
        if data.price is None:
            missing.append("price")
        if missing:
            logger.warning(f"Product rejected: missing fields {missing}")
            raise exceptions.missing_fields(missing)

        price = self._coerce_price(data.price)
        self._check_category(data.category)

        product = Product(
            id=self._new_id(),
            name=data.name,
            description=data.description,
            category=data.category,
            price=price,
            image=data.image or "",
        )
        self._products.insert(0, product)

        logger.info(f"✅ Product created: {product.name} (id: {product.id})")
        return product.model_copy()

    def update_product(self, product_id: str, patch: ProductUpdate) -> Product:
        """
        Apply a partial update to a product.

        Args:
            product_id: Product ID
            patch: Fields to overwrite; absent fields are kept

        Returns:
            Updated Product

        Raises:
            NotFoundError: If no product has this ID
            ValidationError: If the new price is invalid
        """
        index = self._index_of(product_id)
        changes = patch.changes()

        if "price" in changes:
            changes["price"] = self._coerce_price(changes["price"])
        if "category" in changes:
            self._check_category(changes["category"])

        updated = self._products[index].model_copy(update=changes)
        self._products[index] = updated

        logger.info(f"✏️ Product updated: {updated.id} ({', '.join(changes) or 'no changes'})")
        return updated.model_copy()

    def delete_product(self, product_id: str) -> None:
        """
        Delete a product.

        Raises:
            NotFoundError: If no product has this ID
        """
        index = self._index_of(product_id)
        removed = self._products.pop(index)
        logger.info(f"🗑️ Product deleted: {removed.name} (id: {removed.id})")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def stats(self) -> Dict[str, int]:
        """Get catalog counts."""
        return {
            "categories": len(self._categories),
            "products": len(self._products),
        }

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise exceptions.product_not_found(product_id)

    def _new_id(self) -> str:
        existing = {p.id for p in self._products}
        while True:
            candidate = uuid.uuid4().hex[:self.ID_LENGTH]
            if candidate not in existing:
                return candidate

    def _coerce_price(self, price) -> float:
        is_valid, value, error = self._price_validator.validate(price)
        if not is_valid:
            logger.warning(f"Product rejected: {error} ({price!r})")
            raise exceptions.invalid_price(price)
        return value

    def _check_category(self, category: str) -> None:
        if self.enforce_category_reference and category not in self._categories:
            raise exceptions.unknown_category(category)
