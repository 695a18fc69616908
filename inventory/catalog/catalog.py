"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog with a category index.

Features:
---------
- Primary store keyed by product id (insertion ordered)
- Category index kept in step with the primary store
- Case-insensitive name search
- Low stock and valuation reports

Index Structure:
---------------
    _by_id:       {1001: Product, 1002: Product, ...}
    _by_category: {"Tools": [Product, ...], "Food": [...]}

Every product in ``_by_id`` sits in exactly one bucket of ``_by_category``
and no bucket is ever empty. All mutation goes through Catalog methods so
both structures change together.

Lookups that find nothing return None, False or an empty list; the catalog
never raises for a missing product.

The catalog is not thread-safe. Callers sharing one instance across
threads must hold a single lock around every call.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from .models import CategorySummary, InventorySummary, Product, StockChange


# Module logger
logger = logging.getLogger(__name__)


class ProductIdSequence:
    """
    Monotonic product id allocator.

    The catalog trusts this sequence for id uniqueness; it does not
    reject duplicate ids on insert.

    Example:
        >>> ids = ProductIdSequence()
        >>> ids.next_id(), ids.next_id()
        (1001, 1002)
    """

    DEFAULT_START = 1001

    def __init__(self, start: int = DEFAULT_START) -> None:
        if start < 1:
            raise ValueError(f"Id sequence must start at 1 or above, got {start}")
        self._next = start

    @property
    def peek(self) -> int:
        """Id the next call to next_id() will return."""
        return self._next

    def next_id(self) -> int:
        """Return the current id and advance by one."""
        product_id = self._next
        self._next += 1
        return product_id


class Catalog:
    """
    Product catalog with id and category indexes.

    Attributes:
        products: All products in insertion order

    Example:
        >>> catalog = Catalog()
        >>> catalog.add(Product(id=1001, name="Widget", category="Tools",
        ...                     price=Decimal("9.99"), quantity=3, supplier="Acme"))
        >>> [p.id for p in catalog.low_stock(5)]
        [1001]
    """

    def __init__(self) -> None:
        self._by_id: Dict[int, Product] = {}
        self._by_category: Dict[str, List[Product]] = {}

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products in primary store order."""
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add(self, product: Product) -> None:
        """
        Insert a product into the store and its category bucket.

        A product whose id is already stored replaces the stored one in
        place. The displaced product also leaves its category bucket.

        Args:
            product: Product with an id from the id sequence
        """
        displaced = self._by_id.get(product.id)
        if displaced is not None:
            logger.warning(
                f"Product id {product.id} already stored, replacing {displaced.name!r}"
            )
            self._unindex(displaced)

        self._by_id[product.id] = product
        self._by_category.setdefault(product.category, []).append(product)

        logger.info(f"Added product {product.id} ({product.name}) to {product.category!r}")

    def remove(self, product_id: int) -> bool:
        """
        Remove a product from the store and its category bucket.

        Args:
            product_id: Id of the product to remove

        Returns:
            True if a product was removed, False if the id was not stored
        """
        product = self._by_id.pop(product_id, None)
        if product is None:
            logger.debug(f"Remove: product {product_id} not found")
            return False

        self._unindex(product)
        logger.info(f"Removed product {product_id} ({product.name})")
        return True

    def update_stock(self, product_id: int, delta: int) -> Optional[StockChange]:
        """
        Add delta to a product's quantity, clamping the result at zero.

        Args:
            product_id: Id of the product to update
            delta: Units to add, negative to remove

        Returns:
            StockChange with before/after quantities, or None if not found
        """
        product = self._by_id.get(product_id)
        if product is None:
            logger.debug(f"Update stock: product {product_id} not found")
            return None

        old_quantity = product.quantity
        product.adjust_stock(delta)

        change = StockChange(
            product_id=product.id,
            name=product.name,
            requested_delta=delta,
            old_quantity=old_quantity,
            new_quantity=product.quantity,
        )

        if change.was_clamped:
            logger.warning(
                f"Stock for {product.id} clamped at 0 (requested {delta}, had {old_quantity})"
            )
        logger.info(f"Stock updated for {product.id}: {old_quantity} -> {product.quantity}")
        return change

    def edit(self, product_id: int, changes: Dict[str, object]) -> Optional[Product]:
        """
        Apply field edits to a stored product.

        Edits are validated as a whole before any field changes. A new
        category moves the product to the end of that category's bucket.

        Args:
            product_id: Id of the product to edit
            changes: Field name to new value; 'id' is not editable

        Returns:
            The edited product, or None if not found

        Raises:
            ValueError: If changes names the id or an unknown field
            pydantic.ValidationError: If a new value is invalid
        """
        if "id" in changes:
            raise ValueError("Product id cannot be edited")

        unknown = set(changes) - set(Product.model_fields)
        if unknown:
            raise ValueError(f"Unknown product fields: {', '.join(sorted(unknown))}")

        product = self._by_id.get(product_id)
        if product is None:
            logger.debug(f"Edit: product {product_id} not found")
            return None

        validated = Product.model_validate({**product.model_dump(), **changes})

        old_category = product.category
        if validated.category != old_category:
            self._unindex(product)

        for field in changes:
            setattr(product, field, getattr(validated, field))

        if product.category != old_category:
            self._by_category.setdefault(product.category, []).append(product)
            logger.info(
                f"Moved product {product.id} from {old_category!r} to {product.category!r}"
            )

        logger.info(f"Edited product {product.id}: {', '.join(sorted(changes))}")
        return product

    def _unindex(self, product: Product) -> None:
        """Drop a product from its category bucket, dropping empty buckets."""
        bucket = self._by_category.get(product.category)
        if bucket is None:
            return

        bucket[:] = [p for p in bucket if p is not product]
        if not bucket:
            del self._by_category[product.category]

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find product by id."""
        return self._by_id.get(product_id)

    def find_by_name(self, query: str) -> List[Product]:
        """
        Find products whose name contains query (case-insensitive).

        An empty query matches every product.

        Returns:
            Matches in primary store order
        """
        needle = query.lower()
        return [p for p in self._by_id.values() if needle in p.name.lower()]

    def by_category(self, category: str) -> List[Product]:
        """
        Get products in a category (exact, case-sensitive match).

        Returns:
            Copy of the category bucket, empty if the category is unknown
        """
        return list(self._by_category.get(category, []))

    def categories(self) -> Dict[str, List[Product]]:
        """Get every category bucket, sorted by category name."""
        return {
            category: list(self._by_category[category])
            for category in sorted(self._by_category)
        }

    def category_names(self) -> List[str]:
        """Get all category names in ascending order."""
        return sorted(self._by_category)

    # =========================================================================
    # REPORTS
    # =========================================================================

    def low_stock(self, threshold: int) -> List[Product]:
        """
        Get products with quantity at or below threshold.

        Returns:
            Matches sorted by ascending quantity; ties keep store order
        """
        matches = [p for p in self._by_id.values() if p.is_low_stock(threshold)]
        return sorted(matches, key=lambda p: p.quantity)

    def total_value(self) -> Decimal:
        """Sum of price x quantity over all products."""
        return sum((p.total_value for p in self._by_id.values()), Decimal("0"))

    def summary(self) -> InventorySummary:
        """
        Get catalog statistics.

        Returns:
            InventorySummary with per-category counts and values
        """
        categories = [
            CategorySummary(
                category=category,
                product_count=len(self._by_category[category]),
                total_value=sum(
                    (p.total_value for p in self._by_category[category]), Decimal("0")
                ),
            )
            for category in sorted(self._by_category)
        ]

        return InventorySummary(
            total_products=len(self._by_id),
            total_categories=len(self._by_category),
            total_value=self.total_value(),
            categories=categories,
        )
