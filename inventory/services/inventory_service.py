"""
==============================================================================
Inventory Service Module
==============================================================================

Service layer between the console shell and the catalog.

This module implements:
- InventoryService: Class coordinating id allocation, validation and
  catalog calls for every user action
- Seed file loading at startup

Responsibilities:
----------------
The catalog only stores and queries products. The service:
1. Validates raw product data with the input schemas
2. Allocates ids from the ProductIdSequence and builds Product objects
3. Translates validation failures into AppException("INVALID_INPUT")
4. Logs each user-driven change

Seed File Format:
----------------
    [
      {"name": "Widget", "category": "Tools", "price": "9.99",
       "quantity": 3, "supplier": "Acme"},
      ...
    ]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from inventory.catalog import Catalog, InventorySummary, Product, ProductIdSequence, StockChange
from inventory.config import Settings, get_settings
from inventory.core import AppException, exceptions
from inventory.schemas import ProductCreate, ProductUpdate


# Module logger
logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class InventoryService:
    """
    Service for inventory operations issued by the shell.

    Attributes:
        _catalog: Catalog holding every product
        _ids: Id allocator, seeded from settings
        _settings: Application settings

    Example:
        >>> service = InventoryService(Catalog())
        >>> product = service.add_product({"name": "Widget", "category": "Tools",
        ...                                "price": "9.99", "quantity": 3,
        ...                                "supplier": "Acme"})
        >>> product.id
        1001
    """

    def __init__(
        self,
        catalog: Catalog,
        id_sequence: Optional[ProductIdSequence] = None,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Initialize the inventory service.

        Args:
            catalog: Catalog to operate on
            id_sequence: Id allocator (built from settings if None)
            settings: Application settings (global settings if None)
        """
        self._settings = settings or get_settings()
        self._catalog = catalog
        self._ids = id_sequence or ProductIdSequence(self._settings.product_id_start)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def settings(self) -> Settings:
        return self._settings

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_product(self, data: Union[ProductCreate, Dict[str, Any]]) -> Product:
        """
        Validate new product data, assign an id and add it to the catalog.

        Args:
            data: ProductCreate or a raw mapping of its fields

        Returns:
            The stored product

        Raises:
            AppException: INVALID_INPUT when the data fails validation
        """
        create = self._validate(ProductCreate, data)

        product = Product(id=self._ids.next_id(), **create.model_dump())
        self._catalog.add(product)
        return product

    def remove_product(self, product_id: int) -> bool:
        """Remove a product; False when the id is unknown."""
        return self._catalog.remove(product_id)

    def update_stock(self, product_id: int, delta: int) -> Optional[StockChange]:
        """Adjust stock by delta; None when the id is unknown."""
        return self._catalog.update_stock(product_id, delta)

    def edit_product(
        self,
        product_id: int,
        data: Union[ProductUpdate, Dict[str, Any]]
    ) -> Optional[Product]:
        """
        Apply field edits to a product.

        Returns:
            The edited product, or None when the id is unknown

        Raises:
            AppException: INVALID_INPUT when the edits fail validation
        """
        update = self._validate(ProductUpdate, data)
        try:
            return self._catalog.edit(product_id, update.changes())
        except ValidationError as e:
            raise self._to_invalid_input(e) from e

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_product(self, product_id: int) -> Product:
        """
        Get a product that must exist.

        Raises:
            AppException: PRODUCT_NOT_FOUND when the id is unknown
        """
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)
        return product

    def find_product(self, product_id: int) -> Optional[Product]:
        return self._catalog.find_by_id(product_id)

    def search_by_name(self, query: str) -> List[Product]:
        return self._catalog.find_by_name(query)

    def products_in_category(self, category: str) -> List[Product]:
        return self._catalog.by_category(category)

    def all_products(self) -> List[Product]:
        return self._catalog.products

    def grouped_by_category(self) -> Dict[str, List[Product]]:
        return self._catalog.categories()

    def low_stock(self, threshold: Optional[int] = None) -> List[Product]:
        """Low stock products, using the configured threshold by default."""
        if threshold is None:
            threshold = self._settings.low_stock_threshold
        return self._catalog.low_stock(threshold)

    def total_value(self) -> Decimal:
        return self._catalog.total_value()

    def summary(self) -> InventorySummary:
        return self._catalog.summary()

    # =========================================================================
    # SEEDING
    # =========================================================================

    def load_seed(self, path: Path) -> int:
        """
        Load products from a JSON seed file.

        Entries that fail validation are skipped with a warning.

        Args:
            path: JSON file holding a list of product objects

        Returns:
            Number of products added

        Raises:
            AppException: SEED_FILE_INVALID when the file is missing,
                unreadable or not a JSON list
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"Seed file not found: {path}")
            raise exceptions.seed_file_invalid(str(path), "file not found") from e
        except OSError as e:
            logger.error(f"Cannot read seed file {path}: {e}")
            raise exceptions.seed_file_invalid(str(path), e.strerror or "unreadable file") from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in seed file {path}: {e}")
            raise exceptions.seed_file_invalid(str(path), f"invalid JSON ({e.msg})") from e
        except UnicodeDecodeError as e:
            logger.error(f"Seed file {path} is not UTF-8: {e}")
            raise exceptions.seed_file_invalid(str(path), "not UTF-8 encoded text") from e

        if not isinstance(data, list):
            raise exceptions.seed_file_invalid(str(path), "expected a list of products")

        added = 0
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(f"Skipping seed entry {index}: not an object")
                continue
            try:
                self.add_product(item)
            except AppException as e:
                logger.warning(f"Skipping seed entry {index}: {e.message}")
                continue
            added += 1

        logger.info(f"✅ Loaded {added} products from {path}")
        return added

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _validate(self, schema: Type[ModelT], data: Union[ModelT, Dict[str, Any]]) -> ModelT:
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise self._to_invalid_input(e) from e

    @staticmethod
    def _to_invalid_input(error: ValidationError) -> AppException:
        """Convert the first pydantic error into an INVALID_INPUT exception."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "product"
        return exceptions.invalid_input(field, first.get("input"), first.get("msg", "invalid value"))
