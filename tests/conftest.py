"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, catalog, service and product fixtures.

==============================================================================
"""

from decimal import Decimal
from typing import Callable

import pytest

from inventory.catalog import Catalog, Product, ProductIdSequence
from inventory.config import Settings
from inventory.services import InventoryService


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> Catalog:
    """Fresh, empty catalog."""
    return Catalog()


@pytest.fixture
def id_sequence() -> ProductIdSequence:
    return ProductIdSequence()


@pytest.fixture
def make_product(id_sequence: ProductIdSequence) -> Callable[..., Product]:
    """Factory building products with ids from the sequence."""
    def _make(
        name: str = "Widget",
        category: str = "Tools",
        price: str = "9.99",
        quantity: int = 3,
        supplier: str = "Acme",
    ) -> Product:
        return Product(
            id=id_sequence.next_id(),
            name=name,
            category=category,
            price=Decimal(price),
            quantity=quantity,
            supplier=supplier,
        )
    return _make


@pytest.fixture
def stocked_catalog(catalog: Catalog, make_product) -> Catalog:
    """Catalog holding five products across three categories."""
    catalog.add(make_product("Widget", "Tools", "9.99", 3, "Acme"))                 # 1001
    catalog.add(make_product("Claw Hammer", "Tools", "14.50", 12, "Acme"))          # 1002
    catalog.add(make_product("Wood Screws", "Fasteners", "4.25", 40, "Bolt & Co"))  # 1003
    catalog.add(make_product("Wall Anchors", "Fasteners", "2.10", 2, "Bolt & Co"))  # 1004
    catalog.add(make_product("LED Bulb", "Electrical", "3.75", 0, "Brightline"))    # 1005
    return catalog


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def service(catalog: Catalog, settings: Settings) -> InventoryService:
    """Service over an empty catalog with default settings."""
    return InventoryService(catalog, settings=settings)


@pytest.fixture
def widget_data() -> dict:
    return {
        "name": "Widget",
        "category": "Tools",
        "price": "9.99",
        "quantity": 3,
        "supplier": "Acme",
    }
