"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with an id index and a category index.

Classes:
--------
- Product: Pydantic model for products
- Catalog: Catalog manager with search and report capabilities
- ProductIdSequence: Monotonic id allocator

==============================================================================
"""

from .models import CategorySummary, InventorySummary, Product, StockChange
from .catalog import Catalog, ProductIdSequence

__all__ = [
    "Product",
    "StockChange",
    "CategorySummary",
    "InventorySummary",
    "Catalog",
    "ProductIdSequence",
]
