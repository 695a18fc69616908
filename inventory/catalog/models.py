"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items and the results of catalog queries.

==============================================================================
"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Represents one stock-keeping record. The id is assigned once by the
    id sequence and can never be reassigned; every other field is edited
    in place by the catalog.

    Attributes:
        id: Catalog-assigned identifier
        name: Product display name
        category: Grouping key used by the category index
        price: Unit price, never negative
        quantity: Units in stock, never negative
        supplier: Supplier name
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )

    id: int = Field(..., ge=1, frozen=True, description="Catalog-assigned id")
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Product category")
    price: Decimal = Field(..., ge=0, description="Unit price")
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    supplier: str = Field(default="", description="Supplier name")

    @property
    def total_value(self) -> Decimal:
        """Stock value, recomputed on every access."""
        return self.price * self.quantity

    def adjust_stock(self, delta: int) -> int:
        """
        Add delta to the quantity, clamping at zero.

        Args:
            delta: Units to add (negative to remove)

        Returns:
            The new quantity
        """
        self.quantity = max(0, self.quantity + delta)
        return self.quantity

    def is_low_stock(self, threshold: int) -> bool:
        """Check if quantity is at or below the threshold."""
        return self.quantity <= threshold

    def __str__(self) -> str:
        return f"Product({self.id}, {self.name!r})"


class StockChange(BaseModel):
    """Before/after quantities reported by a stock update."""

    product_id: int
    name: str
    requested_delta: int
    old_quantity: int = Field(ge=0)
    new_quantity: int = Field(ge=0)

    @property
    def applied_delta(self) -> int:
        """Change actually applied after clamping."""
        return self.new_quantity - self.old_quantity

    @property
    def was_clamped(self) -> bool:
        """True when the requested removal exceeded the stock on hand."""
        return self.old_quantity + self.requested_delta < 0


class CategorySummary(BaseModel):
    """Per-category line of the inventory summary."""

    category: str
    product_count: int = Field(ge=1)
    total_value: Decimal = Field(ge=0)


class InventorySummary(BaseModel):
    """
    Aggregate view of the whole catalog.

    Categories are listed in ascending lexicographic order.
    """

    total_products: int = Field(ge=0)
    total_categories: int = Field(ge=0)
    total_value: Decimal = Field(ge=0)
    categories: List[CategorySummary] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total_products == 0
