"""
==============================================================================
Report Formatter Module
==============================================================================

Plain-text rendering of catalog query results for the console.

This module implements:
- ReportFormatter: Class turning products and summaries into report text

Reports:
--------
- Product line and detailed product card
- Inventory list, products by category, single category
- Low stock report, inventory summary, total value

The formatter only reads the objects it is given; it never queries or
mutates the catalog.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from inventory.catalog.models import InventorySummary, Product, StockChange


EMPTY_INVENTORY = "No products in inventory!"
NO_LOW_STOCK = "No products are low in stock!"
NO_SEARCH_RESULTS = "No products found!"
EMPTY_CATEGORY = "No products found in this category!"


class ReportFormatter:
    """
    Text renderer for inventory reports.

    Attributes:
        _currency: Symbol prefixed to money amounts

    Example:
        >>> formatter = ReportFormatter()
        >>> print(formatter.format_total_value(Decimal("29.97")))
        Total Inventory Value: $29.97
    """

    def __init__(self, currency_symbol: str = "$") -> None:
        self._currency = currency_symbol

    # =========================================================================
    # SINGLE PRODUCT
    # =========================================================================

    def money(self, amount: Decimal) -> str:
        """Format an amount with two decimals."""
        return f"{self._currency}{amount:.2f}"

    def format_product(self, product: Product) -> str:
        """One-line product rendering."""
        return (
            f"ID: {product.id} | Name: {product.name:<20} | "
            f"Category: {product.category:<15} | Price: {self.money(product.price)} | "
            f"Quantity: {product.quantity} | Supplier: {product.supplier}"
        )

    def format_product_details(self, product: Product) -> str:
        """Multi-line product card including the stock value."""
        return "\n".join([
            f"Product ID: {product.id}",
            f"Name: {product.name}",
            f"Category: {product.category}",
            f"Price: {self.money(product.price)}",
            f"Quantity: {product.quantity}",
            f"Supplier: {product.supplier}",
            f"Total Value: {self.money(product.total_value)}",
            "-" * 19,
        ])

    def format_stock_change(self, change: StockChange) -> str:
        """Render a stock update as 'name: old → new'."""
        return f"Stock updated! {change.name}: {change.old_quantity} → {change.new_quantity}"

    # =========================================================================
    # LISTINGS
    # =========================================================================

    def format_inventory(self, products: Sequence[Product]) -> str:
        """Render every product under an INVENTORY LIST banner."""
        if not products:
            return EMPTY_INVENTORY

        separator = "=" * 100
        lines = [separator, self._center("INVENTORY LIST", 100), separator]
        lines.extend(self.format_product(p) for p in products)
        lines.append(separator)
        return "\n".join(lines)

    def format_by_category(self, categories: Dict[str, List[Product]]) -> str:
        """Render products grouped under upper-cased category headers."""
        if not categories:
            return EMPTY_INVENTORY

        separator = "=" * 80
        lines = [separator, self._center("PRODUCTS BY CATEGORY", 80), separator]

        for category, products in categories.items():
            lines.append("")
            lines.append(f"Category: {category.upper()}")
            lines.append("-" * 50)
            lines.extend(f"  {self.format_product(p)}" for p in products)

        lines.append(separator)
        return "\n".join(lines)

    def format_category(self, category: str, products: Sequence[Product]) -> str:
        """Render the products of a single category."""
        if not products:
            return EMPTY_CATEGORY

        lines = [f"Products in {category}:"]
        lines.extend(self.format_product(p) for p in products)
        return "\n".join(lines)

    def format_search_results(self, products: Sequence[Product]) -> str:
        if not products:
            return NO_SEARCH_RESULTS

        lines = ["Search Results:"]
        lines.extend(self.format_product(p) for p in products)
        return "\n".join(lines)

    # =========================================================================
    # REPORTS
    # =========================================================================

    def format_low_stock(self, products: Sequence[Product], threshold: int) -> str:
        """Render the low stock report for a threshold."""
        if not products:
            return NO_LOW_STOCK

        separator = "=" * 80
        lines = [
            separator,
            self._center(f"LOW STOCK REPORT (Threshold: {threshold})", 80),
            separator,
        ]
        lines.extend(
            f" {self.format_product(p)} (Quantity: {p.quantity})" for p in products
        )
        lines.append(separator)
        return "\n".join(lines)

    def format_summary(self, summary: InventorySummary) -> str:
        """Render totals and the per-category breakdown."""
        if summary.is_empty:
            return EMPTY_INVENTORY

        separator = "=" * 60
        lines = [
            separator,
            self._center("INVENTORY SUMMARY", 60),
            separator,
            f"Total Products: {summary.total_products}",
            f"Total Categories: {summary.total_categories}",
            f"Total Inventory Value: {self.money(summary.total_value)}",
            "",
            "Category Breakdown:",
        ]

        for entry in summary.categories:
            noun = "product" if entry.product_count == 1 else "products"
            lines.append(
                f"  {entry.category}: {entry.product_count} {noun}, "
                f"{self.money(entry.total_value)}"
            )

        lines.append(separator)
        return "\n".join(lines)

    def format_total_value(self, total: Decimal) -> str:
        return f"Total Inventory Value: {self.money(total)}"

    @staticmethod
    def _center(title: str, width: Optional[int] = None) -> str:
        """Center a banner title within the separator width."""
        if width is None:
            return title
        return title.center(width).rstrip()
