"""Tests for inventory/utils/report_formatter.py"""

from decimal import Decimal

from inventory.catalog import StockChange
from inventory.utils import ReportFormatter


class TestProductRendering:
    def test_product_line(self, make_product):
        line = ReportFormatter().format_product(make_product())
        assert line.startswith("ID: 1001 | Name: Widget")
        assert "Category: Tools" in line
        assert "Price: $9.99" in line
        assert line.endswith("Quantity: 3 | Supplier: Acme")

    def test_price_always_two_decimals(self, make_product):
        line = ReportFormatter().format_product(make_product(price="5"))
        assert "Price: $5.00" in line

    def test_details_include_total_value(self, make_product):
        text = ReportFormatter().format_product_details(make_product())
        assert "Product ID: 1001" in text
        assert "Total Value: $29.97" in text

    def test_currency_symbol(self, make_product):
        line = ReportFormatter("€").format_product(make_product())
        assert "Price: €9.99" in line

    def test_stock_change(self):
        change = StockChange(product_id=1001, name="Widget", requested_delta=-5,
                             old_quantity=3, new_quantity=0)
        assert ReportFormatter().format_stock_change(change) == "Stock updated! Widget: 3 → 0"


class TestReports:
    def test_inventory_empty(self):
        assert ReportFormatter().format_inventory([]) == "No products in inventory!"

    def test_inventory_lists_every_product(self, stocked_catalog):
        text = ReportFormatter().format_inventory(stocked_catalog.products)
        assert "INVENTORY LIST" in text
        assert text.count("ID: ") == 5

    def test_by_category_headers(self, stocked_catalog):
        text = ReportFormatter().format_by_category(stocked_catalog.categories())
        headers = [line for line in text.splitlines() if line.startswith("Category: ")]
        assert headers == ["Category: ELECTRICAL", "Category: FASTENERS", "Category: TOOLS"]

    def test_by_category_empty(self):
        assert ReportFormatter().format_by_category({}) == "No products in inventory!"

    def test_low_stock(self, stocked_catalog):
        text = ReportFormatter().format_low_stock(stocked_catalog.low_stock(5), 5)
        assert "LOW STOCK REPORT (Threshold: 5)" in text
        rows = [line for line in text.splitlines() if line.startswith(" ID: ")]
        assert [row.split(" | ")[0] for row in rows] == [" ID: 1005", " ID: 1004", " ID: 1001"]

    def test_low_stock_empty(self):
        assert ReportFormatter().format_low_stock([], 3) == "No products are low in stock!"

    def test_summary(self, stocked_catalog):
        text = ReportFormatter().format_summary(stocked_catalog.summary())
        assert "Total Products: 5" in text
        assert "Total Categories: 3" in text
        assert "Total Inventory Value: $378.17" in text
        assert "  Electrical: 1 product, $0.00" in text
        assert "  Fasteners: 2 products, $174.20" in text

    def test_summary_empty(self, catalog):
        assert ReportFormatter().format_summary(catalog.summary()) == "No products in inventory!"

    def test_total_value(self):
        assert ReportFormatter().format_total_value(Decimal("12.5")) == "Total Inventory Value: $12.50"

    def test_category_empty(self):
        assert ReportFormatter().format_category("Food", []) == "No products found in this category!"
