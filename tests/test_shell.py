"""
==============================================================================
Interactive Shell Tests
==============================================================================

Drives the menu loop with scripted input and checks the printed output.

==============================================================================
"""

import io

import pytest

from inventory.shell import InventoryShell


def run_shell(service, *lines: str, pause: bool = False) -> str:
    """Run the shell over the given input lines and return its output."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    exit_code = InventoryShell(service, stdin=stdin, stdout=stdout, pause=pause).run()
    assert exit_code == 0
    return stdout.getvalue()


ADD_WIDGET = ("1", "Widget", "Tools", "9.99", "3", "Acme")


class TestMenuLoop:
    """Tests for the loop itself."""

    def test_exit(self, service):
        output = run_shell(service, "0")
        assert "INVENTORY MANAGEMENT SYSTEM" in output
        assert "Goodbye!" in output

    def test_end_of_input_exits(self, service):
        output = run_shell(service)
        assert "Goodbye!" in output

    def test_non_numeric_choice_reprompts(self, service):
        output = run_shell(service, "abc", "0")
        assert "Invalid input! Please enter a valid number." in output
        assert output.count("Enter your choice:") == 2

    def test_unknown_choice(self, service):
        output = run_shell(service, "42", "0")
        assert "Invalid choice! Please try again." in output

    def test_pause_waits_for_enter(self, service):
        output = run_shell(service, "10", "", "0", pause=True)
        assert "Press Enter to continue..." in output
        assert "Goodbye!" in output


class TestActions:
    """Tests for individual menu actions."""

    def test_add_product(self, service):
        output = run_shell(service, *ADD_WIDGET, "0")
        assert "Product added successfully! (ID: 1001)" in output
        assert service.find_product(1001).name == "Widget"

    def test_add_with_bad_price_recovers(self, service):
        output = run_shell(service, "1", "Widget", "Tools", "cheap", *ADD_WIDGET, "0")
        assert "Invalid input! Invalid price: please enter a valid number" in output
        assert [p.id for p in service.all_products()] == [1001]

    def test_add_with_bad_quantity_recovers(self, service):
        output = run_shell(service, "1", "Widget", "Tools", "9.99", "three", "0")
        assert "Invalid quantity" in output
        assert len(service.catalog) == 0

    def test_remove_product(self, service):
        output = run_shell(service, *ADD_WIDGET, "2", "1001", "2", "1001", "0")
        assert "Product removed successfully!" in output
        assert "Product not found!" in output

    def test_update_stock_clamps(self, service):
        output = run_shell(service, *ADD_WIDGET, "3", "1001", "-5", "0")
        assert "Current stock for Widget: 3" in output
        assert "Stock updated! Widget: 3 → 0" in output

    def test_update_stock_unknown_id(self, service):
        output = run_shell(service, "3", "1001", "0")
        assert "Product not found!" in output
        assert "Enter stock change" not in output

    def test_search_by_id(self, service):
        output = run_shell(service, *ADD_WIDGET, "4", "1", "1001", "0")
        assert "Product Found:" in output
        assert "Total Value: $29.97" in output

    def test_search_by_name(self, service):
        output = run_shell(service, *ADD_WIDGET, "4", "2", "wid", "0")
        assert "Search Results:" in output
        assert "Name: Widget" in output

    def test_search_by_name_no_results(self, service):
        output = run_shell(service, "4", "2", "zzz", "0")
        assert "No products found!" in output

    def test_display_all_empty(self, service):
        output = run_shell(service, "5", "0")
        assert "No products in inventory!" in output

    def test_display_all(self, service):
        output = run_shell(service, *ADD_WIDGET, "5", "0")
        assert "INVENTORY LIST" in output
        assert "ID: 1001 | Name: Widget" in output

    def test_display_by_category(self, service):
        output = run_shell(service, *ADD_WIDGET, "6", "0")
        assert "Category: TOOLS" in output

    def test_view_category(self, service):
        output = run_shell(service, *ADD_WIDGET, "7", "Tools", "7", "Food", "0")
        assert "Products in Tools:" in output
        assert "No products found in this category!" in output

    def test_low_stock_with_threshold(self, service):
        output = run_shell(service, *ADD_WIDGET, "8", "5", "0")
        assert "LOW STOCK REPORT (Threshold: 5)" in output
        assert "(Quantity: 3)" in output

    def test_low_stock_default_threshold(self, service):
        output = run_shell(service, *ADD_WIDGET, "8", "", "0")
        assert "Enter low stock threshold [5]:" in output
        assert "LOW STOCK REPORT (Threshold: 5)" in output

    def test_low_stock_none(self, service):
        output = run_shell(service, *ADD_WIDGET, "8", "1", "0")
        assert "No products are low in stock!" in output

    def test_summary(self, service):
        output = run_shell(service, *ADD_WIDGET, "9", "0")
        assert "Total Products: 1" in output
        assert "Tools: 1 product, $29.97" in output

    def test_total_value(self, service):
        output = run_shell(service, *ADD_WIDGET, "10", "0")
        assert "Total Inventory Value: $29.97" in output

    def test_edit_product(self, service):
        output = run_shell(service, *ADD_WIDGET, "11", "1001", "Gadget", "", "", "4.50", "0")
        assert "Product updated successfully!" in output
        product = service.find_product(1001)
        assert product.name == "Gadget"
        assert product.category == "Tools"
        assert str(product.price) == "4.50"

    def test_edit_product_nothing_to_change(self, service):
        output = run_shell(service, *ADD_WIDGET, "11", "1001", "", "", "", "", "0")
        assert "Nothing to change." in output


@pytest.mark.parametrize("lines", [
    ("2", "x"),
    ("3", "-1"),
    ("4", "1", "abc"),
    ("8", "-2"),
    ("11", "zero"),
])
def test_bad_numbers_never_end_the_session(service, lines):
    output = run_shell(service, *lines, "10", "0")
    assert "Invalid input!" in output
    assert "Total Inventory Value: $0.00" in output
