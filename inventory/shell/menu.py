"""
==============================================================================
Interactive Shell Module
==============================================================================

Text menu driving the inventory service.

This module implements:
- InventoryShell: Read-eval-print loop over an input and output stream

Menu:
-----
     1. Add New Product              7. View Products by Category
     2. Remove Product               8. Generate Low Stock Report
     3. Update Stock                 9. Generate Inventory Summary
     4. Search Products             10. Calculate Total Inventory Value
     5. Display All Products        11. Edit Product
     6. Display by Category          0. Exit

Bad input never ends the loop: the error is printed and the menu is shown
again. End of input exits like choice 0.

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from inventory.core import AppException
from inventory.services import InventoryService
from inventory.utils import IntegerInputValidator, PriceInputValidator, ReportFormatter


# Module logger
logger = logging.getLogger(__name__)


MENU_ITEMS = [
    ("1", "Add New Product"),
    ("2", "Remove Product"),
    ("3", "Update Stock"),
    ("4", "Search Products"),
    ("5", "Display All Products"),
    ("6", "Display by Category"),
    ("7", "View Products by Category"),
    ("8", "Generate Low Stock Report"),
    ("9", "Generate Inventory Summary"),
    ("10", "Calculate Total Inventory Value"),
    ("11", "Edit Product"),
    ("0", "Exit"),
]


class InventoryShell:
    """
    Interactive console for the inventory tracker.

    Attributes:
        _service: Service executing every action
        _formatter: Report renderer
        _in: Input stream
        _out: Output stream
        _pause: Wait for Enter after each action

    Example:
        >>> shell = InventoryShell(service, stdin=io.StringIO("10\\n0\\n"), pause=False)
        >>> shell.run()
        0
    """

    def __init__(
        self,
        service: InventoryService,
        formatter: Optional[ReportFormatter] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        pause: bool = True
    ) -> None:
        self._service = service
        self._formatter = formatter or ReportFormatter(service.settings.currency_symbol)
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self._pause = pause

        self._choice = IntegerInputValidator("choice")
        self._product_id = IntegerInputValidator("product ID", min_value=1)
        self._quantity = IntegerInputValidator("quantity", min_value=0)
        self._delta = IntegerInputValidator("stock change")
        self._threshold = IntegerInputValidator("threshold", min_value=0)
        self._price = PriceInputValidator("price", service.settings.currency_symbol)

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_product,
            2: self.remove_product,
            3: self.update_stock,
            4: self.search_products,
            5: self.display_all,
            6: self.display_by_category,
            7: self.view_category,
            8: self.low_stock_report,
            9: self.inventory_summary,
            10: self.total_value,
            11: self.edit_product,
        }

    # =========================================================================
    # MAIN LOOP
    # =========================================================================

    def run(self) -> int:
        """
        Run the menu loop until the user exits or input ends.

        Returns:
            Process exit code (always 0)
        """
        settings = self._service.settings
        self._print(f"Welcome to {settings.app_name}!")
        self._print(f"{len(self._service.catalog)} products loaded.")

        while True:
            self._print(self._menu_text())
            try:
                choice = self._choice.parse(self._read("Enter your choice: "))
            except EOFError:
                break
            except AppException:
                self._print("Invalid input! Please enter a valid number.")
                continue

            if choice == 0:
                break

            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid choice! Please try again.")
                continue

            try:
                action()
            except EOFError:
                break
            except AppException as e:
                logger.debug(f"Action {choice} failed: {e.code}")
                self._print(self._error_text(e))

            if self._pause:
                try:
                    self._read("\nPress Enter to continue...")
                except EOFError:
                    break

        self._print(f"\nThank you for using {settings.app_name}!")
        self._print("Goodbye!")
        return 0

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def add_product(self) -> None:
        self._print("\n--- Add New Product ---")
        name = self._read("Enter product name: ")
        category = self._read("Enter category: ")
        price = self._price.parse(self._read(f"Enter price: {self._price.currency_symbol}"))
        quantity = self._quantity.parse(self._read("Enter quantity: "))
        supplier = self._read("Enter supplier: ")

        product = self._service.add_product({
            "name": name,
            "category": category,
            "price": price,
            "quantity": quantity,
            "supplier": supplier,
        })
        self._print(f"Product added successfully! (ID: {product.id})")

    def remove_product(self) -> None:
        product_id = self._product_id.parse(self._read("Enter Product ID to remove: "))
        if self._service.remove_product(product_id):
            self._print("Product removed successfully!")
        else:
            self._print("Product not found!")

    def update_stock(self) -> None:
        self._print("\n--- Update Stock ---")
        product_id = self._product_id.parse(self._read("Enter Product ID: "))
        product = self._service.get_product(product_id)

        self._print(f"Current stock for {product.name}: {product.quantity}")
        delta = self._delta.parse(self._read("Enter stock change (+/- amount): "))

        change = self._service.update_stock(product_id, delta)
        if change is None:
            self._print("Product not found!")
            return
        self._print(self._formatter.format_stock_change(change))

    def search_products(self) -> None:
        self._print("\n--- Search Products ---")
        self._print("1. Search by ID")
        self._print("2. Search by Name")
        choice = self._choice.parse(self._read("Choose option: "))

        if choice == 1:
            product_id = self._product_id.parse(self._read("Enter Product ID: "))
            product = self._service.find_product(product_id)
            if product is None:
                self._print("Product not found!")
            else:
                self._print("\nProduct Found:")
                self._print(self._formatter.format_product_details(product))
        elif choice == 2:
            query = self._read("Enter product name (partial match): ")
            results = self._service.search_by_name(query.strip())
            self._print(self._formatter.format_search_results(results))
        else:
            self._print("Invalid choice!")

    def display_all(self) -> None:
        self._print(self._formatter.format_inventory(self._service.all_products()))

    def display_by_category(self) -> None:
        self._print(self._formatter.format_by_category(self._service.grouped_by_category()))

    def view_category(self) -> None:
        category = self._read("Enter category name: ").strip()
        products = self._service.products_in_category(category)
        self._print(self._formatter.format_category(category, products))

    def low_stock_report(self) -> None:
        default = self._service.settings.low_stock_threshold
        raw = self._read(f"Enter low stock threshold [{default}]: ")
        threshold = self._threshold.parse(raw) if raw.strip() else default
        products = self._service.low_stock(threshold)
        self._print(self._formatter.format_low_stock(products, threshold))

    def inventory_summary(self) -> None:
        self._print(self._formatter.format_summary(self._service.summary()))

    def total_value(self) -> None:
        self._print(self._formatter.format_total_value(self._service.total_value()))

    def edit_product(self) -> None:
        self._print("\n--- Edit Product ---")
        product_id = self._product_id.parse(self._read("Enter Product ID: "))
        product = self._service.get_product(product_id)
        self._print("Leave a field blank to keep its current value.")

        changes = {}
        for field, label in (("name", "name"), ("category", "category"), ("supplier", "supplier")):
            raw = self._read(f"New {label} [{getattr(product, field)}]: ")
            if raw.strip():
                changes[field] = raw

        raw_price = self._read(f"New price [{self._formatter.money(product.price)}]: ")
        if raw_price.strip():
            changes["price"] = self._price.parse(raw_price)

        if not changes:
            self._print("Nothing to change.")
            return

        edited = self._service.edit_product(product_id, changes)
        if edited is None:
            self._print("Product not found!")
            return
        self._print("Product updated successfully!")
        self._print(self._formatter.format_product(edited))

    # =========================================================================
    # I/O HELPERS
    # =========================================================================

    def _read(self, prompt: str) -> str:
        """Prompt and read one line; EOFError at end of input."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    @staticmethod
    def _menu_text() -> str:
        separator = "=" * 50
        lines = ["", separator, "        INVENTORY MANAGEMENT SYSTEM", separator]
        lines.extend(f"{key + '.':<4}{label}" for key, label in MENU_ITEMS)
        lines.append(separator)
        return "\n".join(lines)

    @staticmethod
    def _error_text(error: AppException) -> str:
        if error.code == "INVALID_INPUT":
            return f"Invalid input! {error.message}"
        return error.message
