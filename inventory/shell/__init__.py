"""
Interactive console shell.
"""

from .menu import InventoryShell

__all__ = [
    "InventoryShell",
]
