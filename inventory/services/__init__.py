"""
Service layer used by the console shell.
"""

from .inventory_service import InventoryService

__all__ = [
    "InventoryService",
]
