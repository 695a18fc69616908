"""
Input schemas for product creation and editing.
"""

from .product import ProductCreate, ProductUpdate

__all__ = [
    "ProductCreate",
    "ProductUpdate",
]
