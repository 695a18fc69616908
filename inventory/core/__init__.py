"""
==============================================================================
Core Package
==============================================================================

Core infrastructure shared by the service and shell layers.

Modules:
--------
- exceptions: AppException class and error factory functions

Usage:
------
    from inventory.core import exceptions
    raise exceptions.invalid_input("price", "abc", "must be a number")

==============================================================================
"""

from .exceptions import AppException

__all__ = [
    "AppException",
]
