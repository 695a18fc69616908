"""
Application Exception Handling

Single AppException class for all application errors raised outside the
catalog. The catalog itself reports "not found" as a normal result.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Usage:
        raise AppException("Price must be a number", "INVALID_INPUT")
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", {"product_id": 1001})

    Error Codes:
        Input:
            - INVALID_INPUT

        Catalog:
            - PRODUCT_NOT_FOUND

        Startup:
            - SEED_FILE_INVALID
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_INPUT")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def is_not_found(self) -> bool:
        """Check whether this error is a lookup miss."""
        return self.code.endswith("_NOT_FOUND")


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_input(field: str, value: Any, reason: str) -> AppException:
    """Create invalid input exception."""
    return AppException(
        f"Invalid {field}: {reason}",
        "INVALID_INPUT",
        {"field": field, "value": value, "reason": reason}
    )


def product_not_found(product_id: Optional[int] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id is not None else {}
    return AppException("Product not found!", "PRODUCT_NOT_FOUND", details)


def seed_file_invalid(path: str, reason: str) -> AppException:
    """Create invalid seed file exception."""
    return AppException(
        f"Cannot load seed file {path}: {reason}",
        "SEED_FILE_INVALID",
        {"path": path, "reason": reason}
    )
