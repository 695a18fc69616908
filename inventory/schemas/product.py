"""
==============================================================================
Product Schemas Module
==============================================================================

Input schemas for creating and editing catalog products.

The shell collects raw text, the schemas validate it, and only validated
values ever reach the catalog.

==============================================================================
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# CREATE SCHEMAS
# =============================================================================

class ProductCreate(BaseModel):
    """New product data, before an id is assigned."""
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(..., ge=0)
    supplier: str = Field(default="", max_length=255)

    @field_validator("name", "category", "supplier", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


# =============================================================================
# UPDATE SCHEMAS
# =============================================================================

class ProductUpdate(BaseModel):
    """
    Field edits for an existing product.

    Only the fields that are set are applied. Quantity is changed through
    stock updates, and the id can never be edited.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    supplier: Optional[str] = Field(default=None, max_length=255)

    @field_validator("name", "category", "supplier", mode="before")
    @classmethod
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def validate_not_empty(self):
        if not self.changes():
            raise ValueError("At least one field must be provided")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly set on this update."""
        return self.model_dump(exclude_none=True)
