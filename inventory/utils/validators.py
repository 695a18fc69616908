"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for raw text typed at the shell prompt.

This module implements:
- IntegerInputValidator: ids, quantities, thresholds, deltas, menu choices
- PriceInputValidator: non-negative prices with at most two decimals

Each validator offers ``validate`` returning a result tuple and ``parse``
raising AppException("INVALID_INPUT") so the shell can re-prompt.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from inventory.core import exceptions


class IntegerInputValidator:
    """
    Validator for whole-number input.

    Example:
        >>> validator = IntegerInputValidator("quantity", min_value=0)
        >>> validator.validate(" 12 ")
        (True, 12, None)
        >>> validator.validate("-1")
        (False, None, 'must be at least 0')
    """

    def __init__(
        self,
        field: str,
        min_value: Optional[int] = None
    ) -> None:
        self.field = field
        self.min_value = min_value

    def validate(self, raw: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Validate and convert raw input.

        Returns:
            Tuple of (is_valid, value, error_message)
        """
        if raw is None or not raw.strip():
            return False, None, "a value is required"

        text = raw.strip()

        try:
            value = int(text)
        except ValueError:
            return False, None, "please enter a valid whole number"

        if self.min_value is not None and value < self.min_value:
            return False, None, f"must be at least {self.min_value}"

        return True, value, None

    def parse(self, raw: str) -> int:
        """
        Convert raw input or raise.

        Raises:
            AppException: INVALID_INPUT when the text is not acceptable
        """
        is_valid, value, error = self.validate(raw)
        if not is_valid:
            raise exceptions.invalid_input(self.field, raw, error)
        return value


class PriceInputValidator:
    """
    Validator for price input.

    Accepts an optional leading currency symbol ("$9.99").
    """

    MAX_DECIMAL_PLACES = 2

    def __init__(self, field: str = "price", currency_symbol: str = "$") -> None:
        self.field = field
        self.currency_symbol = currency_symbol

    def validate(self, raw: str) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate and convert raw input.

        Returns:
            Tuple of (is_valid, value, error_message)
        """
        if raw is None or not raw.strip():
            return False, None, "a value is required"

        text = raw.strip()
        if self.currency_symbol and text.startswith(self.currency_symbol):
            text = text[len(self.currency_symbol):].strip()

        try:
            value = Decimal(text)
        except InvalidOperation:
            return False, None, "please enter a valid number"

        if not value.is_finite():
            return False, None, "please enter a valid number"

        if value < 0:
            return False, None, "cannot be negative"

        if -value.as_tuple().exponent > self.MAX_DECIMAL_PLACES:
            return False, None, f"at most {self.MAX_DECIMAL_PLACES} decimal places allowed"

        return True, value, None

    def parse(self, raw: str) -> Decimal:
        """
        Convert raw input or raise.

        Raises:
            AppException: INVALID_INPUT when the text is not acceptable
        """
        is_valid, value, error = self.validate(raw)
        if not is_valid:
            raise exceptions.invalid_input(self.field, raw, error)
        return value
