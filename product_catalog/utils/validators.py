"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for product input data.

This module implements:
- ProductNameValidator: Validates product names
- PriceValidator: Validates and normalizes prices

Validation Rules for Product Names:
----------------------------------
- Required, surrounding whitespace stripped
- Length: 1-255 characters after stripping
- Case is preserved

Validation Rules for Prices:
---------------------------
- Decimal, int, float or numeric string (bool rejected)
- Finite and non-negative
- At most 9,999,999,999.99 (fits NUMERIC(12, 2))
- Rounded half-up to two fractional digits

Search prices (validate_query) only need to be finite and non-negative;
they are compared as given, without rounding or the storage cap.

==============================================================================
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Tuple


class ProductNameValidator:
    """
    Validator for product names.

    Example:
        >>> validator = ProductNameValidator()
        >>> validator.validate("  Gaming Laptop ")
        (True, 'Gaming Laptop', None)
    """

    MIN_LENGTH = 1
    MAX_LENGTH = 255

    def validate(self, name: Any) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and normalize a product name.

        Args:
            name: Raw product name input

        Returns:
            Tuple of (is_valid, normalized_name, error_message)
        """
        if name is None:
            return False, None, "Name is required"

        if not isinstance(name, str):
            return False, None, "Name must be a string"

        name = name.strip()

        if len(name) < self.MIN_LENGTH:
            return False, None, "Name cannot be empty"

        if len(name) > self.MAX_LENGTH:
            return False, None, f"Name must be at most {self.MAX_LENGTH} characters"

        return True, name, None


class PriceValidator:
    """
    Validator for product prices.

    Floats are converted through their string form so 19.99 becomes
    Decimal("19.99") rather than its binary approximation.

    Example:
        >>> PriceValidator().validate(35000)
        (True, Decimal('35000.00'), None)
    """

    MAX_PRICE = Decimal("9999999999.99")
    QUANTUM = Decimal("0.01")

    def to_decimal(self, value: Any) -> Optional[Decimal]:
        """
        Convert a raw value to Decimal.

        Returns:
            Decimal value, or None if the value is not numeric
        """
        if isinstance(value, bool):
            return None

        if isinstance(value, Decimal):
            return value

        if isinstance(value, (int, float)):
            return Decimal(str(value))

        if isinstance(value, str):
            try:
                return Decimal(value.strip())
            except InvalidOperation:
                return None

        return None

    def validate_query(self, value: Any) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate a price used to search the catalog.

        Only numeric, finite and non-negative checks apply. The value is
        neither rounded nor capped, so comparisons use it exactly.

        Args:
            value: Raw price input

        Returns:
            Tuple of (is_valid, price, error_message)
        """
        if value is None:
            return False, None, "Price is required"

        price = self.to_decimal(value)

        if price is None:
            return False, None, "Price must be a number"

        if not price.is_finite():
            return False, None, "Price must be finite"

        if price < 0:
            return False, None, "Price cannot be negative"

        return True, price, None

    def validate(self, value: Any) -> Tuple[bool, Optional[Decimal], Optional[str]]:
        """
        Validate and normalize a price for storage.

        Args:
            value: Raw price input

        Returns:
            Tuple of (is_valid, normalized_price, error_message)
        """
        is_valid, price, error = self.validate_query(value)
        if not is_valid:
            return is_valid, price, error

        if price > self.MAX_PRICE:
            return False, None, f"Price cannot exceed {self.MAX_PRICE}"

        return True, price.quantize(self.QUANTUM, rounding=ROUND_HALF_UP), None
