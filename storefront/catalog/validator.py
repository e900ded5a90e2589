"""
==============================================================================
Creation Validation Module
==============================================================================

Gatekeeper between untrusted payloads and the record store.

Validation Rules for Products:
-----------------------------
- name:         string, 1-100 characters
- price:        number or decimal text, finite and greater than zero
- category:     non-empty string
- stock_status: exactly "In Stock", "Low Stock" or "Out of Stock"

Prices are parsed strictly: text such as "nan", "inf", "1_000" or "12abc"
is rejected rather than coerced.

==============================================================================
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional, Tuple

from storefront.core import exceptions

from .models import ProductInput, StockStatus, UserInput


class ProductValidator:
    """
    Validator for product creation payloads.

    Collects every failing field before raising, so clients can show all
    problems at once.

    Example:
        >>> validator = ProductValidator()
        >>> data = validator.validate({
        ...     "name": "Yoga Mat Pro",
        ...     "price": "59.99",
        ...     "category": "Sports & Fitness",
        ...     "stock_status": "In Stock",
        ... })
        >>> data.price
        59.99
    """

    # Plain decimal or scientific notation, optional sign
    PRICE_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

    NAME_MAX_LENGTH = 100

    STOCK_STATUSES = tuple(status.value for status in StockStatus)

    def validate(self, payload: Any) -> ProductInput:
        """
        Validate and normalize a product payload.

        Args:
            payload: Decoded JSON body

        Returns:
            Normalized ProductInput (price coerced to float)

        Raises:
            ValidationError: With one detail entry per failing field
        """
        if not isinstance(payload, Mapping):
            raise exceptions.validation_failed(
                [{"field": "body", "message": "Expected a JSON object"}]
            )

        errors: List[dict] = []

        name_error = self.check_name(payload.get("name"))
        if name_error:
            errors.append({"field": "name", "message": name_error})

        price, price_error = self.parse_price(payload.get("price"))
        if price_error:
            errors.append({"field": "price", "message": price_error})

        category_error = self.check_category(payload.get("category"))
        if category_error:
            errors.append({"field": "category", "message": category_error})

        status_error = self.check_stock_status(payload.get("stock_status"))
        if status_error:
            errors.append({"field": "stock_status", "message": status_error})

        if errors:
            raise exceptions.validation_failed(errors)

        return ProductInput(
            name=payload["name"],
            price=price,
            category=payload["category"],
            stock_status=StockStatus(payload["stock_status"]),
        )

    def is_valid(self, payload: Any) -> bool:
        """Quick validation check."""
        try:
            self.validate(payload)
        except exceptions.ValidationError:
            return False
        return True

    # =========================================================================
    # FIELD CHECKS
    # =========================================================================

    def check_name(self, name: Any) -> Optional[str]:
        if not isinstance(name, str):
            return "Product name is required"
        if len(name) == 0:
            return "Product name is required"
        if len(name) > self.NAME_MAX_LENGTH:
            return f"Name too long (max {self.NAME_MAX_LENGTH} characters)"
        return None

    def parse_price(self, price: Any) -> Tuple[Optional[float], Optional[str]]:
        """
        Parse a price given as number or text.

        Returns:
            Tuple of (price, error_message)
        """
        # bool is an int subclass but never a price
        if isinstance(price, bool):
            return None, "Price must be a number"

        if isinstance(price, str):
            price = price.strip()
            if not self.PRICE_PATTERN.match(price):
                return None, "Price must be a number"
        elif not isinstance(price, (int, float)):
            return None, "Price must be a number"

        try:
            value = float(price)
        except OverflowError:
            return None, "Price must be a finite number"

        if not math.isfinite(value):
            return None, "Price must be a finite number"
        if value <= 0:
            return None, "Price must be positive"
        return value, None

    def check_category(self, category: Any) -> Optional[str]:
        if not isinstance(category, str) or len(category) == 0:
            return "Category is required"
        return None

    def check_stock_status(self, stock_status: Any) -> Optional[str]:
        if stock_status not in self.STOCK_STATUSES:
            return f"Stock status must be one of: {', '.join(self.STOCK_STATUSES)}"
        return None


class UserValidator:
    """Validator for user creation payloads."""

    def validate(self, payload: Any) -> UserInput:
        """
        Validate a user payload.

        Raises:
            ValidationError: If username or password is missing or not text
        """
        if not isinstance(payload, Mapping):
            raise exceptions.validation_failed(
                [{"field": "body", "message": "Expected a JSON object"}]
            )

        errors = [
            {"field": field, "message": f"{field.capitalize()} is required"}
            for field in ("username", "password")
            if not isinstance(payload.get(field), str) or not payload.get(field)
        ]
        if errors:
            raise exceptions.validation_failed(errors)

        return UserInput(username=payload["username"], password=payload["password"])
