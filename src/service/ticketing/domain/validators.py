"""Ticketing domain validation utilities (attrs validators)."""

from collections.abc import Mapping
from typing import Any

from src.service.ticketing.domain.enum.ticket_category import TicketCategory


def is_strict_int(value: Any) -> bool:
    """bool is a subclass of int but never a valid count or amount."""
    return isinstance(value, int) and not isinstance(value, bool)


class NumericValidators:
    """Common numeric validation functions."""

    @staticmethod
    def validate_strict_int(_instance: Any, attribute: Any, value: Any) -> None:
        """Validate that a value is an integer and not a bool (for attrs validators)."""
        if not is_strict_int(value):
            raise TypeError(f'{attribute.name} must be an integer')

    @staticmethod
    def validate_non_negative(_instance: Any, attribute: Any, value: int) -> None:
        """Validate that a count is zero or more (for attrs validators)."""
        if value < 0:
            raise ValueError(f'{attribute.name} cannot be negative')

    @staticmethod
    def validate_positive(_instance: Any, attribute: Any, value: int) -> None:
        """Validate that a limit is at least 1 (for attrs validators)."""
        if value <= 0:
            raise ValueError(f'{attribute.name} must be greater than 0')


class PriceTableValidators:
    """Validators for per-category price tables."""

    @staticmethod
    def validate_price_table(_instance: Any, _attribute: Any, value: Mapping) -> None:
        missing = [category.value for category in TicketCategory if category not in value]
        if missing:
            raise ValueError(f'Missing ticket price for: {", ".join(missing)}')
        for category, price in value.items():
            if not is_strict_int(price):
                raise TypeError(f'Price for {category} must be an integer')
            if price < 0:
                raise ValueError(f'Price for {category} cannot be negative')
