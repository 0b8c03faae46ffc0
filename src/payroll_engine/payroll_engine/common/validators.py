from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ConfigurationError


def require_positive(value: Any, field_name: str) -> Decimal:
    """Payroll denominators must be strictly positive."""
    amount = to_decimal(value, field_name)
    if amount <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero (got {value})")
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ConfigurationError(f"{field_name} must not be negative (got {value})")
    return amount


def to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() keeps 0.1 as 0.1 instead of its binary float expansion
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            raise ConfigurationError(f"{field_name} is not a number: {value!r}")
    if not amount.is_finite():
        raise ConfigurationError(f"{field_name} must be a finite number (got {value!r})")
    return amount
