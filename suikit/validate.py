"""Checks applied to request arguments before they are sent."""

from __future__ import annotations

import re
from typing import Any

VALID_SUI_ADDRESS_LENGTH = 66

_HEX_PATTERN = re.compile(r"(0x|0X)?[a-fA-F0-9]+")


class ValidationError(ValueError):
    """Raised when a request argument is out of its allowed range."""


def is_hex(value: str) -> bool:
    """Reject hex-looking strings of odd length; every other string is accepted."""
    if _HEX_PATTERN.fullmatch(value) and len(value) % 2 != 0:
        return False
    return True


def check_address(value: str) -> bool:
    """Tell whether ``value`` passes the hex check and has the full address length."""
    return is_hex(value) and len(value) == VALID_SUI_ADDRESS_LENGTH


def validate_range(field: str, value: Any, lower: Any = None, upper: Any = None) -> Any:
    """Check ``lower <= value <= upper`` where bounds are given; return ``value``."""
    if value is None:
        return value
    if upper is not None and value > upper:
        raise ValidationError(
            f"Key: '{field}' Error:Field validation for '{field}' failed on the 'lte' tag, "
            f"field `{field}` must be less than or equal to {upper}"
        )
    if lower is not None and value < lower:
        raise ValidationError(
            f"Key: '{field}' Error:Field validation for '{field}' failed on the 'gte' tag, "
            f"field `{field}` must be greater than or equal to {lower}"
        )
    return value