"""
Numeric helpers.

Monetary values and rates are kept as Decimal end to end; floats coming
from stored JSON are converted through their string form.
"""

from decimal import Decimal, InvalidOperation
from typing import Union


Number = Union[int, float, Decimal, str]


def to_decimal(value: Number | None) -> Decimal:
    """
    Convert a number to Decimal, treating unset or NaN input as zero.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        Decimal value

    Raises:
        ValueError: If a string is not numeric

    Example:
        >>> to_decimal(0.007)
        Decimal('0.007')
        >>> to_decimal(None)
        Decimal('0')
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip() or "0")
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e
    else:
        result = Decimal(str(value))

    if result.is_nan():
        return Decimal("0")
    return result


def normalize_name(text: str | None) -> str:
    """Normalize a display name for referral matching (trimmed, lowercase)."""
    return (text or "").strip().lower()
