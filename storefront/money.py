"""
Money Utilities - Safe Decimal operations for prices coming from the catalog.

Catalog prices arrive as JSON floats; totals are computed in Decimal and only
turned back into strings at the API boundary.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

MONEY_PRECISION = Decimal("0.01")

Number = Union[str, int, float, Decimal, None]


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Via str to avoid binary float artifacts (19.99 -> 19.989999...)
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def format_amount(value: Number) -> str:
    """Two-decimal string, e.g. Decimal("20") -> "20.00"."""
    return f"{round_money(value):.2f}"
