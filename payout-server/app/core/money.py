"""Conversion between wire decimals and stored integer cents."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from app.core.errors import ValidationError

CENT = Decimal("0.01")
# keeps balances and their sums well inside signed 64-bit INTEGER columns
MAX_CENTS = 10**15


def to_cents(amount: Decimal | int | str, *, field: str = "amount") -> int:
    """Convert a decimal amount to integer cents, rejecting sub-cent precision."""
    try:
        value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
        if not value.is_finite():
            raise ValidationError(f"Invalid {field}")
        quantized = value.quantize(CENT)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field}") from exc
    if value != quantized:
        raise ValidationError(f"{field} must have at most two decimal places")
    cents = int(quantized * 100)
    if abs(cents) > MAX_CENTS:
        raise ValidationError(f"{field} is too large")
    return cents


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)
