from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

from common.numbers import DECIMAL_CONTEXT

# Largest cent count the formatter accepts (unsigned 64-bit).
MAX_CENTS = 2**64 - 1

_HUNDRED = Decimal(100)


def format_decimal(value: Decimal) -> str:
    """Format ``value`` with two decimal places and comma thousands separators.

    >>> format_decimal(Decimal("-1234567.89"))
    '-1,234,567.89'
    """
    scaled = DECIMAL_CONTEXT.multiply(value.copy_abs(), _HUNDRED)
    cents = int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN, context=DECIMAL_CONTEXT))
    if cents > MAX_CENTS:
        raise OverflowError(f"magnitude of '{value}' is too large")

    whole, frac = divmod(cents, 100)
    sign = "-" if value.is_signed() else ""
    return f"{sign}{whole:,}.{frac:02d}"
