"""Exact decimal arithmetic shared by the parser, engine and formatter.

Every computation runs under ``DECIMAL_CONTEXT``. Its precision is the
largest the ``decimal`` module supports and ``Inexact`` is trapped, so a
sum, product or division by 100 either comes out exact or raises.
"""
from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
)
from typing import Iterable

DECIMAL_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Inexact],
)

MAX_MAGNITUDE = Decimal(10) ** 15


def normalize(value: Decimal) -> Decimal:
    """Strip trailing fractional zeros without changing the value.

    Works on the digit tuple directly, so no precision limit applies.
    Integral results keep their plain form (``100`` rather than ``1E+2``).
    """
    sign, digits, exp = value.as_tuple()
    if not isinstance(exp, int):
        return value
    digits = list(digits)
    if not any(digits):
        return Decimal((sign, (0,), 0))
    if exp > 0:
        digits.extend([0] * exp)
        exp = 0
    while exp < 0 and digits[-1] == 0:
        digits.pop()
        exp += 1
    return Decimal((sign, tuple(digits), exp))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    total = Decimal(0)
    for v in values:
        total = DECIMAL_CONTEXT.add(total, v)
    return total
