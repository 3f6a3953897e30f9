"""Rebalance engine.

Computes the post-rebalance value of each component and the buy/sell
change needed to get there, using exact decimal arithmetic throughout.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence, Tuple

from common.logging_setup import get_logger
from common.numbers import DECIMAL_CONTEXT, decimal_sum, normalize

log = get_logger(__name__)


@dataclass(frozen=True)
class Rebalance:
    """Per-component values before and after rebalancing."""

    total: Decimal
    original: Tuple[Decimal, ...]
    future: Tuple[Decimal, ...]
    change: Tuple[Decimal, ...]


def rebalance(
    alloc: Sequence[Decimal],
    current: Sequence[Decimal],
    delta: Sequence[Decimal],
) -> Rebalance:
    """Rebalance ``current`` to the ``alloc`` percentages.

    Args:
        alloc: Target percentages, already validated to sum to 100.
        current: Current market value of each component, same order as ``alloc``.
        delta: One-element group holding the net cash flow in or out.

    Returns:
        Rebalance whose ``future`` values sum to ``delta[0] + sum(current)``.
    """
    ctx = DECIMAL_CONTEXT
    total = normalize(ctx.add(delta[0], decimal_sum(current)))
    future = tuple(
        normalize(ctx.multiply(ctx.scaleb(a, -2), total))  # a% of total
        for a in alloc
    )
    change = tuple(normalize(ctx.subtract(f, c)) for f, c in zip(future, current))

    log.debug("rebalance.computed", total=str(total), components=len(future))
    return Rebalance(
        total=total,
        original=tuple(current),
        future=future,
        change=change,
    )
