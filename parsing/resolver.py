"""Resolve the ``-a``, ``-c`` and ``-d`` option groups of a command line.

``parse_groups`` is pure: the ``INVB_ALLOC`` fallback is passed in by the
caller as ``default_alloc`` instead of being read here.
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from common.logging_setup import get_logger
from parsing.groups import parse_group
from portfolio.allocation import validate_groups

log = get_logger(__name__)

ALLOC_OPT = "-a"
CURRENT_OPT = "-c"
DELTA_OPT = "-d"
HELP_OPTS = ("-h", "--help")

Groups = Tuple[List[Decimal], List[Decimal], List[Decimal]]


def parse_help(tokens: Sequence[str]) -> bool:
    """Help is wanted for a bare program name or any ``-h``/``--help`` token."""
    return len(tokens) <= 1 or any(t in HELP_OPTS for t in tokens)


def parse_groups(tokens: Sequence[str], default_alloc: Optional[str] = None) -> Groups:
    """Return validated ``(alloc, current, delta)`` decimal groups.

    Args:
        tokens: Full argument list, program name included.
        default_alloc: Whitespace separated allocation used when ``-a`` is
            absent or has no values.

    Raises:
        InputError: A token failed to parse or the groups are inconsistent.
    """
    alloc = parse_group(tokens, ALLOC_OPT)
    if not alloc and default_alloc is not None:
        alloc = parse_group([ALLOC_OPT, *default_alloc.split()], ALLOC_OPT)
        log.debug("alloc.defaulted", count=len(alloc))

    delta = parse_group(tokens, DELTA_OPT)
    if not delta:
        delta = [Decimal(0)]

    current = parse_group(tokens, CURRENT_OPT)

    validate_groups(alloc, current, delta)
    return alloc, current, delta
