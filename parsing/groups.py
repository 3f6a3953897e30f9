"""Option group scanning over a flat token list.

A group is the run of tokens that follows an option marker, up to the
next marker or the end of the list. Negative numbers such as ``-2.5``
are values, not markers.
"""
from __future__ import annotations

import string
from decimal import Decimal
from typing import List, Sequence

from common.logging_setup import get_logger
from parsing.decimals import parse_decimal

log = get_logger(__name__)


def is_option_marker(token: str) -> bool:
    """True for ``-x``/``--name`` style tokens, False for ``-5`` or ``7``."""
    return len(token) >= 2 and token[0] == "-" and token[1] not in string.digits


def parse_group(tokens: Sequence[str], opt: str) -> List[Decimal]:
    """Parse the values following the first ``opt`` in ``tokens``.

    Returns an empty list when ``opt`` does not appear. Any token that
    fails to parse aborts the whole group.
    """
    try:
        start = list(tokens).index(opt) + 1
    except ValueError:
        return []

    values: List[Decimal] = []
    for token in tokens[start:]:
        if is_option_marker(token):
            break
        values.append(parse_decimal(token))

    log.debug("group.parsed", opt=opt, count=len(values))
    return values
