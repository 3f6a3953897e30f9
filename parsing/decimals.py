from __future__ import annotations

import re
from decimal import Decimal

from common.numbers import MAX_MAGNITUDE, normalize
from parsing.errors import MagnitudeError, ParseError

THOUSANDS_SEPARATOR = ","

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_decimal(token: str) -> Decimal:
    """Parse a command line token into an exact, normalized decimal.

    Thousands separators are stripped first, so ``"1,234.5"`` and
    ``"-2,0.1"`` parse as ``1234.5`` and ``-20.1``.

    Raises:
        ParseError: The cleaned token is not a plain decimal number.
        MagnitudeError: The value is larger than 10**15 in absolute terms.
    """
    cleaned = token.replace(THOUSANDS_SEPARATOR, "")
    if not _NUMBER_RE.fullmatch(cleaned):
        raise ParseError(f"unable to parse '{cleaned}' to a number")

    value = Decimal(cleaned)
    if value.copy_abs() > MAX_MAGNITUDE:
        raise MagnitudeError(
            f"magnitude of '{cleaned}' exceeds {MAX_MAGNITUDE:,}"
        )
    return normalize(value)
