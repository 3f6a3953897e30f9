from __future__ import annotations
from decimal import Decimal
from typing import Sequence

from common.numbers import decimal_sum
from parsing.errors import (
    AllocationSumError,
    GroupLengthMismatchError,
    MissingGroupError,
    TooManyValuesError,
)

ALLOC_TOTAL = Decimal(100)

def validate_groups(
    alloc: Sequence[Decimal],
    current: Sequence[Decimal],
    delta: Sequence[Decimal],
) -> None:
    """Check the three groups against each other, failing on the first problem."""
    if not alloc:
        raise MissingGroupError("no values provided for <alloc>")
    if not current:
        raise MissingGroupError("no values provided for <current>")
    if not delta:
        raise MissingGroupError("no values provided for <delta>")
    if len(delta) > 1:
        raise TooManyValuesError("too many values provided for <delta>")
    if len(alloc) != len(current):
        raise GroupLengthMismatchError(
            "number of values provided for <alloc> and <current> differ"
        )
    if decimal_sum(alloc) != ALLOC_TOTAL:
        raise AllocationSumError("values for <alloc> do not sum to 100")
