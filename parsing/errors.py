"""Errors raised while turning command line tokens into portfolio input.

Every class here is a user-input error. The CLI catches ``InputError``
and reports ``str(err)`` verbatim.
"""
from __future__ import annotations


class InputError(Exception):
    """Base class for rejected command line input."""

    pass


class ParseError(InputError):
    """A token is not a syntactically valid number."""

    pass


class MagnitudeError(InputError):
    """A token's absolute value exceeds 1,000,000,000,000,000."""

    pass


class MissingGroupError(InputError):
    """A required option group has no values."""

    pass


class TooManyValuesError(InputError):
    """A single-valued option group was given several values."""

    pass


class GroupLengthMismatchError(InputError):
    """<alloc> and <current> have different component counts."""

    pass


class AllocationSumError(InputError):
    """<alloc> values do not sum to exactly 100."""

    pass
