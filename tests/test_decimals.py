"""Tests for number token parsing.

Covers:
- Thousands separator stripping
- Normalization of trailing zeros
- Syntax and magnitude rejection
"""
from __future__ import annotations

from decimal import Decimal

import pytest

from common.numbers import MAX_MAGNITUDE, normalize
from parsing.decimals import parse_decimal
from parsing.errors import InputError, MagnitudeError, ParseError


class TestParseDecimal:
    """Tests for successful token parsing."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("50", Decimal("50")),
            ("-2.5", Decimal("-2.5")),
            ("1,234.56", Decimal("1234.56")),
            ("-2,0.1", Decimal("-20.1")),
            ("+7", Decimal("7")),
            (".5", Decimal("0.5")),
            ("5.", Decimal("5")),
        ],
    )
    def test_parses_valid_tokens(self, token, expected):
        """Valid tokens should parse to the exact decimal value."""
        assert parse_decimal(token) == expected

    def test_trailing_zeros_are_trimmed(self):
        """Parsed values should be in their minimal representation."""
        assert str(parse_decimal("1.50")) == "1.5"
        assert str(parse_decimal("100.00")) == "100"

    def test_no_binary_float_drift(self):
        """0.1 + 0.2 style inputs should stay exact."""
        assert parse_decimal("0.1") + parse_decimal("0.2") == Decimal("0.3")

    def test_bound_is_inclusive(self):
        """Exactly 10**15 should be accepted."""
        assert parse_decimal("1,000,000,000,000,000") == MAX_MAGNITUDE
        assert parse_decimal("-1000000000000000") == -MAX_MAGNITUDE


class TestParseDecimalErrors:
    """Tests for rejected tokens."""

    @pytest.mark.parametrize(
        "token",
        ["5x0", "", ",", "--5", "+-5", "1.2.3", "12abc", "1e5", "NaN", "Infinity", "1_000", " 5", "."],
    )
    def test_malformed_tokens_raise_parse_error(self, token):
        """Anything other than a plain decimal number should be rejected."""
        with pytest.raises(ParseError):
            parse_decimal(token)

    def test_parse_error_names_cleaned_token(self):
        """Error message should quote the token after separator stripping."""
        with pytest.raises(ParseError, match="unable to parse '5x0' to a number"):
            parse_decimal("5x,0")

    def test_magnitude_over_bound_rejected(self):
        """Values just over 10**15 should raise MagnitudeError."""
        with pytest.raises(MagnitudeError) as exc:
            parse_decimal("1,000,000,000,000,000.01")
        assert str(exc.value) == (
            "magnitude of '1000000000000000.01' exceeds 1,000,000,000,000,000"
        )

    def test_negative_magnitude_over_bound_rejected(self):
        """The bound applies to absolute values."""
        with pytest.raises(MagnitudeError):
            parse_decimal("-1000000000000001")

    def test_long_fraction_just_over_bound_rejected(self):
        """Precision beyond 28 digits should not hide an out-of-range value."""
        with pytest.raises(MagnitudeError):
            parse_decimal("1000000000000000.000000000000000000001")

    def test_errors_share_base_class(self):
        """Both token errors should be InputErrors."""
        assert issubclass(ParseError, InputError)
        assert issubclass(MagnitudeError, InputError)


class TestNormalize:
    """Tests for decimal normalization."""

    def test_keeps_integers_plain(self):
        """Integral values should not switch to exponent form."""
        assert str(normalize(Decimal("1.1E+3"))) == "1100"
        assert str(normalize(Decimal("55.000"))) == "55"

    def test_does_not_round(self):
        """Long fractions beyond default precision should survive."""
        value = Decimal("0.123456789012345678901234567890123")
        assert normalize(value) == value

    def test_trims_zeros_past_any_precision(self):
        """Trailing zeros go, however many significant digits remain."""
        value = Decimal("1." + "0" * 80 + "1" + "0" * 5)
        assert normalize(value) == value
        assert str(normalize(value)) == "1." + "0" * 80 + "1"

    def test_zero_keeps_sign(self):
        """Negative zero should stay signed after trimming."""
        assert str(normalize(Decimal("-0.00"))) == "-0"


class TestLongTokens:
    """Tests for tokens longer than the default decimal precision."""

    def test_long_fraction_parsed_exactly(self):
        """A value with 60+ significant digits should not be rounded."""
        token = "50." + "0" * 60 + "1"
        assert parse_decimal(token) == Decimal(token)

    def test_long_integer_part_within_bound(self):
        """Long fractions on large values should stay exact too."""
        token = "999,999,999,999,999." + "9" * 70
        assert parse_decimal(token) == Decimal(token.replace(",", ""))
