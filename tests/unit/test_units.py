"""Unit tests for amount conversion helpers."""

from decimal import Decimal

import pytest

from miner_sdk.core.exceptions import ValidationError
from miner_sdk.core.units import format_percentage, format_token_amount, parse_token_amount, to_int


class TestFormatTokenAmount:
    """Test format_token_amount."""

    @pytest.mark.parametrize("amount,expected", [
        (10 ** 18, "1.0"),
        (15 * 10 ** 17, "1.5"),
        (0, "0.0"),
        (1, "0.000000000000000001"),
        (str(123 * 10 ** 18), "123.0"),
        (-(10 ** 18), "-1.0"),
    ])
    def test_format(self, amount, expected):
        assert format_token_amount(amount) == expected

    def test_custom_decimals(self):
        assert format_token_amount(1234567, decimals=6) == "1.234567"
        assert format_token_amount(250000000, decimals=8) == "2.5"

    def test_uint256_max(self):
        max_uint = 2 ** 256 - 1
        formatted = format_token_amount(max_uint)
        assert parse_token_amount(formatted) == max_uint


class TestParseTokenAmount:
    """Test parse_token_amount."""

    @pytest.mark.parametrize("amount,expected", [
        ("1", 10 ** 18),
        ("1.5", 15 * 10 ** 17),
        ("0.000000000000000001", 1),
        (" 2 ", 2 * 10 ** 18),
        (3, 3 * 10 ** 18),
        (Decimal("0.25"), 25 * 10 ** 16),
    ])
    def test_parse(self, amount, expected):
        assert parse_token_amount(amount) == expected

    def test_custom_decimals(self):
        assert parse_token_amount("1.5", decimals=6) == 1500000

    @pytest.mark.parametrize("amount", ["", "abc", "1.2.3", "NaN", "Infinity"])
    def test_invalid(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            parse_token_amount(amount)
        assert exc_info.value.field == "amount"

    def test_too_many_decimals(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_token_amount("0.0000000000000000001")
        assert "more than 18 decimal places" in str(exc_info.value)


class TestFormatPercentage:
    """Test format_percentage."""

    def test_basis_points(self):
        assert format_percentage(1000) == "10.00%"
        assert format_percentage(15000) == "150.00%"

    def test_custom_scale(self):
        assert format_percentage(5, scale=100) == "5.00%"


class TestToInt:
    """Test to_int."""

    @pytest.mark.parametrize("value,expected", [
        (5, 5),
        ("42", 42),
        (" 7 ", 7),
        ("-3", -3),
        (Decimal("10"), 10),
        (str(2 ** 256 - 1), 2 ** 256 - 1),
    ])
    def test_convert(self, value, expected):
        assert to_int(value) == expected

    @pytest.mark.parametrize("value", ["1.5", "abc", "", Decimal("0.1"), "NaN", None, True, 2.5])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError) as exc_info:
            to_int(value, "price")

        assert exc_info.value.field == "price"
        assert exc_info.value.value == value

    def test_parse_token_amount_reports_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_token_amount("abc", field="amounts")
        assert exc_info.value.field == "amounts"
