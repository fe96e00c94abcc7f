"""Tests for price text parsing."""

import pytest

from trend_app.data.parsers import ParseError, is_price_text, parse_price_text
from trend_app.errors import MalformedDataError


class TestParsePriceText:

    @pytest.mark.parametrize("text, expected", [
        ("182.52", 182.52),
        ("1,234.56", 1234.56),
        ("  99 ", 99.0),
        ("12,345,678", 12345678.0),
    ])
    def test_valid_prices(self, text, expected):
        assert parse_price_text(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "-", "Dividend", "*Close price adjusted", "nan", "inf"])
    def test_invalid_prices(self, text):
        with pytest.raises(ParseError):
            parse_price_text(text)

    def test_parse_error_is_malformed_data(self):
        with pytest.raises(MalformedDataError):
            parse_price_text("n/a")

    def test_sign_is_not_checked_here(self):
        assert parse_price_text("-3.5") == -3.5

    def test_is_price_text(self):
        assert is_price_text("1,000.25")
        assert not is_price_text("Close*")
