"""
Parsers for price text found in scraped tables and CSV cells.
"""

import math

from ..errors import MalformedDataError


class ParseError(MalformedDataError):
    """Raised when a cell does not hold a numeric price."""
    pass


def parse_price_text(text: str) -> float:
    """
    Parse a price cell such as ``"1,234.56"`` into a float.

    Thousands separators and surrounding whitespace are removed. Sign and
    range checks are left to the series validators.

    Raises:
        ParseError: If the text is empty or not numeric
    """
    if text is None:
        raise ParseError("Price text is missing", expected_format="decimal number")

    cleaned = text.strip().replace(",", "")
    if not cleaned:
        raise ParseError("Price text is empty", raw_data=text, expected_format="decimal number")

    try:
        price = float(cleaned)
    except ValueError:
        raise ParseError(
            f"Not a numeric price: {text!r}",
            raw_data=text,
            expected_format="decimal number"
        ) from None

    # float() accepts "nan" and "inf"; treat them as text, not prices
    if not math.isfinite(price):
        raise ParseError(f"Not a numeric price: {text!r}", raw_data=text, expected_format="decimal number")

    return price


def is_price_text(text: str) -> bool:
    """Return True when ``text`` parses as a price."""
    try:
        parse_price_text(text)
    except ParseError:
        return False
    return True
