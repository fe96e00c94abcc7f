"""
Validation rules for raw price values.

A price series only accepts finite, non-negative real numbers and needs at
least two of them to define a line.
"""

import math
from numbers import Real
from typing import Any, Sequence

from ..errors import InsufficientDataError, InvalidValueError

MIN_SAMPLES = 2


def validate_price_value(value: Any, index: int) -> float:
    """
    Validate a single price and return it as a float.

    Args:
        value: Raw price value
        index: Position of the value in the input sequence

    Returns:
        The price as a float

    Raises:
        InvalidValueError: If the value is not a finite, non-negative real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(
            f"Price at index {index} must be a real number, got {type(value).__name__}: {value!r}",
            index=index,
            value=value
        )

    price = float(value)
    if not math.isfinite(price):
        raise InvalidValueError(
            f"Price at index {index} must be finite, got {price}",
            index=index,
            value=value
        )

    if price < 0:
        raise InvalidValueError(
            f"Price at index {index} must be non-negative, got {price}",
            index=index,
            value=value
        )

    return price


def validate_sample_count(values: Sequence[Any]) -> None:
    """
    Ensure there are enough values to fit a line.

    Raises:
        InsufficientDataError: If fewer than two values are given
    """
    if len(values) < MIN_SAMPLES:
        raise InsufficientDataError(
            f"At least {MIN_SAMPLES} prices are required to fit a line, got {len(values)}",
            required_count=MIN_SAMPLES,
            available_count=len(values)
        )


def validate_prices(values: Sequence[Any]) -> list[float]:
    """Validate a full sequence of prices, preserving order."""
    validate_sample_count(values)
    return [validate_price_value(value, i) for i, value in enumerate(values)]
