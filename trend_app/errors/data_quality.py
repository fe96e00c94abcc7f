"""
Data quality error classifications for price series processing.

These exceptions describe problems with the price values themselves, raised
while a series is being built or fitted.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for price data quality issues."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InsufficientDataError(DataQualityError):
    """Not enough samples to fit a line."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class InvalidValueError(DataQualityError):
    """A price is non-finite, negative, or not a real number."""

    def __init__(self, message: str, index: Optional[int] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.value = value


class MalformedDataError(DataQualityError):
    """A request parameter is in an unrecognized format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
