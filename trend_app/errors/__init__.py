"""
Error classification for price series processing and prediction.

Core errors (data quality, system failures, request errors) are raised by the
series, fit and predictor. Source errors are raised by the adapters that load
prices and never by the core.
"""

from .data_quality import (
    DataQualityError,
    InsufficientDataError,
    InvalidValueError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    DegenerateSeriesError,
    ConfigurationError,
)
from .requests import (
    PredictionRequestError,
    InvalidOffsetError,
)
from .source_failures import (
    SourceError,
    SourceUnavailableError,
    MalformedSourceError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InsufficientDataError",
    "InvalidValueError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "DegenerateSeriesError",
    "ConfigurationError",
    # Request Errors
    "PredictionRequestError",
    "InvalidOffsetError",
    # Source Errors
    "SourceError",
    "SourceUnavailableError",
    "MalformedSourceError",
]
