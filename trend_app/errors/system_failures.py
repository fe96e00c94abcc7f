"""
System failure error classifications.

These exceptions signal a broken invariant or an unusable configuration and
are never retried.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DegenerateSeriesError(SystemFailureError):
    """No finite line fits the series: zero x variance or float overflow."""

    def __init__(self, message: str, sample_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.sample_count = sample_count


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
