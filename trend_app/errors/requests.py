"""Errors raised for invalid prediction requests."""

from typing import Any, Dict, Optional


class PredictionRequestError(Exception):
    """Base class for requests the predictor refuses to evaluate."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidOffsetError(PredictionRequestError):
    """Offset is negative, not an integer or past the float range."""

    def __init__(self, message: str, offset: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.offset = offset
