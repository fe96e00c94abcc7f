"""
Source adapter error classifications.

Raised by the scrape and CSV sources before any price reaches the core, so a
caller can tell an unreachable or unreadable source apart from bad data.
"""

from typing import Any, Dict, Optional


class SourceError(Exception):
    """Base class for price source failures."""

    def __init__(self, message: str, source: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.source = source
        self.context = context or {}
        self.recoverable = False


class SourceUnavailableError(SourceError):
    """The remote page or local file could not be read."""

    def __init__(self, message: str, target: Optional[str] = None,
                 attempts: int = 1, **kwargs):
        super().__init__(message, **kwargs)
        self.target = target
        self.attempts = attempts
        self.recoverable = True


class MalformedSourceError(SourceError):
    """The source was read but its content does not have the expected shape."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.raw_data = raw_data
