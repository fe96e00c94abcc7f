"""
Price sources producing sample series for a ticker.

Mode 0 scrapes the live history page, mode 1 reads a local CSV download.
"""

from enum import Enum
from typing import Any, Union

from ..errors import MalformedDataError
from .base import BasePriceSource
from .csv_source import CsvPriceSource
from .scrape_source import ScrapePriceSource, extract_close_prices


class SourceMode(Enum):
    """Source selector accepted on the command line."""
    LIVE = 0
    FILE = 1

    @classmethod
    def parse(cls, value: Union["SourceMode", int]) -> "SourceMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise MalformedDataError(
                f"Unknown source mode {value!r}",
                raw_data=str(value),
                expected_format="0 (live) or 1 (file)"
            ) from None


def create_price_source(mode: Union[SourceMode, int], config: dict[str, Any]) -> BasePriceSource:
    """
    Create the price source for ``mode`` from merged configuration.

    Args:
        mode: SourceMode or its integer flag
        config: Merged configuration with ``scrape`` and ``csv`` sections
    """
    mode = SourceMode.parse(mode)

    if mode is SourceMode.LIVE:
        return ScrapePriceSource.from_config(config.get("scrape", {}))
    return CsvPriceSource.from_config(config.get("csv", {}))


__all__ = [
    "BasePriceSource",
    "CsvPriceSource",
    "ScrapePriceSource",
    "SourceMode",
    "create_price_source",
    "extract_close_prices",
]
