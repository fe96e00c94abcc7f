"""Base classes for price sources."""

from abc import ABC, abstractmethod
from typing import Union

from ..data.models import Orientation, SampleSeries, build_series
from ..logging.config import get_logger


class BasePriceSource(ABC):
    """
    Base class for adapters that load closing prices for a ticker.

    Subclasses only read raw values; building and validating the series is
    shared so that every source goes through the same construction rules.
    """

    name = "base"

    def __init__(self, orientation: Union[Orientation, str]):
        self.orientation = Orientation.parse(orientation)
        self.logger = get_logger(f"trend_app.sources.{self.name}")

    @abstractmethod
    def load_values(self, ticker: str) -> list[float]:
        """
        Load raw closing prices for a ticker in the source's own order.

        Args:
            ticker: Instrument identifier

        Returns:
            Prices ordered according to ``self.orientation``

        Raises:
            SourceError: If the source cannot be read or parsed
        """
        pass

    def load_series(self, ticker: str) -> SampleSeries:
        """Load prices for a ticker and build an oldest-first series."""
        values = self.load_values(ticker)

        self.logger.debug(
            "Loaded raw prices",
            source=self.name,
            ticker=ticker,
            count=len(values),
            orientation=self.orientation.value
        )

        return build_series(values, self.orientation)

    def describe(self) -> dict[str, str]:
        """Summary used in logs."""
        return {"source": self.name, "orientation": self.orientation.value}
