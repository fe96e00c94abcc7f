"""Data model for a completed prediction"""

from dataclasses import dataclass
from typing import Any, Optional

from .linear import LinearModel


@dataclass(frozen=True)
class PredictionResult:
    """Outcome of one prediction request"""
    offset: int                      # Days beyond the last observed sample
    predicted_price: float
    model: LinearModel
    sample_count: int
    evaluated_at: int                # x the line was evaluated at
    last_observed: float             # Most recent observed price
    source: str = "values"           # Adapter name, or "values" for raw input
    ticker: Optional[str] = None

    @property
    def change(self) -> float:
        """Predicted move relative to the last observed price"""
        return self.predicted_price - self.last_observed

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation used for JSON output"""
        return {
            "ticker": self.ticker,
            "source": self.source,
            "offset": self.offset,
            "predicted_price": self.predicted_price,
            "slope": self.model.slope,
            "intercept": self.model.intercept,
            "sample_count": self.sample_count,
            "evaluated_at": self.evaluated_at,
            "last_observed": self.last_observed,
            "change": self.change,
        }
