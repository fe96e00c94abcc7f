"""Base classes for prediction delivery mechanisms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..logging.config import get_logger
from ..models.prediction import PredictionResult


class DeliveryStatus(Enum):
    """Prediction delivery status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    error: Optional[Exception] = None


class BasePredictionDelivery(ABC):
    """Base class for prediction delivery mechanisms."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = get_logger(f"trend_app.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def deliver(self, results: list[PredictionResult]) -> list[DeliveryResult]:
        """
        Deliver predictions to the configured destination.

        Args:
            results: Completed predictions

        Returns:
            One DeliveryResult per prediction
        """
        pass

    def _record(self, outcome: DeliveryResult) -> DeliveryResult:
        if outcome.status is DeliveryStatus.SUCCESS:
            self._delivery_count += 1
        else:
            self._error_count += 1
        return outcome

    def get_stats(self) -> dict[str, Any]:
        """Get delivery counters."""
        return {
            "name": self.name,
            "delivered": self._delivery_count,
            "errors": self._error_count,
        }
