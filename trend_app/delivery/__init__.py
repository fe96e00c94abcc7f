"""Prediction output mechanisms."""

from .base import BasePredictionDelivery, DeliveryResult, DeliveryStatus
from .stdout_delivery import StdoutPredictionDelivery

__all__ = [
    "BasePredictionDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "StdoutPredictionDelivery",
]
