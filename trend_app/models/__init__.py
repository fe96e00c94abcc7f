"""Result models for fitted lines and predictions."""

from .linear import LinearModel
from .prediction import PredictionResult

__all__ = ["LinearModel", "PredictionResult"]
