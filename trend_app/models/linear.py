"""Fitted line model"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinearModel:
    """A fitted line y = slope * x + intercept"""
    slope: float
    intercept: float

    def evaluate(self, x: float) -> float:
        """Value of the line at ``x``"""
        return self.slope * x + self.intercept
