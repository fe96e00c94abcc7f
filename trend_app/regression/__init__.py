"""Least-squares line fitting and extrapolation"""

from .linear_fit import fit
from .predictor import predict, predict_many

__all__ = ["fit", "predict", "predict_many"]
