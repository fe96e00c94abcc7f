"""
Logging configuration and utilities for the trend prediction system.
"""
from .config import configure_logging, get_logger, get_prediction_logger, log_prediction

__all__ = ["configure_logging", "get_logger", "get_prediction_logger", "log_prediction"]
