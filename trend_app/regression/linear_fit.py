"""Ordinary least squares line fitting"""

import math

from ..data.models import SampleSeries
from ..data.validators import MIN_SAMPLES
from ..errors import DegenerateSeriesError, InsufficientDataError
from ..models.linear import LinearModel


def fit(series: SampleSeries) -> LinearModel:
    """
    Fit the line of best fit through a series using closed-form OLS

    slope = Σ(x - x̄)(y - ȳ) / Σ(x - x̄)²
    intercept = ȳ - slope * x̄

    Args:
        series: Validated sample series

    Returns:
        LinearModel with the fitted slope and intercept

    Raises:
        InsufficientDataError: If the series has fewer than two samples
        DegenerateSeriesError: If all x values are equal or the sums
            overflow the float range
    """
    n = len(series)
    if n < MIN_SAMPLES:
        raise InsufficientDataError(
            f"At least {MIN_SAMPLES} samples are required to fit a line, got {n}",
            required_count=MIN_SAMPLES,
            available_count=n
        )

    x_mean = sum(sample.x for sample in series) / n
    y_mean = sum(sample.y for sample in series) / n

    numerator = 0.0
    denominator = 0.0
    for sample in series:
        dx = sample.x - x_mean
        numerator += dx * (sample.y - y_mean)
        denominator += dx * dx

    if denominator == 0:
        raise DegenerateSeriesError(
            f"Time indices of all {n} samples are identical, slope is undefined",
            sample_count=n
        )

    slope = numerator / denominator
    intercept = y_mean - slope * x_mean
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateSeriesError(
            f"Fit of {n} samples overflowed the float range (slope={slope}, intercept={intercept})",
            sample_count=n
        )

    return LinearModel(slope=slope, intercept=intercept)
