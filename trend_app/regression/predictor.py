"""Extrapolation of a fitted line past the last observed sample"""

import math
from typing import Any, Iterable

from ..data.models import SampleSeries
from ..errors import InvalidOffsetError
from ..models.linear import LinearModel
from .linear_fit import fit


def validate_offset(offset: Any) -> int:
    """
    Check that ``offset`` is a non-negative integer

    Raises:
        InvalidOffsetError: If the offset is negative or not an integer
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise InvalidOffsetError(
            f"Offset must be an integer number of time units, got {offset!r}",
            offset=offset
        )
    if offset < 0:
        raise InvalidOffsetError(
            f"Offset must be >= 0, predicting into the past is not supported (got {offset})",
            offset=offset
        )
    return offset


def evaluate_offset(model: LinearModel, series: SampleSeries, offset: int) -> float:
    """
    Evaluate an already fitted model ``offset`` steps past the last sample

    Raises:
        InvalidOffsetError: If the offset is invalid or so large that the
            extrapolated value is not a finite float
    """
    x = series.last_index + validate_offset(offset)
    try:
        value = model.evaluate(x)
    except OverflowError as e:
        raise InvalidOffsetError(
            "Offset is too large to evaluate as a float",
            offset=offset
        ) from e

    if not math.isfinite(value):
        raise InvalidOffsetError(
            f"Prediction at offset {offset} overflowed the float range",
            offset=offset
        )
    return value


def predict(series: SampleSeries, offset: int) -> float:
    """
    Predict the value ``offset`` time units after the last sample

    Offset 0 evaluates the fitted line at the last observed index.

    Raises:
        InvalidOffsetError: If the offset is negative or not an integer
    """
    validate_offset(offset)
    return evaluate_offset(fit(series), series, offset)


def predict_many(series: SampleSeries, offsets: Iterable[int]) -> list[float]:
    """Predict several offsets from a single fit of ``series``"""
    offsets = [validate_offset(offset) for offset in offsets]
    model = fit(series)
    return [evaluate_offset(model, series, offset) for offset in offsets]
