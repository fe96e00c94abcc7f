"""
Canonical data models for normalized price series.

A SampleSeries is the only shape in which prices reach the regression code:
immutable, oldest first, with contiguous zero-based time indices.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Union

from ..errors import InvalidValueError, MalformedDataError
from .validators import validate_price_value, validate_prices, validate_sample_count


class Orientation(Enum):
    """Chronological direction of the raw values a source delivers."""
    OLDEST_FIRST = "oldest_first"
    NEWEST_FIRST = "newest_first"

    @classmethod
    def parse(cls, value: Union["Orientation", str]) -> "Orientation":
        """Resolve an orientation from the enum or its configuration string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise MalformedDataError(
                f"Unknown orientation {value!r}",
                raw_data=str(value),
                expected_format="oldest_first | newest_first"
            ) from None


@dataclass(frozen=True)
class Sample:
    """One price observation at an integer time index."""
    x: int      # Time units since the earliest observation
    y: float    # Observed price


@dataclass(frozen=True)
class SampleSeries:
    """Validated, chronologically ordered price samples."""

    samples: tuple[Sample, ...]

    def __post_init__(self):
        validate_sample_count(self.samples)
        for i, sample in enumerate(self.samples):
            if sample.x != i:
                raise InvalidValueError(
                    f"Sample at position {i} has time index {sample.x}, expected {i}",
                    index=i,
                    value=sample.x
                )
            validate_price_value(sample.y, i)

    @classmethod
    def from_ordered_values(cls, values: Iterable[Any]) -> "SampleSeries":
        """
        Build a series assigning x = 0..n-1 in the order given.

        Raises:
            InsufficientDataError: If fewer than two values are given
            InvalidValueError: If any value is non-finite, negative or not a number
        """
        prices = validate_prices(list(values))
        return cls(samples=tuple(Sample(x=i, y=price) for i, price in enumerate(prices)))

    def reversed(self) -> "SampleSeries":
        """Return a new series with the last value at x=0 and the first at x=n-1."""
        return SampleSeries.from_ordered_values(reversed(self.ys))

    @property
    def xs(self) -> tuple[int, ...]:
        return tuple(sample.x for sample in self.samples)

    @property
    def ys(self) -> tuple[float, ...]:
        return tuple(sample.y for sample in self.samples)

    @property
    def last_index(self) -> int:
        """Time index of the most recent sample."""
        return len(self.samples) - 1

    @property
    def last_value(self) -> float:
        return self.samples[-1].y

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)


def build_series(values: Iterable[Any],
                 orientation: Union[Orientation, str] = Orientation.OLDEST_FIRST) -> SampleSeries:
    """
    Build an oldest-first series from values delivered in the given orientation.

    Args:
        values: Raw ordered prices
        orientation: Chronological direction of ``values``

    Returns:
        SampleSeries ordered oldest first
    """
    orientation = Orientation.parse(orientation)
    series = SampleSeries.from_ordered_values(values)

    if orientation is Orientation.NEWEST_FIRST:
        return series.reversed()
    return series
