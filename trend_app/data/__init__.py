"""
Price series data model and ingestion helpers.

Builds validated, immutable sample series from ordered price values and
parses price text delivered by the source adapters.
"""

from .models import Orientation, Sample, SampleSeries, build_series

__all__ = ["Orientation", "Sample", "SampleSeries", "build_series"]
