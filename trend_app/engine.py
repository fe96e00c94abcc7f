"""
Main prediction engine coordinator.

Wires a price source to the series builder, the least-squares fit and the
predictor, logging each step. Errors from any stage are logged and re-raised
unchanged.
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Union


from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Orientation, SampleSeries, build_series
from .errors import (
    ConfigurationError,
    DataQualityError,
    PredictionRequestError,
    SourceError,
    SystemFailureError,
)
from .logging.config import get_logger, get_prediction_logger, log_prediction
from .models.prediction import PredictionResult
from .regression.linear_fit import fit
from .regression.predictor import evaluate_offset, validate_offset
from .sources import SourceMode, create_price_source

logger = get_logger(__name__)
prediction_logger = get_prediction_logger(__name__)


class PredictionEngine:
    """
    Coordinator for the price prediction pipeline:
    Source → SampleSeries → LinearFit → Predictor → PredictionResult
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the engine.

        Args:
            config_dir: Directory holding ``instruments.yaml``
            overrides: Per-request configuration, highest precedence

        Raises:
            ConfigurationError: If the merged default configuration is invalid
        """
        self.logger = logger
        self.prediction_logger = prediction_logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.overrides = overrides or {}
        self.config = self.config_for()

        self.logger.debug("Prediction engine initialized", config_dir=str(self.config_loader.config_dir))

    def config_for(self, ticker: Optional[str] = None) -> dict[str, Any]:
        """Merged and validated configuration for ``ticker``."""
        config = self.config_loader.merge_config(ticker, self.overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            messages = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
            self.logger.error("Configuration validation failed", ticker=ticker, errors=messages)
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(messages),
                errors=errors
            )

        return config

    def predict_series(self, series: SampleSeries, offset: int, *,
                       ticker: Optional[str] = None, source: str = "values") -> PredictionResult:
        """Fit ``series`` and evaluate it ``offset`` steps past the last sample."""
        validate_offset(offset)
        model = fit(series)
        predicted_price = evaluate_offset(model, series, offset)

        log_prediction(
            self.prediction_logger,
            ticker=ticker,
            offset=offset,
            slope=model.slope,
            intercept=model.intercept,
            sample_count=len(series),
            predicted_price=predicted_price,
            context={"source": source}
        )

        return PredictionResult(
            offset=offset,
            predicted_price=predicted_price,
            model=model,
            sample_count=len(series),
            evaluated_at=series.last_index + offset,
            last_observed=series.last_value,
            source=source,
            ticker=ticker,
        )

    def predict_values(self, values: Iterable[Any], offset: int,
                       orientation: Union[Orientation, str] = Orientation.OLDEST_FIRST,
                       ticker: Optional[str] = None) -> PredictionResult:
        """
        Predict from prices already in memory.

        Args:
            values: Ordered prices
            offset: Time units past the last sample
            orientation: Chronological direction of ``values``
            ticker: Optional label carried into the result
        """
        try:
            series = build_series(values, orientation)
            return self.predict_series(series, offset, ticker=ticker)
        except (DataQualityError, SystemFailureError, PredictionRequestError) as e:
            self.logger.error("Prediction failed", ticker=ticker, offset=offset,
                              error_type=type(e).__name__, error=str(e))
            raise

    def predict_ticker(self, ticker: str, offset: int,
                       mode: Union[SourceMode, int] = SourceMode.LIVE) -> PredictionResult:
        """
        Load prices for ``ticker`` from the source selected by ``mode`` and predict.

        Raises:
            SourceError: If the source cannot be read
            DataQualityError: If the loaded prices do not form a valid series
            InvalidOffsetError: If the offset is negative
        """
        try:
            validate_offset(offset)
            source = create_price_source(mode, self.config_for(ticker))

            self.logger.info("Loading prices", ticker=ticker, **source.describe())
            series = source.load_series(ticker)

            return self.predict_series(series, offset, ticker=ticker, source=source.name)

        except (SourceError, DataQualityError, SystemFailureError, PredictionRequestError) as e:
            self.logger.error("Prediction failed", ticker=ticker, offset=offset,
                              error_type=type(e).__name__, error=str(e))
            raise
