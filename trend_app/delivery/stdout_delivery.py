"""Standard output prediction delivery mechanism."""

import json
import sys
from datetime import datetime, timezone
from typing import IO, Any, Optional

from ..models.prediction import PredictionResult
from .base import BasePredictionDelivery, DeliveryResult, DeliveryStatus


class StdoutPredictionDelivery(BasePredictionDelivery):
    """Prints predictions as a sentence or as JSON."""

    def __init__(self, config: dict[str, Any], stream: Optional[IO[str]] = None):
        super().__init__("stdout", config)
        self.format = config.get("format", "pretty")
        self.decimals = config.get("decimals", 2)
        self.include_timestamp = config.get("include_timestamp", False)
        self.stream = stream

    def deliver(self, results: list[PredictionResult]) -> list[DeliveryResult]:
        """Print each prediction on its own line."""
        outcomes = []
        stream = self.stream or sys.stdout

        for result in results:
            try:
                print(self.format_result(result), file=stream, flush=True)

                self.logger.debug("Prediction printed", ticker=result.ticker, offset=result.offset)
                outcomes.append(self._record(DeliveryResult(
                    status=DeliveryStatus.SUCCESS,
                    message="Printed to stdout"
                )))

            except (OSError, ValueError) as e:
                self.logger.error(
                    "Failed to print prediction",
                    ticker=result.ticker,
                    error=str(e)
                )
                outcomes.append(self._record(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Stdout error: {e}",
                    error=e
                )))

        return outcomes

    def format_result(self, result: PredictionResult) -> str:
        """Format a prediction for output."""
        if self.format == "json":
            payload = result.to_dict()
            if self.include_timestamp:
                payload["stdout_timestamp"] = datetime.now(timezone.utc).isoformat()
            return json.dumps(payload)

        return (
            f"The price {result.offset} days from now should be about: "
            f"${result.predicted_price:.{self.decimals}f}"
        )
