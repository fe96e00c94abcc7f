"""
Command line entry point.

    trend-app TICKER DAYS MODE

MODE 0 scrapes the live history page, MODE 1 reads ``<TICKER>.csv``.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

from .config.loader import ConfigLoader
from .config.validation import LOG_LEVELS, ConfigValidator
from .delivery.base import DeliveryStatus
from .delivery.stdout_delivery import StdoutPredictionDelivery
from .engine import PredictionEngine
from .errors import (
    ConfigurationError,
    DataQualityError,
    PredictionRequestError,
    SourceError,
    SystemFailureError,
)
from .logging.config import configure_logging

EXIT_OK = 0
EXIT_FAILURE = 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trend-app",
        description="Estimate a future closing price by extrapolating a least-squares trend line.",
    )
    parser.add_argument("ticker", help="Instrument ticker, e.g. AAPL")
    parser.add_argument("days", type=int, help="Days past the last close to predict (0 = last session)")
    parser.add_argument("mode", type=int, choices=(0, 1), help="0 = scrape live history, 1 = read <ticker>.csv")
    parser.add_argument("--config-dir", default=None, help="Directory containing instruments.yaml")
    parser.add_argument("--data-dir", default=None, help="Directory holding downloaded CSV files")
    parser.add_argument("--format", choices=("pretty", "json"), default=None, help="Output format")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="Logging level (default WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into configuration overrides."""
    overrides: dict[str, Any] = {}
    if args.data_dir:
        overrides.setdefault("csv", {})["data_dir"] = args.data_dir
    if args.format:
        overrides.setdefault("output", {})["format"] = args.format
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.log_json:
        overrides.setdefault("logging", {})["format_json"] = True
    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    overrides = overrides_from_args(args)

    # configure_logging reads the merged config, so it has to be valid first
    loader = ConfigLoader.create(Path(args.config_dir) if args.config_dir else None)
    try:
        config = loader.merge_config(args.ticker, overrides)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    errors = ConfigValidator.validate_config(config)
    if errors:
        for err in errors:
            print(f"error: {err.field}: {err.message} (got: {err.value!r})", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(
        level=config["logging"]["level"],
        format_json=config["logging"]["format_json"],
        stream=sys.stderr,
    )

    try:
        engine = PredictionEngine(config_dir=args.config_dir, overrides=overrides)
        result = engine.predict_ticker(args.ticker, args.days, args.mode)
    except (SourceError, DataQualityError, SystemFailureError, PredictionRequestError) as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    delivery = StdoutPredictionDelivery(config["output"])
    outcomes = delivery.deliver([result])
    if any(outcome.status is not DeliveryStatus.SUCCESS for outcome in outcomes):
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
