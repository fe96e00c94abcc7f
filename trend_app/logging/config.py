"""
Centralized logging configuration for the trend prediction system.

All components log through structlog on top of the standard library logging
backend. The command line points the stream at stderr so that stdout only
carries the prediction itself.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination stream, stdout when omitted
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_prediction_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the prediction subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the prediction subsystem context
    """
    return structlog.get_logger(name, subsystem="prediction")


def log_prediction(
    logger: FilteringBoundLogger,
    ticker: Optional[str],
    offset: int,
    slope: float,
    intercept: float,
    sample_count: int,
    predicted_price: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed prediction with standardized fields.

    Args:
        logger: Structlog logger instance
        ticker: Instrument the prediction is for, None for raw values
        offset: Days beyond the last observed sample
        slope: Fitted slope
        intercept: Fitted intercept
        sample_count: Number of samples the line was fitted to
        predicted_price: Extrapolated price
        context: Additional context data
    """
    bound_logger = logger.bind(
        ticker=ticker,
        offset=offset,
        slope=slope,
        intercept=intercept,
        sample_count=sample_count,
        predicted_price=predicted_price,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("prediction")
