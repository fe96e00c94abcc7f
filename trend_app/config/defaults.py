"""Default configuration parameters for the trend prediction system."""

from dataclasses import dataclass

YAHOO_HISTORY_URL = (
    "https://finance.yahoo.com/quote/{ticker}/history"
    "?&interval=1d&filter=history&frequency=1d"
)


@dataclass(frozen=True)
class ScrapeParams:
    """Live history page scraping parameters."""
    url_template: str = YAHOO_HISTORY_URL
    close_column_index: int = 4                      # Fifth cell of each row
    header_rows: int = 1                             # Rows skipped before data
    orientation: str = "newest_first"                # Table lists today first
    timeout_seconds: int = 30
    retry_attempts: int = 3
    retry_delay_seconds: float = 1.0
    user_agent: str = "Mozilla/5.0 (compatible; trend-app/0.1)"


@dataclass(frozen=True)
class CsvParams:
    """Downloaded CSV history parameters."""
    data_dir: str = "."
    file_suffix: str = ".csv"
    close_column: str = "Close"
    delimiter: str = ","
    orientation: str = "oldest_first"                # File order is chronological
    encoding: str = "utf-8-sig"                      # Tolerates a byte order mark


@dataclass(frozen=True)
class OutputParams:
    """Prediction output parameters."""
    format: str = "pretty"                           # pretty, json
    decimals: int = 2
    include_timestamp: bool = False


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters used by the command line."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    scrape: ScrapeParams
    csv: CsvParams
    output: OutputParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        scrape=ScrapeParams(),
        csv=CsvParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
