"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

ORIENTATIONS = ("oldest_first", "newest_first")
OUTPUT_FORMATS = ("pretty", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_scrape_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate live scraping parameters."""
        errors = []

        if "url_template" in params:
            value = params["url_template"]
            if not isinstance(value, str) or "{ticker}" not in value:
                errors.append(ValidationError(
                    field="scrape.url_template",
                    message="Must be a string containing a {ticker} placeholder",
                    value=value
                ))

        if "close_column_index" in params:
            value = params["close_column_index"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="scrape.close_column_index",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "header_rows" in params:
            value = params["header_rows"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="scrape.header_rows",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="scrape.timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "retry_attempts" in params:
            value = params["retry_attempts"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="scrape.retry_attempts",
                    message="Must be a positive integer",
                    value=value
                ))

        if "retry_delay_seconds" in params:
            value = params["retry_delay_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="scrape.retry_delay_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        errors.extend(ConfigValidator._validate_orientation("scrape", params))
        return errors

    @staticmethod
    def validate_csv_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate CSV file parameters."""
        errors = []

        if "close_column" in params:
            value = params["close_column"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="csv.close_column",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="csv.delimiter",
                    message="Must be a single character",
                    value=value
                ))

        if "data_dir" in params:
            value = params["data_dir"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="csv.data_dir",
                    message="Must be a non-empty path string",
                    value=value
                ))

        errors.extend(ConfigValidator._validate_orientation("csv", params))
        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output formatting parameters."""
        errors = []

        if "format" in params:
            value = params["format"]
            if value not in OUTPUT_FORMATS:
                errors.append(ValidationError(
                    field="output.format",
                    message=f"Must be one of {', '.join(OUTPUT_FORMATS)}",
                    value=value
                ))

        if "decimals" in params:
            value = params["decimals"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="output.decimals",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def _validate_orientation(section: str, params: dict[str, Any]) -> list[ValidationError]:
        if "orientation" in params and params["orientation"] not in ORIENTATIONS:
            return [ValidationError(
                field=f"{section}.orientation",
                message=f"Must be one of {', '.join(ORIENTATIONS)}",
                value=params["orientation"]
            )]
        return []

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "scrape" in config:
            errors.extend(ConfigValidator.validate_scrape_params(config["scrape"]))

        if "csv" in config:
            errors.extend(ConfigValidator.validate_csv_params(config["csv"]))

        if "output" in config:
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
