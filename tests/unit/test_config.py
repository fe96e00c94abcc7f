"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from trend_app.config.defaults import YAHOO_HISTORY_URL, get_default_config
from trend_app.config.loader import ConfigLoader
from trend_app.config.validation import ConfigValidator
from trend_app.errors import ConfigurationError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    (tmp_path / "instruments.yaml").write_text(
        "instruments:\n"
        "  BRK-A:\n"
        "    output:\n"
        "      decimals: 0\n"
        "  ACME:\n"
        "    csv:\n"
        "      orientation: newest_first\n"
        "      close_column: Adj Close\n",
        encoding="utf-8",
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.scrape.url_template == YAHOO_HISTORY_URL
        assert config.scrape.close_column_index == 4
        assert config.scrape.orientation == "newest_first"
        assert config.csv.close_column == "Close"
        assert config.csv.orientation == "oldest_first"
        assert config.output.format == "pretty"
        assert config.output.decimals == 2

    def test_defaults_are_valid(self) -> None:
        loader = ConfigLoader.create(Path("/nonexistent"))
        assert ConfigValidator.validate_config(loader.merge_config()) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config("UNKNOWN")

        assert config["csv"]["close_column"] == "Close"
        assert config["scrape"]["retry_attempts"] == 3

    def test_ticker_overrides(self, config_dir: Path) -> None:
        config = ConfigLoader.create(config_dir).merge_config("ACME")

        assert config["csv"]["orientation"] == "newest_first"
        assert config["csv"]["close_column"] == "Adj Close"
        # Untouched keys keep their defaults
        assert config["csv"]["file_suffix"] == ".csv"
        assert config["output"]["decimals"] == 2

    def test_request_overrides_win(self, config_dir: Path) -> None:
        config = ConfigLoader.create(config_dir).merge_config(
            "BRK-A", {"output": {"decimals": 3, "format": "json"}}
        )

        assert config["output"]["decimals"] == 3
        assert config["output"]["format"] == "json"

    def test_empty_instruments_file(self, tmp_path: Path) -> None:
        (tmp_path / "instruments.yaml").write_text("", encoding="utf-8")
        assert ConfigLoader.create(tmp_path).load_instrument_config("ACME") == {}

    def test_read_instruments_lists_tickers(self, config_dir: Path) -> None:
        assert sorted(ConfigLoader.create(config_dir).read_instruments()) == ["ACME", "BRK-A"]

    def test_entry_without_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "instruments.yaml").write_text("instruments:\n  ACME:\n", encoding="utf-8")
        assert ConfigLoader.create(tmp_path).load_instrument_config("ACME") == {}

    def test_invalid_yaml_is_configuration_error(self, tmp_path: Path) -> None:
        (tmp_path / "instruments.yaml").write_text("instruments:\n  ACME: [1, 2\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Cannot load") as exc_info:
            ConfigLoader.create(tmp_path).merge_config("ACME")

        assert exc_info.value.errors[0].field == "instruments"

    @pytest.mark.parametrize("document, field", [
        ("- ACME\n", "instruments"),
        ("instruments: [ACME]\n", "instruments"),
        ("instruments:\n  ACME: [1, 2]\n", "instruments.ACME"),
        ("instruments:\n  ACME:\n    output: 3\n", "instruments.ACME.output"),
        ("instruments:\n  ACME:\n    outptu:\n      decimals: 3\n", "instruments.ACME.outptu"),
    ])
    def test_misshapen_instruments_rejected(self, tmp_path: Path, document: str, field: str) -> None:
        (tmp_path / "instruments.yaml").write_text(document, encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).merge_config("OTHER")

        assert exc_info.value.errors[0].field == field

    def test_misshapen_overrides_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="overrides.output must be a mapping"):
            ConfigLoader.create(tmp_path).merge_config("ACME", {"output": "json"})


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_scrape_params(self) -> None:
        params = {"close_column_index": 4, "timeout_seconds": 10, "orientation": "newest_first"}
        assert ConfigValidator.validate_scrape_params(params) == []

    def test_url_template_needs_placeholder(self) -> None:
        errors = ConfigValidator.validate_scrape_params({"url_template": "https://example.test/history"})
        assert len(errors) == 1
        assert errors[0].field == "scrape.url_template"

    @pytest.mark.parametrize("field, value", [
        ("close_column_index", -1),
        ("close_column_index", True),
        ("header_rows", 1.5),
        ("timeout_seconds", 0),
        ("retry_attempts", 0),
        ("retry_delay_seconds", -0.1),
        ("orientation", "sideways"),
    ])
    def test_invalid_scrape_params(self, field, value) -> None:
        errors = ConfigValidator.validate_scrape_params({field: value})
        assert [err.field for err in errors] == [f"scrape.{field}"]
        assert errors[0].value == value

    @pytest.mark.parametrize("field, value", [
        ("close_column", ""),
        ("delimiter", ",;"),
        ("data_dir", None),
        ("orientation", "latest"),
    ])
    def test_invalid_csv_params(self, field, value) -> None:
        errors = ConfigValidator.validate_csv_params({field: value})
        assert [err.field for err in errors] == [f"csv.{field}"]

    def test_invalid_output_params(self) -> None:
        errors = ConfigValidator.validate_output_params({"format": "xml", "decimals": -2})
        assert {err.field for err in errors} == {"output.format", "output.decimals"}

    def test_invalid_logging_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert errors[0].field == "logging.level"

    def test_validate_config_collects_all_sections(self) -> None:
        config = {
            "scrape": {"retry_attempts": 0},
            "csv": {"close_column": ""},
            "output": {"format": "xml"},
            "logging": {"level": "LOUD"},
        }
        assert len(ConfigValidator.validate_config(config)) == 4
