"""
Configuration loading with 3-tier parameter precedence.

Every layer has the same two-level shape as :class:`DefaultConfig`: a mapping
of section name (``scrape``, ``csv``, ``output``, ``logging``) to a mapping of
parameters. Layers are merged section by section, later layers win.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ValidationError

INSTRUMENTS_FILE = "instruments.yaml"

Layer = dict[str, dict[str, Any]]


@dataclass(frozen=True)
class ConfigLoader:
    """Reads ``instruments.yaml`` and merges it between defaults and request overrides."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def instruments_path(self) -> Path:
        return self.config_dir / INSTRUMENTS_FILE

    @property
    def sections(self) -> tuple[str, ...]:
        return tuple(asdict(self.defaults))

    def read_instruments(self) -> dict[str, Layer]:
        """
        Read the per-ticker section of ``instruments.yaml``.

        A missing or empty file means no ticker has overrides.

        Raises:
            ConfigurationError: If the file is unreadable, is not valid YAML,
                or any entry is not a mapping of known sections
        """
        path = self.instruments_path
        if not path.exists():
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise self._error(f"Cannot load {path}: {e}", "instruments", str(path)) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise self._error(f"{path} must contain a mapping", "instruments", document)

        instruments = document.get("instruments")
        if instruments is None:
            return {}
        if not isinstance(instruments, dict):
            raise self._error(
                f"'instruments' in {path} must map tickers to overrides", "instruments", instruments
            )

        return {
            str(ticker): self._check_layer(entry or {}, f"instruments.{ticker}")
            for ticker, entry in instruments.items()
        }

    def load_instrument_config(self, ticker: str) -> Layer:
        """Overrides configured for ``ticker``, or ``{}`` if it has none."""
        return self.read_instruments().get(ticker, {})

    def merge_config(
        self,
        ticker: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-request overrides (highest priority)
        2. Ticker-specific overrides
        3. Global defaults (lowest priority)

        Raises:
            ConfigurationError: If a layer does not have the section shape
        """
        layers = [asdict(self.defaults)]
        if ticker:
            layers.append(self.load_instrument_config(ticker))
        if overrides:
            layers.append(self._check_layer(overrides, "overrides"))

        return {
            section: {key: value for layer in layers for key, value in layer.get(section, {}).items()}
            for section in self.sections
        }

    def _check_layer(self, layer: Any, where: str) -> Layer:
        if not isinstance(layer, dict):
            raise self._error(f"{where} must be a mapping of sections", where, layer)

        for section, params in layer.items():
            if section not in self.sections:
                raise self._error(
                    f"{where} has unknown section '{section}' (expected one of: {', '.join(self.sections)})",
                    f"{where}.{section}",
                    params
                )
            if not isinstance(params, dict):
                raise self._error(f"{where}.{section} must be a mapping", f"{where}.{section}", params)

        return layer

    @staticmethod
    def _error(message: str, field: str, value: Any) -> ConfigurationError:
        return ConfigurationError(message, errors=[ValidationError(field=field, message=message, value=value)])
