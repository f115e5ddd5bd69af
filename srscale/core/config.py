"""
Configuration management for srscale.

Loads settings from environment variables and YAML config files.
Uses pydantic for validation.

Priority order:
1. Environment variables (SRSCALE_ prefix)
2. .env file
3. Field defaults
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from srscale.core.constants import (
    DEFAULT_BOUNDS_SUFFIX,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_DATA_SUFFIX,
)
from srscale.core.exceptions import ConfigurationError
from srscale.core.types import DegeneratePolicy


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Paths and log level are loaded from .env file or environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="SRSCALE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    output_dir: Path = Field(
        default=Path("data/normalized"),
        description="Directory for normalized datasets and bounds files",
    )
    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing YAML config files",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("output_dir", "config_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()


class ScalingConfig:
    """Configuration for scaling and export loaded from scaling.yaml."""

    def __init__(self, config_path: Path | None = None, data: dict[str, Any] | None = None):
        if data is not None:
            self._config = data
        elif config_path is not None:
            self._config = self._load_yaml(config_path)
        else:
            self._config = {}

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """Load and parse YAML file."""
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        with open(path) as f:
            return yaml.safe_load(f) or {}

    @property
    def _scaling(self) -> dict[str, Any]:
        return self._config.get("scaling", {})

    @property
    def degenerate_policy(self) -> DegeneratePolicy:
        """How constant columns are handled."""
        raw = self._scaling.get("degenerate_policy", DegeneratePolicy.RAISE.value)
        try:
            return DegeneratePolicy(str(raw).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown degenerate_policy: {raw}. "
                f"Valid values: {[p.value for p in DegeneratePolicy]}"
            ) from None

    @property
    def atomic_writes(self) -> bool:
        """Write exports through a temporary file and rename."""
        return bool(self._scaling.get("atomic_writes", True))

    @property
    def csv_delimiter(self) -> str:
        """Delimiter of raw CSV input."""
        return self._config.get("csv", {}).get("delimiter", DEFAULT_CSV_DELIMITER)

    @property
    def csv_has_header(self) -> bool:
        """Whether raw CSV input starts with a header row."""
        return bool(self._config.get("csv", {}).get("has_header", False))

    @property
    def data_suffix(self) -> str:
        """Suffix appended to the input stem for the normalized dataset."""
        return self._config.get("output", {}).get("data_suffix", DEFAULT_DATA_SUFFIX)

    @property
    def bounds_suffix(self) -> str:
        """Suffix appended to the input stem for the bounds file."""
        return self._config.get("output", {}).get("bounds_suffix", DEFAULT_BOUNDS_SUFFIX)

    def with_overrides(self, overrides: dict[str, dict[str, Any]]) -> "ScalingConfig":
        """
        Copy of this config with section keys replaced.

        Args:
            overrides: Mapping of section name ("scaling", "csv", "output")
                to the keys to replace in that section

        Returns:
            New ScalingConfig; this one is left unchanged
        """
        merged = {
            section: dict(values) if isinstance(values, dict) else values
            for section, values in self._config.items()
        }
        for section, values in overrides.items():
            merged.setdefault(section, {}).update(values)
        return ScalingConfig(data=merged)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def load_config(config_type: str, settings: Settings | None = None) -> ScalingConfig:
    """
    Load a specific configuration file.

    Args:
        config_type: Currently only "scaling"
        settings: Settings to resolve config_dir from (cached settings if omitted)

    Returns:
        Appropriate config object
    """
    settings = settings or get_settings()
    config_map = {
        "scaling": (settings.config_dir / "scaling.yaml", ScalingConfig),
    }

    if config_type not in config_map:
        raise ConfigurationError(
            f"Unknown config type: {config_type}. "
            f"Valid types: {list(config_map.keys())}"
        )

    path, config_class = config_map[config_type]
    return config_class(path)
