"""
Tests for settings and scaling configuration.
"""

import pytest

from srscale.core.config import ScalingConfig, Settings, load_config
from srscale.core.exceptions import ConfigurationError
from srscale.core.types import DegeneratePolicy


class TestScalingConfig:
    """Tests for scaling.yaml handling."""

    def test_defaults_when_empty(self):
        """Missing keys fall back to defaults."""
        config = ScalingConfig(data={})
        assert config.degenerate_policy is DegeneratePolicy.RAISE
        assert config.atomic_writes is True
        assert config.csv_delimiter == ","
        assert config.csv_has_header is False
        assert config.data_suffix == "_normalized.csv"
        assert config.bounds_suffix == "_bounds.txt"

    def test_loads_yaml(self, tmp_path):
        """Values are read from the YAML file."""
        path = tmp_path / "scaling.yaml"
        path.write_text(
            "scaling:\n"
            "  degenerate_policy: NaN\n"
            "  atomic_writes: false\n"
            "csv:\n"
            "  delimiter: ';'\n"
            "  has_header: true\n"
        )

        config = ScalingConfig(path)

        assert config.degenerate_policy is DegeneratePolicy.NAN
        assert config.atomic_writes is False
        assert config.csv_delimiter == ";"
        assert config.csv_has_header is True

    def test_missing_file(self, tmp_path):
        """A missing YAML file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ScalingConfig(tmp_path / "missing.yaml")

    def test_unknown_policy(self):
        """Unrecognized degenerate_policy values are rejected."""
        with pytest.raises(ConfigurationError):
            ScalingConfig(data={"scaling": {"degenerate_policy": "clip"}}).degenerate_policy

    def test_with_overrides_replaces_section_keys(self):
        """Overrides replace only the given keys and leave the original intact."""
        base = ScalingConfig(data={
            "scaling": {"degenerate_policy": "raise", "atomic_writes": False},
            "csv": {"delimiter": ";"},
        })

        config = base.with_overrides({
            "scaling": {"degenerate_policy": "nan"},
            "csv": {"has_header": True},
        })

        assert config.degenerate_policy is DegeneratePolicy.NAN
        assert config.atomic_writes is False
        assert config.csv_delimiter == ";"
        assert config.csv_has_header is True
        assert base.degenerate_policy is DegeneratePolicy.RAISE
        assert base.csv_has_header is False

    def test_with_overrides_adds_missing_section(self):
        """A section absent from the base config is created."""
        config = ScalingConfig().with_overrides({"output": {"data_suffix": ".norm"}})
        assert config.data_suffix == ".norm"


class TestLoadConfig:
    """Tests for the config factory."""

    def test_loads_from_config_dir(self, settings):
        """load_config reads scaling.yaml from settings.config_dir."""
        (settings.config_dir / "scaling.yaml").write_text("scaling:\n  degenerate_policy: nan\n")
        config = load_config("scaling", settings)
        assert config.degenerate_policy is DegeneratePolicy.NAN

    def test_unknown_type(self, settings):
        """Only known config types can be loaded."""
        with pytest.raises(ConfigurationError):
            load_config("regimes", settings)


class TestSettings:
    """Tests for environment settings."""

    def test_log_level_uppercased(self, tmp_path):
        """Log level is normalized to upper case."""
        settings = Settings(log_level="debug", config_dir=tmp_path)
        assert settings.log_level == "DEBUG"

    def test_paths_resolved(self, tmp_path):
        """String paths become absolute Paths."""
        settings = Settings(output_dir=str(tmp_path / "out"))
        assert settings.output_dir.is_absolute()

    def test_env_prefix(self, monkeypatch, tmp_path):
        """SRSCALE_ environment variables are picked up."""
        monkeypatch.setenv("SRSCALE_OUTPUT_DIR", str(tmp_path / "env_out"))
        assert Settings().output_dir == (tmp_path / "env_out").resolve()
