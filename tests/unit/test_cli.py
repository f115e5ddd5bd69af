"""
Tests for the prepare_dataset command line overrides.
"""

import argparse
import importlib.util
from pathlib import Path

import pytest

from srscale.core.types import DegeneratePolicy

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "prepare_dataset.py"


@pytest.fixture(scope="module")
def cli():
    """The prepare_dataset script loaded as a module."""
    module_spec = importlib.util.spec_from_file_location("prepare_dataset", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def _args(header: bool = False, allow_degenerate: bool = False) -> argparse.Namespace:
    return argparse.Namespace(header=header, allow_degenerate=allow_degenerate)


class TestBuildConfig:
    """Tests for applying flags on top of scaling.yaml."""

    def test_defaults_without_yaml(self, cli, settings):
        """No scaling.yaml and no flags gives the default config."""
        config = cli.build_config(_args(), settings)
        assert config.degenerate_policy is DegeneratePolicy.RAISE
        assert config.csv_has_header is False

    def test_flags_override_yaml(self, cli, settings):
        """--header and --allow-degenerate win over the file values."""
        (settings.config_dir / "scaling.yaml").write_text(
            "scaling:\n"
            "  degenerate_policy: raise\n"
            "  atomic_writes: false\n"
            "csv:\n"
            "  delimiter: ';'\n"
            "  has_header: false\n"
        )

        config = cli.build_config(_args(header=True, allow_degenerate=True), settings)

        assert config.degenerate_policy is DegeneratePolicy.NAN
        assert config.csv_has_header is True
        assert config.atomic_writes is False
        assert config.csv_delimiter == ";"

    def test_yaml_kept_without_flags(self, cli, settings):
        """Unset flags leave the file values alone."""
        (settings.config_dir / "scaling.yaml").write_text("csv:\n  has_header: true\n")
        config = cli.build_config(_args(), settings)
        assert config.csv_has_header is True
        assert config.degenerate_policy is DegeneratePolicy.RAISE
