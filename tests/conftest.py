"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from srscale.core.config import ScalingConfig, Settings
from srscale.data.scaled import ScaledData


@pytest.fixture
def three_case_data() -> ScaledData:
    """Three fitness cases, one feature, targets [1, 5, 3]."""
    data = ScaledData(number_of_fitness_cases=3, number_of_features=1)
    for i, (feature, target) in enumerate([(0.0, 1.0), (10.0, 5.0), (5.0, 3.0)]):
        data.add_row([feature], target, i)
    return data


@pytest.fixture
def multi_feature_rows() -> list[tuple[list[float], float]]:
    """Rows with three features on very different scales."""
    return [
        ([1.5, -200.0, 0.001], 12.0),
        ([2.5, 150.0, 0.004], -3.5),
        ([0.5, 75.25, 0.002], 40.0),
        ([3.0, -10.0, 0.003], 7.25),
    ]


@pytest.fixture
def multi_feature_data(multi_feature_rows) -> ScaledData:
    """ScaledData populated from multi_feature_rows."""
    data = ScaledData(len(multi_feature_rows), 3)
    for i, (features, target) in enumerate(multi_feature_rows):
        data.add_row(features, target, i)
    return data


@pytest.fixture
def sample_csv(tmp_path: Path, multi_feature_rows) -> Path:
    """Headerless CSV of multi_feature_rows."""
    path = tmp_path / "train.csv"
    lines = [
        ",".join(str(v) for v in [*features, target])
        for features, target in multi_feature_rows
    ]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at temporary directories."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return Settings(
        output_dir=tmp_path / "out",
        config_dir=config_dir,
    )


@pytest.fixture
def scaling_config() -> ScalingConfig:
    """Default scaling configuration."""
    return ScalingConfig(data={
        "scaling": {"degenerate_policy": "raise", "atomic_writes": True},
        "csv": {"delimiter": ",", "has_header": False},
    })
