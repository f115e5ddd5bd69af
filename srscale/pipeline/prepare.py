"""
Dataset preparation pipeline.

Coordinates the full flow for one raw dataset:
Ingest → Build bounds → Scale target → Export normalized dataset + bounds
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from srscale.core.config import ScalingConfig, Settings, get_settings, load_config
from srscale.data.scaled import ScaledData
from srscale.ingest.csv import load_csv


logger = logging.getLogger(__name__)


@dataclass
class PreparationResult:
    """Result of preparing a single dataset."""

    input_path: Path
    data_path: Path
    bounds_path: Path
    number_of_fitness_cases: int
    number_of_features: int
    target_min: float
    target_max: float
    target_mean: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "input_path": str(self.input_path),
            "data_path": str(self.data_path),
            "bounds_path": str(self.bounds_path),
            "number_of_fitness_cases": self.number_of_fitness_cases,
            "number_of_features": self.number_of_features,
            "target_min": self.target_min,
            "target_max": self.target_max,
            "target_mean": self.target_mean,
        }


class PreparationPipeline:
    """
    Prepares raw CSV data for the symbolic-regression engine.

    Flow:
    1. Load fitness cases from CSV (bounds and mean tracked while loading)
    2. Scale the target to [0, 1]
    3. Write the normalized dataset and the bounds file
    """

    def __init__(
        self,
        settings: Settings | None = None,
        config: ScalingConfig | None = None,
    ) -> None:
        """
        Initialize preparation pipeline.

        Args:
            settings: Application settings
            config: Scaling configuration (loaded from YAML if not provided)
        """
        self.settings = settings or get_settings()
        self.config = config or load_config("scaling", self.settings)

    def output_paths(self, input_path: Path) -> tuple[Path, Path]:
        """Default dataset and bounds destinations for an input file."""
        stem = input_path.stem
        out_dir = self.settings.output_dir
        return (
            out_dir / f"{stem}{self.config.data_suffix}",
            out_dir / f"{stem}{self.config.bounds_suffix}",
        )

    def load(self, input_path: Path | str) -> ScaledData:
        """Load and scale a raw dataset without exporting it."""
        data = load_csv(
            input_path,
            delimiter=self.config.csv_delimiter,
            has_header=self.config.csv_has_header,
            degenerate_policy=self.config.degenerate_policy,
        )
        data.scale_target()
        return data

    def run(
        self,
        input_path: Path | str,
        data_path: Path | str | None = None,
        bounds_path: Path | str | None = None,
    ) -> PreparationResult:
        """
        Run the pipeline for one dataset.

        Args:
            input_path: Raw CSV file, last column is the target
            data_path: Normalized dataset destination (derived if omitted)
            bounds_path: Bounds file destination (derived if omitted)

        Returns:
            PreparationResult describing what was written
        """
        input_path = Path(input_path)
        default_data, default_bounds = self.output_paths(input_path)
        data_path = Path(data_path) if data_path else default_data
        bounds_path = Path(bounds_path) if bounds_path else default_bounds

        logger.info(f"Preparing {input_path}")
        data = self.load(input_path)

        for path in (data_path, bounds_path):
            path.parent.mkdir(parents=True, exist_ok=True)

        data.normalize_values(data_path, bounds_path, atomic=self.config.atomic_writes)

        result = PreparationResult(
            input_path=input_path,
            data_path=data_path,
            bounds_path=bounds_path,
            number_of_fitness_cases=data.number_of_fitness_cases,
            number_of_features=data.number_of_features,
            target_min=data.target_min,
            target_max=data.target_max,
            target_mean=data.target_mean,
        )
        logger.info(
            f"Prepared {result.number_of_fitness_cases} fitness cases, "
            f"target range [{result.target_min}, {result.target_max}]"
        )
        return result
