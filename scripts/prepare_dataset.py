#!/usr/bin/env python3
"""
srscale - Dataset Preparation Runner

Usage:
    python scripts/prepare_dataset.py data/train.csv
    python scripts/prepare_dataset.py data/train.csv data/test.csv
    python scripts/prepare_dataset.py --data-out out/train.csv --bounds-out out/bounds.txt data/train.csv
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from srscale.core.config import ScalingConfig, Settings, load_config
from srscale.core.exceptions import SrscaleError
from srscale.core.types import DegeneratePolicy
from srscale.pipeline.prepare import PreparationPipeline

load_dotenv(PROJECT_ROOT / ".env")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="srscale - Normalize a dataset for symbolic regression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/prepare_dataset.py data/train.csv
    python scripts/prepare_dataset.py --allow-degenerate data/train.csv
    python scripts/prepare_dataset.py --verbose data/train.csv data/test.csv

The last CSV column is the target. Outputs go to SRSCALE_OUTPUT_DIR
unless --data-out/--bounds-out are given (single input only).
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="Raw CSV file(s) to normalize",
    )

    parser.add_argument(
        "--data-out",
        type=str,
        default=None,
        help="Normalized dataset destination",
    )

    parser.add_argument(
        "--bounds-out",
        type=str,
        default=None,
        help="Bounds file destination",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output directory (overrides SRSCALE_OUTPUT_DIR)",
    )

    parser.add_argument(
        "--header",
        action="store_true",
        help="Input files start with a header row",
    )

    parser.add_argument(
        "--allow-degenerate",
        action="store_true",
        help="Write NaN/Infinity for constant columns instead of failing",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_config(args: argparse.Namespace, settings: Settings) -> ScalingConfig:
    """Apply command line overrides on top of scaling.yaml."""
    config_path = settings.config_dir / "scaling.yaml"
    base = load_config("scaling", settings) if config_path.exists() else ScalingConfig()

    overrides: dict[str, dict] = {}
    if args.header:
        overrides["csv"] = {"has_header": True}
    if args.allow_degenerate:
        overrides["scaling"] = {"degenerate_policy": DegeneratePolicy.NAN.value}
    return base.with_overrides(overrides)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    settings = Settings()
    if args.output:
        settings = settings.model_copy(update={"output_dir": Path(args.output).resolve()})

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    logger = logging.getLogger(__name__)

    if (args.data_out or args.bounds_out) and len(args.inputs) > 1:
        logger.error("--data-out/--bounds-out can only be used with a single input")
        return 1

    try:
        pipeline = PreparationPipeline(settings=settings, config=build_config(args, settings))
    except SrscaleError as e:
        logger.error(f"Failed to initialize pipeline: {e}")
        return 1

    failures = 0
    for input_path in args.inputs:
        try:
            result = pipeline.run(input_path, args.data_out, args.bounds_out)
        except SrscaleError as e:
            logger.error(f"Failed to prepare {input_path}: {e}")
            failures += 1
            continue

        print(
            f"{result.input_path.name}: {result.number_of_fitness_cases} cases x "
            f"{result.number_of_features} features | "
            f"target [{result.target_min}, {result.target_max}] mean {result.target_mean:.6g}\n"
            f"  data:   {result.data_path}\n"
            f"  bounds: {result.bounds_path}"
        )

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
