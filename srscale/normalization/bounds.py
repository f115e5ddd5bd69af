"""
Inverse transform for exported datasets.

Reads a bounds file and maps normalized values back to their original
scale: original = normalized * (max - min) + min.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from srscale.core.constants import DATA_DELIMITER, FILE_ENCODING
from srscale.core.exceptions import IngestError
from srscale.core.types import BoundsTable


logger = logging.getLogger(__name__)


def read_bounds(path: Path | str) -> BoundsTable:
    """
    Load a bounds file.

    Args:
        path: File written by write_bounds

    Returns:
        BoundsTable with feature bounds and target bounds

    Raises:
        IngestError: if the file is missing or malformed
    """
    path = Path(path)
    if not path.exists():
        raise IngestError("Bounds file not found", path=str(path))

    pairs: list[tuple[float, float]] = []
    with open(path, "r", encoding=FILE_ENCODING) as f:
        for line_no, line in enumerate(f):
            if not line.strip():
                continue
            fields = line.split()
            if len(fields) != 2:
                raise IngestError(
                    f"Expected 'min max', got {len(fields)} fields",
                    path=str(path),
                    row=line_no,
                )
            try:
                pairs.append((float(fields[0]), float(fields[1])))
            except ValueError:
                raise IngestError(
                    f"Non-numeric bounds line: {line.strip()!r}",
                    path=str(path),
                    row=line_no,
                ) from None

    if len(pairs) < 2:
        raise IngestError(
            "Bounds file needs at least one feature line and a target line",
            path=str(path),
        )

    feature_pairs = np.array(pairs[:-1], dtype=np.float64)
    target_min, target_max = pairs[-1]
    return BoundsTable(
        min_features=feature_pairs[:, 0],
        max_features=feature_pairs[:, 1],
        target_min=target_min,
        target_max=target_max,
    )


def denormalize(
    normalized_features: ArrayLike,
    scaled_target: ArrayLike,
    bounds: BoundsTable,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Map normalized features and scaled target back to original values.

    Args:
        normalized_features: Array of shape (fitness cases, features)
        scaled_target: Scaled target values
        bounds: Bounds used for normalization

    Returns:
        (features, target) on the original scale
    """
    features = (
        np.asarray(normalized_features, dtype=np.float64) * bounds.feature_ranges
        + bounds.min_features
    )
    target = np.asarray(scaled_target, dtype=np.float64) * bounds.target_range + bounds.target_min
    return features, target


def read_normalized_dataset(
    data_path: Path | str,
    bounds_path: Path | str,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Load an exported dataset and undo its normalization.

    Args:
        data_path: Normalized dataset file
        bounds_path: Matching bounds file

    Returns:
        (features, target) on the original scale

    Raises:
        IngestError: if either file is missing or the shapes disagree
    """
    bounds = read_bounds(bounds_path)
    data_path = Path(data_path)
    if not data_path.exists():
        raise IngestError("Normalized dataset not found", path=str(data_path))

    df = pd.read_csv(data_path, sep=DATA_DELIMITER, header=None, dtype=np.float64)
    expected = bounds.number_of_features + 1
    if df.shape[1] != expected:
        raise IngestError(
            f"Dataset has {df.shape[1]} columns, bounds describe {expected}",
            path=str(data_path),
        )

    values = df.to_numpy()
    logger.debug(f"Loaded {len(values)} normalized rows from {data_path}")
    return denormalize(values[:, :-1], values[:, -1], bounds)
