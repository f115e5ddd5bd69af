"""
Core type definitions for srscale.

Defines enums and dataclasses shared between the builder, exporter
and inverse transform.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray


class DegeneratePolicy(str, Enum):
    """
    What to do when a column has min == max.

    Min-max scaling divides by (max - min), so a constant column has no
    defined scaled value.
    """

    RAISE = "raise"  # Fail with DegenerateRangeError before anything is written
    NAN = "nan"  # Propagate IEEE results (0/0 = NaN, x/0 = +/-Infinity)


@dataclass(frozen=True)
class BoundsTable:
    """
    Bounds needed to invert min-max normalization.

    One (min, max) pair per feature column plus the target pair, exactly
    as stored in a bounds file.
    """

    min_features: NDArray[np.float64]
    max_features: NDArray[np.float64]
    target_min: float
    target_max: float

    @property
    def number_of_features(self) -> int:
        """Number of feature columns described."""
        return len(self.min_features)

    @property
    def feature_ranges(self) -> NDArray[np.float64]:
        """max - min per feature column."""
        return self.max_features - self.min_features

    @property
    def target_range(self) -> float:
        """target_max - target_min."""
        return self.target_max - self.target_min

