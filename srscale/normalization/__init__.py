"""
Normalization module for srscale.

Provides linear min-max scaling and the inverse transform used to
recover original values from an exported dataset.
"""

from srscale.normalization.methods import (
    check_range,
    minmax_invert,
    minmax_scale,
    minmax_scale_columns,
)
from srscale.normalization.bounds import (
    denormalize,
    read_bounds,
    read_normalized_dataset,
)

__all__ = [
    "check_range",
    "minmax_invert",
    "minmax_scale",
    "minmax_scale_columns",
    "denormalize",
    "read_bounds",
    "read_normalized_dataset",
]
