"""
Dataset module for srscale.

ScaledData builds a dataset row by row, scales its target and exports a
normalized copy together with the bounds needed to invert it.
"""

from srscale.data.interface import DataSource
from srscale.data.scaled import ScaledData
from srscale.data.export import (
    format_double,
    write_bounds,
    write_normalized_dataset,
)

__all__ = [
    "DataSource",
    "ScaledData",
    "format_double",
    "write_bounds",
    "write_normalized_dataset",
]
