"""
Normalization methods.

Implements linear min-max scaling and its inverse.
"""

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from srscale.core.exceptions import DegenerateRangeError
from srscale.core.types import DegeneratePolicy


logger = logging.getLogger(__name__)


def check_range(
    min_val: float,
    max_val: float,
    policy: DegeneratePolicy = DegeneratePolicy.RAISE,
    column: str | None = None,
) -> bool:
    """
    Check that [min, max] is a usable scaling range.

    Args:
        min_val: Column minimum
        max_val: Column maximum
        policy: What to do when min == max
        column: Column name used in error messages

    Returns:
        True if the range is non-degenerate

    Raises:
        DegenerateRangeError: if min == max and policy is RAISE
    """
    if max_val - min_val != 0:
        return True

    if policy is DegeneratePolicy.RAISE:
        raise DegenerateRangeError(
            "Cannot min-max scale a constant column",
            column=column,
            value=float(min_val),
        )

    logger.warning(f"Degenerate range for {column or 'column'}: min=max={min_val}, values become NaN")
    return False


def minmax_scale(
    values: ArrayLike,
    min_val: float,
    max_val: float,
) -> NDArray[np.float64]:
    """
    Min-max scale an array.

    Formula: (value - min) / (max - min)

    No clipping and no zero-range guard: callers run check_range first.
    A zero range yields NaN (0/0) or +/-Infinity, as IEEE division does.

    Args:
        values: Values to scale
        min_val: Column minimum
        max_val: Column maximum

    Returns:
        Scaled values (in [0, 1] when min/max bound the values)
    """
    arr = np.asarray(values, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (arr - min_val) / (max_val - min_val)


def minmax_scale_columns(
    matrix: ArrayLike,
    min_vals: ArrayLike,
    max_vals: ArrayLike,
) -> NDArray[np.float64]:
    """
    Min-max scale a 2-D array column-wise.

    Args:
        matrix: Array of shape (rows, columns)
        min_vals: Minimum per column
        max_vals: Maximum per column

    Returns:
        Scaled array with the same shape
    """
    arr = np.asarray(matrix, dtype=np.float64)
    mins = np.asarray(min_vals, dtype=np.float64)
    maxs = np.asarray(max_vals, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (arr - mins) / (maxs - mins)


def minmax_invert(
    values: ArrayLike,
    min_val: ArrayLike,
    max_val: ArrayLike,
) -> NDArray[np.float64]:
    """
    Undo min-max scaling.

    Formula: value * (max - min) + min

    Broadcasts, so per-column bounds work on a 2-D array.
    """
    arr = np.asarray(values, dtype=np.float64)
    mins = np.asarray(min_val, dtype=np.float64)
    maxs = np.asarray(max_val, dtype=np.float64)
    return arr * (maxs - mins) + mins
