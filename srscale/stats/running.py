"""
Running statistics for streamed values.

Both accumulators are single-pass folds: values are seen once and never
stored, so bounds and mean are known as soon as the last row is added.
"""

import math
from dataclasses import dataclass


class ArithmeticMean:
    """
    Incrementally updated arithmetic mean.

    Uses the update mean += (x - mean) / n, which avoids accumulating a
    large running sum.
    """

    def __init__(self) -> None:
        self._count = 0
        self._mean = 0.0

    def add(self, value: float) -> None:
        """Add a value to the mean."""
        self._count += 1
        self._mean += (value - self._mean) / self._count

    def mean(self) -> float:
        """Current mean, NaN if nothing has been added."""
        if self._count == 0:
            return math.nan
        return self._mean

    @property
    def count(self) -> int:
        """Number of values added."""
        return self._count

    def reset(self) -> None:
        """Forget all values."""
        self._count = 0
        self._mean = 0.0


@dataclass
class RunningBounds:
    """
    Running min/max of a stream of values.

    Both bounds are None until the first value is observed. After that
    min only decreases and max only increases.
    """

    min: float | None = None
    max: float | None = None

    @property
    def is_set(self) -> bool:
        """Whether at least one value has been observed."""
        return self.min is not None

    @property
    def range(self) -> float | None:
        """max - min, or None before any value."""
        if not self.is_set:
            return None
        return self.max - self.min

    def update(self, value: float) -> None:
        """Fold a value into the bounds."""
        if self.min is None or value < self.min:
            self.min = value
        if self.max is None or value > self.max:
            self.max = value
