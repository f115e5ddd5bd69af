"""
Dataset with its target scaled to [0, 1].

Scaling the target frees the symbolic-regression search from having to
discover the scale of the output, so it can focus on the shape of the
solution (Vladislavleva, "Model-based problem solving through symbolic
regression via pareto genetic programming", Tilburg University, 2008).

Lifecycle:
    1. ScaledData(n, m)            fixed dimensions, zero-filled storage
    2. add_row / add_target_value  bounds and mean tracked incrementally
    3. scale_target()              scaled target computed in one pass
    4. normalize_values(...)       normalized dataset + bounds written out
"""

import logging
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike, NDArray

from srscale.core.exceptions import (
    IndexOutOfRangeError,
    InsufficientDataError,
    InvalidDimensionError,
    ValidationError,
)
from srscale.core.types import BoundsTable, DegeneratePolicy
from srscale.data.export import write_bounds, write_normalized_dataset
from srscale.normalization.methods import (
    check_range,
    minmax_invert,
    minmax_scale,
    minmax_scale_columns,
)
from srscale.stats.running import ArithmeticMean, RunningBounds


logger = logging.getLogger(__name__)


def _readonly(arr: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return a non-writeable view of an array."""
    view = arr.view()
    view.flags.writeable = False
    return view


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class ScaledData:
    """
    Fitness cases plus a target vector scaled to [0, 1].

    Tracks per-feature min/max, target min/max and a running target mean
    while rows are added, so no second pass over the data is needed.
    Not thread-safe: a single ingestion loop should feed it.
    """

    def __init__(
        self,
        number_of_fitness_cases: int,
        number_of_features: int,
        degenerate_policy: DegeneratePolicy = DegeneratePolicy.RAISE,
    ) -> None:
        """
        Allocate storage for a dataset of fixed size.

        Args:
            number_of_fitness_cases: Number of rows
            number_of_features: Number of feature columns
            degenerate_policy: How constant columns are handled when scaling

        Raises:
            InvalidDimensionError: if either dimension is not a positive integer
        """
        for name, value in (
            ("number_of_fitness_cases", number_of_fitness_cases),
            ("number_of_features", number_of_features),
        ):
            if not _is_integer(value) or value <= 0:
                raise InvalidDimensionError(
                    "Dataset dimensions must be positive integers",
                    dimension=name,
                    value=value,
                )

        self._number_of_fitness_cases = int(number_of_fitness_cases)
        self._number_of_features = int(number_of_features)
        self.degenerate_policy = DegeneratePolicy(degenerate_policy)

        n, m = self._number_of_fitness_cases, self._number_of_features
        self._fitness_cases = np.zeros((n, m), dtype=np.float64)
        self._target = np.zeros(n, dtype=np.float64)
        self._scaled_target = np.zeros(n, dtype=np.float64)

        # +/-inf until a row is seen: any finite value tightens them
        self._min_features = np.full(m, np.inf, dtype=np.float64)
        self._max_features = np.full(m, -np.inf, dtype=np.float64)

        self._target_bounds = RunningBounds()
        self._target_mean = ArithmeticMean()
        self._target_written = np.zeros(n, dtype=bool)
        self._features_written = np.zeros(n, dtype=bool)
        self._is_scaled = False

    # ------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------

    def add_target_value(self, value: float, index: int) -> None:
        """
        Store a target value and fold it into the bounds and mean.

        Writing the same index twice keeps the last value, but both values
        stay in the running mean.

        Args:
            value: Target value
            index: Fitness case index

        Raises:
            IndexOutOfRangeError: if index is outside the dataset
            ValidationError: if value is not a finite number
        """
        self._check_index(index)
        value = self._check_target(value)
        self._store_target(value, index)

    def add_fitness_case(self, features: ArrayLike, index: int) -> None:
        """
        Store a feature row and tighten the per-feature bounds.

        Args:
            features: One value per feature column
            index: Fitness case index

        Raises:
            IndexOutOfRangeError: if index is outside the dataset
            ValidationError: if the row has the wrong length or non-finite values
        """
        self._check_index(index)
        row = self._check_features(features)
        self._store_features(row, index)

    def add_row(self, features: ArrayLike, target: float, index: int) -> None:
        """
        Store a full fitness case: feature row plus target.

        Everything is validated before anything is stored.
        """
        self._check_index(index)
        row = self._check_features(features)
        value = self._check_target(target)
        self._store_features(row, index)
        self._store_target(value, index)

    def _check_index(self, index: int) -> None:
        if not _is_integer(index):
            raise ValidationError("Fitness case index must be an integer", field="index", value=index)
        if not 0 <= index < self._number_of_fitness_cases:
            raise IndexOutOfRangeError(int(index), self._number_of_fitness_cases)

    def _check_target(self, value: float) -> float:
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValidationError("Target value must be numeric", field="target", value=value) from None
        if not np.isfinite(value):
            raise ValidationError("Target value must be finite", field="target", value=value)
        return value

    def _check_features(self, features: ArrayLike) -> NDArray[np.float64]:
        try:
            row = np.asarray(features, dtype=np.float64)
        except (TypeError, ValueError):
            raise ValidationError("Feature values must be numeric", field="features") from None
        if row.shape != (self._number_of_features,):
            raise ValidationError(
                f"Expected {self._number_of_features} feature values, got shape {row.shape}",
                field="features",
            )
        if not np.all(np.isfinite(row)):
            raise ValidationError("Feature values must be finite", field="features", value=row.tolist())
        return row

    def _store_target(self, value: float, index: int) -> None:
        if self._target_written[index]:
            logger.warning(
                f"Target at index {index} overwritten "
                f"({self._target[index]} -> {value}); running mean keeps both values"
            )
        self._target[index] = value
        self._target_written[index] = True
        self._target_mean.add(value)
        self._target_bounds.update(value)
        self._is_scaled = False

    def _store_features(self, row: NDArray[np.float64], index: int) -> None:
        self._fitness_cases[index] = row
        self._features_written[index] = True
        np.minimum(self._min_features, row, out=self._min_features)
        np.maximum(self._max_features, row, out=self._max_features)

    # ------------------------------------------------------------
    # Scaling
    # ------------------------------------------------------------

    def scale_target(self) -> NDArray[np.float64]:
        """
        Compute the target scaled to [0, 1].

        Call after all target values are added. Calling again recomputes
        from the current bounds.

        Returns:
            Read-only view of the scaled target

        Raises:
            InsufficientDataError: if no target value was added
            DegenerateRangeError: if all targets are equal and policy is RAISE
        """
        if not self._target_bounds.is_set:
            raise InsufficientDataError(
                "Cannot scale target before any target value is added",
                required=1,
                available=0,
            )

        filled = int(self._target_written.sum())
        if filled < self._number_of_fitness_cases:
            logger.warning(
                f"Scaling target with {filled} of {self._number_of_fitness_cases} "
                f"fitness cases filled; the rest are 0.0"
            )

        target_min, target_max = self._target_bounds.min, self._target_bounds.max
        check_range(target_min, target_max, self.degenerate_policy, column="target")

        self._scaled_target[:] = minmax_scale(self._target, target_min, target_max)
        self._is_scaled = True
        logger.debug(f"Scaled target over [{target_min}, {target_max}]")
        return self.scaled_target_values

    def unscale_target(self, values: ArrayLike) -> NDArray[np.float64]:
        """
        Map values from the scaled target range back to the original one.

        Args:
            values: Values in scaled-target units (e.g. model outputs)

        Returns:
            Values in original target units
        """
        if not self._target_bounds.is_set:
            raise InsufficientDataError(
                "Cannot unscale before any target value is added",
                required=1,
                available=0,
            )
        return minmax_invert(values, self._target_bounds.min, self._target_bounds.max)

    # ------------------------------------------------------------
    # Export
    # ------------------------------------------------------------

    @property
    def bounds(self) -> BoundsTable:
        """Feature and target bounds as written to a bounds file."""
        if not self._target_bounds.is_set:
            raise InsufficientDataError(
                "Target bounds are undefined until a target value is added",
                required=1,
                available=0,
            )
        return BoundsTable(
            min_features=self._min_features.copy(),
            max_features=self._max_features.copy(),
            target_min=self._target_bounds.min,
            target_max=self._target_bounds.max,
        )

    def normalize_values(
        self,
        data_path: Path | str,
        bounds_path: Path | str,
        atomic: bool = True,
    ) -> tuple[Path, Path]:
        """
        Write the min-max normalized dataset and the bounds to invert it.

        Features are normalized column-wise; the target column is the
        scaled target (computed here if scale_target was not called).

        Args:
            data_path: Destination of the normalized dataset
            bounds_path: Destination of the bounds file
            atomic: Write through a temporary file and rename into place

        Returns:
            (data_path, bounds_path)

        Raises:
            InsufficientDataError: if no rows or no targets were added
            DegenerateRangeError: if a column is constant and policy is RAISE
            ExportError: if either file cannot be written
        """
        if np.any(np.isinf(self._min_features)):
            raise InsufficientDataError(
                "Cannot normalize features before any fitness case is added",
                required=1,
                available=0,
            )

        # Validate every column before touching the filesystem
        for j in range(self._number_of_features):
            check_range(
                self._min_features[j],
                self._max_features[j],
                self.degenerate_policy,
                column=f"feature[{j}]",
            )

        filled = int(self._features_written.sum())
        if filled < self._number_of_fitness_cases:
            logger.warning(
                f"Normalizing with {filled} of {self._number_of_fitness_cases} "
                f"fitness cases' features filled; the rest are 0.0 and may fall outside [0, 1]"
            )

        if not self._is_scaled:
            logger.debug("Target not scaled yet, scaling before export")
            self.scale_target()

        normalized = minmax_scale_columns(
            self._fitness_cases, self._min_features, self._max_features
        )
        data_path = write_normalized_dataset(
            data_path, normalized, self._scaled_target, atomic=atomic
        )
        bounds_path = write_bounds(bounds_path, self.bounds, atomic=atomic)
        return data_path, bounds_path

    # ------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------

    @property
    def input_values(self) -> NDArray[np.float64]:
        """Raw feature matrix, shape (fitness cases, features)."""
        return _readonly(self._fitness_cases)

    @property
    def target_values(self) -> NDArray[np.float64]:
        """Raw target vector."""
        return _readonly(self._target)

    @property
    def scaled_target_values(self) -> NDArray[np.float64]:
        """Target scaled to [0, 1]; zeros until scale_target is called."""
        return _readonly(self._scaled_target)

    @property
    def min_features(self) -> NDArray[np.float64]:
        """Minimum per feature column (+inf before any row)."""
        return _readonly(self._min_features)

    @property
    def max_features(self) -> NDArray[np.float64]:
        """Maximum per feature column (-inf before any row)."""
        return _readonly(self._max_features)

    @property
    def target_mean(self) -> float:
        """Running mean of every target value added so far."""
        return self._target_mean.mean()

    @property
    def target_min(self) -> float | None:
        return self._target_bounds.min

    @property
    def target_max(self) -> float | None:
        return self._target_bounds.max

    @property
    def target_bounds(self) -> RunningBounds:
        """Copy of the running target bounds."""
        return RunningBounds(self._target_bounds.min, self._target_bounds.max)

    @property
    def number_of_fitness_cases(self) -> int:
        return self._number_of_fitness_cases

    @property
    def number_of_features(self) -> int:
        return self._number_of_features

    @property
    def is_scaled(self) -> bool:
        """Whether scale_target has run since the last target was added."""
        return self._is_scaled

    def __repr__(self) -> str:
        return (
            f"ScaledData(number_of_fitness_cases={self._number_of_fitness_cases}, "
            f"number_of_features={self._number_of_features}, "
            f"target_min={self.target_min}, target_max={self.target_max})"
        )
