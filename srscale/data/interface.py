"""
Read-only view of a fitness-case dataset.

Search and fitness-evaluation code depends on this protocol only, so any
storage strategy (in-memory, CSV-backed, streamed) can feed it.
"""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class DataSource(Protocol):
    """Capabilities a dataset exposes to the modeling algorithm."""

    @property
    def input_values(self) -> NDArray[np.float64]: ...

    @property
    def target_values(self) -> NDArray[np.float64]: ...

    @property
    def scaled_target_values(self) -> NDArray[np.float64]: ...

    @property
    def target_mean(self) -> float: ...

    @property
    def target_max(self) -> float | None: ...

    @property
    def target_min(self) -> float | None: ...

    @property
    def number_of_fitness_cases(self) -> int: ...

    @property
    def number_of_features(self) -> int: ...
