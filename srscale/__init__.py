"""
srscale - dataset scaling for symbolic regression

Prepares tabular data for a symbolic-regression engine:
- Tracks feature and target bounds while rows are added
- Scales the target to [0, 1] so the search can focus on structure
- Exports a min-max normalized dataset plus the bounds to invert it
"""

__version__ = "0.1.0"

from srscale.core.types import BoundsTable, DegeneratePolicy
from srscale.data.scaled import ScaledData

__all__ = [
    "BoundsTable",
    "DegeneratePolicy",
    "ScaledData",
]
