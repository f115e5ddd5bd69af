"""Core module containing types, configuration, and shared utilities."""

from srscale.core.types import BoundsTable, DegeneratePolicy
from srscale.core.config import ScalingConfig, Settings, get_settings, load_config
from srscale.core.exceptions import (
    SrscaleError,
    ConfigurationError,
    DegenerateRangeError,
    ExportError,
    IndexOutOfRangeError,
    IngestError,
    InsufficientDataError,
    InvalidDimensionError,
    ValidationError,
)

__all__ = [
    # Types
    "BoundsTable",
    "DegeneratePolicy",
    # Config
    "ScalingConfig",
    "Settings",
    "get_settings",
    "load_config",
    # Exceptions
    "SrscaleError",
    "ConfigurationError",
    "DegenerateRangeError",
    "ExportError",
    "IndexOutOfRangeError",
    "IngestError",
    "InsufficientDataError",
    "InvalidDimensionError",
    "ValidationError",
]
