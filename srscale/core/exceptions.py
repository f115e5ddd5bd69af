"""
Custom exceptions for srscale.

All exceptions inherit from SrscaleError for easy catching.
"""


class SrscaleError(Exception):
    """Base exception for all srscale errors."""

    pass


class ConfigurationError(SrscaleError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidDimensionError(SrscaleError):
    """Raised when a dataset is constructed with non-positive dimensions."""

    def __init__(
        self,
        message: str,
        dimension: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.dimension = dimension
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.dimension:
            parts.append(f"dimension={self.dimension}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)


class IndexOutOfRangeError(SrscaleError):
    """Raised when a fitness case index falls outside the dataset."""

    def __init__(
        self,
        index: int,
        size: int,
    ):
        super().__init__(f"Fitness case index {index} out of range")
        self.index = index
        self.size = size

    def __str__(self) -> str:
        return f"{self.args[0]} | valid=[0, {self.size})"


class DegenerateRangeError(SrscaleError):
    """Raised when min equals max, making min-max scaling a division by zero."""

    def __init__(
        self,
        message: str,
        column: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.column = column
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.column:
            parts.append(f"column={self.column}")
        if self.value is not None:
            parts.append(f"min=max={self.value!r}")
        return " | ".join(parts)


class InsufficientDataError(SrscaleError):
    """Raised when there's not enough data for computation."""

    def __init__(
        self,
        message: str,
        required: int,
        available: int,
    ):
        super().__init__(message)
        self.required = required
        self.available = available

    def __str__(self) -> str:
        return (
            f"{self.args[0]} | "
            f"required={self.required}, available={self.available}"
        )


class ValidationError(SrscaleError):
    """Raised when input values fail validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.field:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)


class ExportError(SrscaleError):
    """Raised when a normalized dataset or bounds file cannot be written."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
    ):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.path:
            parts.append(f"path={self.path}")
        return " | ".join(parts)


class IngestError(SrscaleError):
    """Raised when raw data cannot be loaded."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        row: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.row = row

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.path:
            parts.append(f"path={self.path}")
        if self.row is not None:
            parts.append(f"row={self.row}")
        return " | ".join(parts)
