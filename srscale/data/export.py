"""
Export of normalized datasets.

Writes two plain-text files:

    normalized dataset  one line per fitness case,
                        "f_1,f_2,...,f_n,scaled_target"
    bounds file         one "min max" line per feature, then
                        "target_min target_max"

Numbers are rendered the way Java's Double.toString renders them
(0.0, 10.0, 1.0E-4, NaN, Infinity) so that files stay interchangeable
with the symbolic-regression tools that read them.
"""

import logging
import math
import os
import stat
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from srscale.core.constants import (
    BOUNDS_DELIMITER,
    DATA_DELIMITER,
    DECIMAL_NOTATION_MAX,
    DECIMAL_NOTATION_MIN,
    FILE_ENCODING,
    LINE_TERMINATOR,
    TEMP_FILE_PREFIX,
)
from srscale.core.exceptions import ExportError
from srscale.core.types import BoundsTable


logger = logging.getLogger(__name__)


def format_double(value: float) -> str:
    """
    Format a float like Java's Double.toString.

    Shortest round-tripping digits, decimal notation for magnitudes in
    [1e-3, 1e7), computerized scientific notation ("1.0E-4") otherwise.

    Args:
        value: Value to format

    Returns:
        String representation
    """
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    magnitude = abs(value)
    if DECIMAL_NOTATION_MIN <= magnitude < DECIMAL_NOTATION_MAX:
        # repr only switches to exponents below 1e-4 or from 1e16
        return repr(value)

    _, digits, exponent = Decimal(repr(magnitude)).as_tuple()
    exponent = exponent + len(digits) - 1
    significant = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = significant[0] + "." + (significant[1:] or "0")
    sign = "-" if value < 0 else ""
    return f"{sign}{mantissa}E{exponent}"


def format_data_line(features: Iterable[float], target: float) -> str:
    """Render one normalized dataset row, newline included."""
    fields = [format_double(v) for v in features]
    fields.append(format_double(target))
    return DATA_DELIMITER.join(fields) + LINE_TERMINATOR


def format_bounds_line(min_val: float, max_val: float) -> str:
    """Render one bounds line, newline included."""
    return format_double(min_val) + BOUNDS_DELIMITER + format_double(max_val) + LINE_TERMINATOR


def write_normalized_dataset(
    path: Path | str,
    normalized_features: NDArray[np.float64],
    scaled_target: NDArray[np.float64],
    atomic: bool = True,
) -> Path:
    """
    Write the normalized dataset.

    Args:
        path: Destination file (created or overwritten)
        normalized_features: Array of shape (fitness cases, features)
        scaled_target: Scaled target, one value per fitness case
        atomic: Write through a temporary file and rename into place

    Returns:
        Path written

    Raises:
        ExportError: if the file cannot be opened or written
    """
    path = Path(path)
    lines = (
        format_data_line(row, target)
        for row, target in zip(normalized_features, scaled_target)
    )
    _write_lines(path, lines, atomic)
    logger.info(f"Wrote {len(scaled_target)} normalized fitness cases to {path}")
    return path


def write_bounds(
    path: Path | str,
    bounds: BoundsTable,
    atomic: bool = True,
) -> Path:
    """
    Write the bounds file.

    Args:
        path: Destination file (created or overwritten)
        bounds: Feature and target bounds
        atomic: Write through a temporary file and rename into place

    Returns:
        Path written

    Raises:
        ExportError: if the file cannot be opened or written
    """
    path = Path(path)
    lines = [
        format_bounds_line(lo, hi)
        for lo, hi in zip(bounds.min_features, bounds.max_features)
    ]
    lines.append(format_bounds_line(bounds.target_min, bounds.target_max))
    _write_lines(path, lines, atomic)
    logger.info(f"Wrote bounds for {bounds.number_of_features} features to {path}")
    return path


def _write_lines(path: Path, lines: Iterable[str], atomic: bool) -> None:
    """Write lines in order, wrapping OS failures in ExportError."""
    if not atomic:
        try:
            with open(path, "w", encoding=FILE_ENCODING, newline="") as f:
                f.writelines(lines)
        except OSError as e:
            raise ExportError(f"Failed to write {path.name}: {e}", path=str(path)) from e
        return

    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=FILE_ENCODING,
            newline="",
            dir=path.parent,
            prefix=TEMP_FILE_PREFIX,
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.writelines(lines)
        os.chmod(tmp_path, _destination_mode(path))
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ExportError(f"Failed to write {path.name}: {e}", path=str(path)) from e


def _destination_mode(path: Path) -> int:
    """
    Permission bits a plain open(path, "w") would leave on path.

    Temporary files are created 0600, so the mode is restored before the
    rename: an existing file keeps its mode, a new one gets 0666 & ~umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
