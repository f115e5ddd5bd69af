"""
CSV ingestion.

Reads a numeric table whose last column is the target and feeds every
row into a ScaledData, so bounds and mean are built in the same pass.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from srscale.core.constants import DEFAULT_CSV_DELIMITER
from srscale.core.exceptions import IngestError
from srscale.core.types import DegeneratePolicy
from srscale.data.scaled import ScaledData


logger = logging.getLogger(__name__)


def read_table(
    path: Path | str,
    delimiter: str = DEFAULT_CSV_DELIMITER,
    has_header: bool = False,
) -> pd.DataFrame:
    """
    Read a numeric CSV table.

    Args:
        path: CSV file
        delimiter: Field separator
        has_header: Whether the first line holds column names

    Returns:
        DataFrame of float64 values, at least one feature and a target column

    Raises:
        IngestError: if the file is missing, empty, ragged or non-numeric
    """
    path = Path(path)
    if not path.exists():
        raise IngestError("Data file not found", path=str(path))

    try:
        df = pd.read_csv(path, sep=delimiter, header=0 if has_header else None)
    except pd.errors.EmptyDataError:
        raise IngestError("Data file is empty", path=str(path)) from None
    except pd.errors.ParserError as e:
        raise IngestError(f"Malformed CSV: {e}", path=str(path)) from e

    if df.empty:
        raise IngestError("Data file has no rows", path=str(path))

    if df.shape[1] < 2:
        raise IngestError(
            f"Need at least one feature and a target column, got {df.shape[1]} column(s)",
            path=str(path),
        )

    numeric = df.apply(pd.to_numeric, errors="coerce").astype(np.float64)
    bad_rows = np.flatnonzero(~np.isfinite(numeric.to_numpy()).all(axis=1))
    if len(bad_rows) > 0:
        raise IngestError(
            f"{len(bad_rows)} row(s) contain missing or non-numeric values",
            path=str(path),
            row=int(bad_rows[0]),
        )

    return numeric


def load_csv(
    path: Path | str,
    delimiter: str = DEFAULT_CSV_DELIMITER,
    has_header: bool = False,
    degenerate_policy: DegeneratePolicy = DegeneratePolicy.RAISE,
) -> ScaledData:
    """
    Load a CSV file into a ScaledData.

    The target is not scaled yet; call scale_target() once loaded.

    Args:
        path: CSV file, last column is the target
        delimiter: Field separator
        has_header: Whether the first line holds column names
        degenerate_policy: Passed to ScaledData

    Returns:
        Populated ScaledData
    """
    df = read_table(path, delimiter=delimiter, has_header=has_header)
    values = df.to_numpy()
    n_rows, n_cols = values.shape

    data = ScaledData(n_rows, n_cols - 1, degenerate_policy=degenerate_policy)
    for i, row in enumerate(values):
        data.add_row(row[:-1], row[-1], i)

    logger.info(f"Loaded {n_rows} fitness cases with {n_cols - 1} features from {path}")
    return data
