"""Ingestion module: loads raw tables into ScaledData."""

from srscale.ingest.csv import load_csv, read_table

__all__ = [
    "load_csv",
    "read_table",
]
