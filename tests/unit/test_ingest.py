"""
Tests for CSV ingestion.
"""

import numpy as np
import pytest

from srscale.core.exceptions import IngestError
from srscale.core.types import DegeneratePolicy
from srscale.ingest.csv import load_csv, read_table


class TestLoadCsv:
    """Tests for loading CSV files into ScaledData."""

    def test_dimensions_from_file(self, sample_csv):
        """Rows become fitness cases; all but the last column are features."""
        data = load_csv(sample_csv)
        assert data.number_of_fitness_cases == 4
        assert data.number_of_features == 3

    def test_bounds_and_mean_built_while_loading(self, sample_csv, multi_feature_rows):
        """Bounds and mean are ready without a second pass."""
        data = load_csv(sample_csv)

        targets = [t for _, t in multi_feature_rows]
        assert data.target_min == min(targets)
        assert data.target_max == max(targets)
        assert data.target_mean == pytest.approx(np.mean(targets))
        np.testing.assert_array_equal(data.max_features, [3.0, 150.0, 0.004])

    def test_target_not_scaled_on_load(self, sample_csv):
        """Scaling is left to the caller."""
        assert not load_csv(sample_csv).is_scaled

    def test_header_row(self, tmp_path):
        """A header row is skipped when has_header is set."""
        path = tmp_path / "with_header.csv"
        path.write_text("x1,x2,y\n1,2,3\n4,5,6\n")

        data = load_csv(path, has_header=True)

        assert data.number_of_fitness_cases == 2
        np.testing.assert_array_equal(data.target_values, [3.0, 6.0])

    def test_custom_delimiter(self, tmp_path):
        """Other delimiters are supported."""
        path = tmp_path / "semi.csv"
        path.write_text("1;2\n3;4\n")
        data = load_csv(path, delimiter=";")
        np.testing.assert_array_equal(data.input_values[:, 0], [1.0, 3.0])

    def test_policy_passed_through(self, sample_csv):
        """degenerate_policy reaches the ScaledData."""
        data = load_csv(sample_csv, degenerate_policy=DegeneratePolicy.NAN)
        assert data.degenerate_policy is DegeneratePolicy.NAN


class TestReadTableErrors:
    """Tests for malformed input."""

    def test_missing_file(self, tmp_path):
        """A missing CSV raises IngestError."""
        with pytest.raises(IngestError):
            read_table(tmp_path / "missing.csv")

    def test_empty_file(self, tmp_path):
        """An empty CSV raises IngestError."""
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(IngestError):
            read_table(path)

    def test_single_column(self, tmp_path):
        """A target alone is not a dataset."""
        path = tmp_path / "one.csv"
        path.write_text("1\n2\n")
        with pytest.raises(IngestError):
            read_table(path)

    def test_non_numeric_cell(self, tmp_path):
        """Non-numeric values are reported with their row."""
        path = tmp_path / "bad.csv"
        path.write_text("1,2\n3,abc\n5,6\n")
        with pytest.raises(IngestError) as exc:
            read_table(path)
        assert exc.value.row == 1

    def test_missing_cell(self, tmp_path):
        """Empty cells are rejected."""
        path = tmp_path / "gap.csv"
        path.write_text("1,2\n,4\n")
        with pytest.raises(IngestError) as exc:
            read_table(path)
        assert exc.value.row == 1
