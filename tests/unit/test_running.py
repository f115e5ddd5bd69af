"""
Tests for running mean and running bounds.
"""

import math
import random

import pytest

from srscale.stats.running import ArithmeticMean, RunningBounds


class TestArithmeticMean:
    """Tests for the incremental mean."""

    def test_mean_of_two_four_six(self):
        """Mean of [2, 4, 6] should be 4."""
        acc = ArithmeticMean()
        for v in [2.0, 4.0, 6.0]:
            acc.add(v)
        assert acc.mean() == 4.0

    def test_empty_mean_is_nan(self):
        """No values means an undefined (NaN) mean."""
        assert math.isnan(ArithmeticMean().mean())

    def test_count_tracks_additions(self):
        """Every add call is counted, duplicates included."""
        acc = ArithmeticMean()
        for v in [1.0, 1.0, 1.0]:
            acc.add(v)
        assert acc.count == 3

    def test_matches_batch_mean(self):
        """Incremental mean should match sum / n."""
        rng = random.Random(7)
        values = [rng.uniform(-1e3, 1e3) for _ in range(500)]
        acc = ArithmeticMean()
        for v in values:
            acc.add(v)
        assert acc.mean() == pytest.approx(sum(values) / len(values), rel=1e-12)

    def test_reset(self):
        """Reset should forget previous values."""
        acc = ArithmeticMean()
        acc.add(10.0)
        acc.reset()
        acc.add(2.0)
        assert acc.mean() == 2.0
        assert acc.count == 1


class TestRunningBounds:
    """Tests for running min/max."""

    def test_unset_before_first_value(self):
        """Bounds are None until a value is seen."""
        bounds = RunningBounds()
        assert not bounds.is_set
        assert bounds.min is None
        assert bounds.max is None
        assert bounds.range is None

    def test_first_value_sets_both(self):
        """First value becomes both min and max."""
        bounds = RunningBounds()
        bounds.update(-3.0)
        assert bounds.min == -3.0
        assert bounds.max == -3.0
        assert bounds.range == 0.0

    def test_bounds_contain_every_value_after_each_update(self):
        """min <= every value seen <= max after every update."""
        rng = random.Random(42)
        bounds = RunningBounds()
        seen = []
        for _ in range(200):
            v = rng.gauss(0.0, 100.0)
            previous = (bounds.min, bounds.max)
            bounds.update(v)
            seen.append(v)

            assert all(bounds.min <= s <= bounds.max for s in seen)
            if previous[0] is not None:
                assert bounds.min <= previous[0]
                assert bounds.max >= previous[1]
