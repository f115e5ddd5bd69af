"""
Running statistics module for srscale.

Single-pass accumulators for the target mean and bounds.
"""

from srscale.stats.running import ArithmeticMean, RunningBounds

__all__ = [
    "ArithmeticMean",
    "RunningBounds",
]
