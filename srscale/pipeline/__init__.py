"""Pipeline module for orchestrating dataset preparation."""

from srscale.pipeline.prepare import PreparationPipeline, PreparationResult

__all__ = [
    "PreparationPipeline",
    "PreparationResult",
]
