"""PalmSight geometric interpretation engine."""

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import KeypointSet, PalmReadingResult
from palmsight.engine.pipeline import Pipeline, create_pipeline, interpret_palm
from palmsight.utils.geometry import EmptyInputError

__all__ = [
    "EngineConfig",
    "KeypointSet",
    "PalmReadingResult",
    "Pipeline",
    "create_pipeline",
    "interpret_palm",
    "EmptyInputError",
]
