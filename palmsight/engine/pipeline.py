"""Pipeline orchestrator — validates keypoints, runs every analysis stage, assembles the result."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from palmsight import __version__
from palmsight.engine.config import EngineConfig
from palmsight.engine.context import KeypointSet, PalmAnalyses, PalmReadingResult
from palmsight.engine.fingers import analyze_fingers
from palmsight.engine.interpreter import interpret
from palmsight.engine.lines import (
    analyze_fate_line,
    analyze_head_line,
    analyze_heart_line,
    analyze_life_line,
)
from palmsight.engine.micro_features import detect_micro_features
from palmsight.engine.minor_lines import analyze_marriage_lines, analyze_mercury_line, analyze_sun_line
from palmsight.engine.mounts import analyze_mounts
from palmsight.utils.geometry import BoundingBox, EmptyInputError, bbox

logger = logging.getLogger(__name__)

MODEL_USED = "Palm keypoint detection"

# Analysis stages in execution order: (result key, fn(points, box, config))
STAGES: tuple[tuple[str, Callable[..., Any]], ...] = (
    ("life", analyze_life_line),
    ("head", analyze_head_line),
    ("heart", analyze_heart_line),
    ("fate", analyze_fate_line),
    ("mounts", analyze_mounts),
    ("micro", detect_micro_features),
    ("fingers", analyze_fingers),
    ("sun", analyze_sun_line),
    ("mercury", analyze_mercury_line),
    ("marriage", analyze_marriage_lines),
)


def hand_size(box: BoundingBox, config: EngineConfig) -> str:
    if box.height > config.hand_large_px:
        return "Large"
    if box.height > config.hand_medium_px:
        return "Medium"
    return "Small"


class Pipeline:
    """Runs the palm analysis stages for one keypoint set per call.

    Holds only configuration, so one instance can serve concurrent calls.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def analyze(self, keypoints: KeypointSet) -> tuple[BoundingBox, PalmAnalyses]:
        """Run every geometric stage; no composition."""
        if keypoints is None or len(keypoints) == 0:
            raise EmptyInputError("No points provided")

        points = keypoints.points
        box = bbox(points)

        results: dict[str, Any] = {}
        for name, fn in STAGES:
            t0 = time.perf_counter()
            results[name] = fn(points, box, self.config)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", name, elapsed)

        return box, PalmAnalyses(**results)

    def run(
        self,
        keypoints: KeypointSet,
        age_now: int | None = None,
        rng: random.Random | None = None,
    ) -> PalmReadingResult:
        """Full reading for one keypoint set.

        Raises EmptyInputError when the set has no points. ``rng`` drives the
        single randomized phrase pick; pass a seeded ``random.Random`` for
        reproducible output.
        """
        start = time.perf_counter()
        box, analyses = self.analyze(keypoints)
        insights = interpret(analyses, age_now=age_now, rng=rng, config=self.config)

        now = datetime.now(timezone.utc)
        processing_ms = int((time.perf_counter() - start) * 1000)

        result = PalmReadingResult(
            analysis_id=f"palm_{keypoints.detection_id}_{int(now.timestamp() * 1000)}",
            timestamp=now.isoformat(),
            confidence=keypoints.confidence,
            hand_shape="Rectangular",
            hand_size=hand_size(box, self.config),
            skin_texture="Smooth",
            life_line=insights.life_line,
            head_line=insights.head_line,
            heart_line=insights.heart_line,
            fate_line=insights.fate_line,
            marriage_line=analyses.marriage,
            sun_line=analyses.sun,
            mercury_line=analyses.mercury,
            mounts=analyses.mounts,
            micro=analyses.micro,
            fingers=analyses.fingers,
            personality=insights.personality,
            health=insights.health,
            career=insights.career,
            relationships=insights.relationships,
            spirituality=insights.spirituality,
            vedic_insights=insights.vedic_insights,
            recommendations=insights.recommendations,
            guidance=insights.guidance,
            timeline=insights.timeline,
            version=__version__,
            model_used=MODEL_USED,
            processing_time=processing_ms,
        )

        logger.info(
            "Palm reading %s: %d points, %d stages in %dms",
            result.analysis_id,
            len(keypoints),
            len(STAGES),
            processing_ms,
        )
        return result


def create_pipeline(config: EngineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def interpret_palm(
    keypoints: KeypointSet,
    age_now: int | None = None,
    rng: random.Random | None = None,
    config: EngineConfig | None = None,
) -> PalmReadingResult:
    """Single entry point: keypoints (+ optional age) → PalmReadingResult."""
    return create_pipeline(config).run(keypoints, age_now=age_now, rng=rng)
