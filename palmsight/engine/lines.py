"""Line analyzer — length, curvature, clarity, breaks and forks for one palm line.

The primary axis runs along the line (x for horizontal lines, y for vertical
ones); the secondary axis measures how the line wanders across it.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import LineAnalysis, Orientation, Strength
from palmsight.engine.regions import (
    fate_line_region,
    head_line_region,
    heart_line_region,
    life_line_region,
)
from palmsight.utils.geometry import BoundingBox, as_points, axis_extent, sort_along
from palmsight.utils.math_helpers import clamp, round_half_up, variance

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = EngineConfig()

_INTERPRETATIONS: dict[str, str] = {
    "strong": "Line is strong and well-formed.",
    "moderate": "Line is present with some variation.",
    "weak": "Line is faint or fragmented in places.",
}

NO_LINE_INTERPRETATION = "No clear line detected."


def classify_strength(score: float, config: EngineConfig | None = None) -> Strength:
    """Score → strength label, shared by every line-shaped analysis."""
    cfg = config or _DEFAULT_CONFIG
    if score >= cfg.strong_score:
        return "strong"
    if score >= cfg.moderate_score:
        return "moderate"
    return "weak"


def empty_line() -> LineAnalysis:
    """Sentinel for a region with no points."""
    return LineAnalysis(
        strength="weak",
        length_px=0.0,
        normalized_length=0.0,
        curvature=0.5,
        clarity=0.2,
        breaks=0,
        forks=0,
        islands=0,
        score=30,
        interpretation=NO_LINE_INTERPRETATION,
        raw_points_count=0,
    )


def line_curvature(
    sorted_points: NDArray[np.float64],
    secondary_axis: int,
    secondary_size: float,
    config: EngineConfig | None = None,
) -> float:
    """How closely the midpoint follows the start→end chord.

    1 − |mid − chord| / tolerance, clamped to [0.1, 0.95]: a straight chord
    scores high, a strongly bowed line scores low.
    """
    cfg = config or _DEFAULT_CONFIG
    if len(sorted_points) < 3:
        return 0.5
    start = sorted_points[0, secondary_axis]
    end = sorted_points[-1, secondary_axis]
    mid = sorted_points[len(sorted_points) // 2, secondary_axis]
    expected = (start + end) / 2
    tolerance = max(secondary_size * cfg.curvature_tolerance_pct, 1.0)
    return clamp(1 - abs(float(mid) - float(expected)) / tolerance, 0.1, 0.95)


def count_breaks(sorted_points: NDArray[np.float64], axis: int, threshold_gap: float) -> int:
    """Adjacent gaps along ``axis`` wider than ``threshold_gap``."""
    if len(sorted_points) < 2:
        return 0
    gaps = np.abs(np.diff(sorted_points[:, axis]))
    return int(np.count_nonzero(gaps > threshold_gap))


def analyze_line(
    points: NDArray[np.float64],
    box: BoundingBox,
    orientation: Orientation = "horizontal",
    config: EngineConfig | None = None,
) -> LineAnalysis:
    """Score one line region. Empty regions return the weak sentinel."""
    cfg = config or _DEFAULT_CONFIG
    points = as_points(points if points is not None else [])
    if len(points) == 0:
        return empty_line()

    if orientation == "horizontal":
        primary, secondary = 0, 1
        primary_size, secondary_size = box.width, box.height
    else:
        primary, secondary = 1, 0
        primary_size, secondary_size = box.height, box.width

    ordered = sort_along(points, primary)
    n = len(points)

    length_px = axis_extent(points, primary)
    normalized_length = length_px / primary_size
    curvature = line_curvature(ordered, secondary, secondary_size, cfg)
    density = n / max(length_px, 1.0)
    clarity = clamp(density * cfg.clarity_density_gain, 0.12, 0.99)
    breaks = count_breaks(ordered, primary, primary_size * cfg.break_gap_pct)
    forks = 1 if variance(points[:, secondary]) > secondary_size * cfg.fork_variance_pct else 0
    islands = max(0, breaks)

    raw_score = (
        normalized_length * cfg.line_length_weight
        + curvature * cfg.line_curvature_weight
        + clarity * cfg.line_clarity_weight
        - breaks * cfg.line_break_penalty
    ) * 100
    score = round_half_up(clamp(raw_score, 0, 100))
    strength = classify_strength(score, cfg)

    return LineAnalysis(
        strength=strength,
        length_px=length_px,
        normalized_length=normalized_length,
        curvature=curvature,
        clarity=clarity,
        breaks=breaks,
        forks=forks,
        islands=islands,
        score=score,
        interpretation=_INTERPRETATIONS[strength],
        raw_points_count=n,
    )


def analyze_life_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LineAnalysis:
    region = life_line_region(points, box)
    logger.debug("Life line region: %d points", len(region))
    return analyze_line(region, box, "vertical", config)


def analyze_head_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LineAnalysis:
    region = head_line_region(points, box)
    logger.debug("Head line region: %d points", len(region))
    return analyze_line(region, box, "horizontal", config)


def analyze_heart_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LineAnalysis:
    region = heart_line_region(points, box)
    logger.debug("Heart line region: %d points", len(region))
    return analyze_line(region, box, "horizontal", config)


def analyze_fate_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LineAnalysis:
    region = fate_line_region(points, box)
    logger.debug("Fate line region: %d points", len(region))
    return analyze_line(region, box, "vertical", config)
