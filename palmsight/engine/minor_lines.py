"""Auxiliary line detectors — Sun, Mercury and marriage lines.

These lines are short and often missing, so each detector first checks that
its band holds enough points and otherwise reports the line as absent.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import LineAnalysis, LinePresence, MarriageLines
from palmsight.engine.lines import classify_strength
from palmsight.engine.regions import select_band
from palmsight.engine.spatial_constants import MARRIAGE_BAND, MERCURY_BAND, SUN_BAND
from palmsight.utils.geometry import BoundingBox, axis_extent, sort_along
from palmsight.utils.math_helpers import clamp, round_half_up

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = EngineConfig()

_SUN_TEXT = {
    "strong": "Prominent Sun line — potential public recognition or success.",
    "moderate": "Visible Sun line — success possible with effort.",
    "weak": "Sun line weak or absent.",
}

_MERCURY_TEXT = {
    "strong": "Strong Mercury line — excellent communication and practical intelligence.",
    "moderate": "Mercury line present — good practical skills.",
    "weak": "Mercury line weak or absent.",
}

ABSENT = LinePresence(presence=False, analysis=None)


def average_slope(points: NDArray[np.float64]) -> float:
    """Mean dy/dx between x-sorted neighbours; dx is floored at 1px."""
    ordered = sort_along(points, 0)
    if len(ordered) < 2:
        return 0.0
    dx = np.maximum(1.0, np.diff(ordered[:, 0]))
    dy = np.diff(ordered[:, 1])
    return float(np.sum(dy / dx)) / max(1, len(ordered) - 1)


def analyze_sun_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LinePresence:
    """Diagonal trend in the ring-finger band marks the Sun (Apollo) line."""
    cfg = config or _DEFAULT_CONFIG
    region = select_band(points, box, SUN_BAND)
    if len(region) < cfg.sun_min_points:
        logger.debug("Sun line absent: %d points in band", len(region))
        return ABSENT

    diagonal = abs(average_slope(region)) > cfg.sun_slope_threshold
    length_px = axis_extent(region, 1)
    normalized = clamp(length_px / box.height, 0, 1)
    clarity = clamp(len(region) / max(length_px, 1.0) * cfg.clarity_density_gain, 0.2, 0.95)
    score = round_half_up((normalized * 0.6 + clarity * 0.4) * 100)
    strength = classify_strength(score, cfg)

    analysis = LineAnalysis(
        strength=strength,
        length_px=length_px,
        normalized_length=normalized,
        curvature=0.8,
        clarity=clarity,
        breaks=0,
        forks=0,
        islands=0,
        score=score,
        interpretation=_SUN_TEXT[strength],
        raw_points_count=len(region),
    )
    return LinePresence(presence=diagonal, analysis=analysis)


def analyze_mercury_line(points, box: BoundingBox, config: EngineConfig | None = None) -> LinePresence:
    """A vertically continuous run on the outer edge marks the Mercury line."""
    cfg = config or _DEFAULT_CONFIG
    region = select_band(points, box, MERCURY_BAND)
    if len(region) < cfg.mercury_min_points:
        logger.debug("Mercury line absent: %d points in band", len(region))
        return ABSENT

    ordered = sort_along(region, 1)
    n = len(ordered)
    steps = np.abs(np.diff(ordered[:, 0]))
    continuity = int(np.count_nonzero(steps < box.width * cfg.mercury_continuity_pct))
    presence = continuity >= max(1, int(n * cfg.mercury_continuity_share))

    length_px = axis_extent(ordered, 1)
    normalized = clamp(length_px / box.height, 0, 1)
    clarity = clamp(continuity / max(1, n) * 1.2, 0.2, 0.98)
    score = round_half_up((normalized * 0.5 + clarity * 0.5) * 100)
    strength = classify_strength(score, cfg)

    analysis = LineAnalysis(
        strength=strength,
        length_px=length_px,
        normalized_length=normalized,
        curvature=0.6,
        clarity=clarity,
        breaks=0,
        forks=0,
        islands=0,
        score=score,
        interpretation=_MERCURY_TEXT[strength],
        raw_points_count=n,
    )
    return LinePresence(presence=presence, analysis=analysis)


def analyze_marriage_lines(points, box: BoundingBox, config: EngineConfig | None = None) -> MarriageLines:
    """Distinct horizontal rows near the top of the Mercury edge."""
    cfg = config or _DEFAULT_CONFIG
    region = select_band(points, box, MARRIAGE_BAND)
    rows = {round_half_up(y) for y in region[:, 1]} if len(region) else set()
    count = min(cfg.marriage_max_lines, len(rows))

    if count >= 2:
        quality = "harmonious"
    elif count == 1:
        quality = "balanced"
    else:
        quality = "challenging"

    if count > 0:
        interpretation = f"Detected {count} marriage line(s) — {quality}."
    else:
        interpretation = "No clear marriage lines detected."
    return MarriageLines(count=count, quality=quality, interpretation=interpretation)
