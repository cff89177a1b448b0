"""Shared test fixtures — deterministic palm keypoint layouts."""

from __future__ import annotations

from dataclasses import replace

import numpy as np
import pytest

from palmsight.engine.context import KeypointSet, LineAnalysis, MountAnalysis
from palmsight.engine.lines import empty_line
from palmsight.engine.mounts import build_mount
from palmsight.engine.spatial_constants import MOUNT_REGIONS


def uniform_palm_grid() -> list[tuple[float, float]]:
    """80 evenly spaced points: 10 columns (x = 20..380) × 8 rows (y = 0..600)."""
    return [(20.0 + 40.0 * i, 600.0 * j / 7) for j in range(8) for i in range(10)]


def life_line_cluster() -> list[tuple[float, float]]:
    """20 points along x = 100, y ∈ [100, 500] — a dense vertical life line."""
    return [(100.0, float(y)) for y in np.linspace(100.0, 500.0, 20)]


# A 3-point "palm" whose points all miss the heart-line band.
THREE_POINTS = [(0.0, 0.0), (200.0, 300.0), (400.0, 600.0)]

# Everything piled into the top-left corner, plus one far point to open the box.
CORNER_POINTS = [(float(x), float(y)) for x in range(0, 20, 4) for y in range(0, 20, 4)] + [(400.0, 600.0)]


def make_line(strength: str = "moderate", score: int = 60, **overrides) -> LineAnalysis:
    """A line analysis with sensible defaults; override any field by keyword."""
    return replace(empty_line(), strength=strength, score=score, **overrides)


def make_mounts(default: int = 60, **scores: int) -> dict[str, MountAnalysis]:
    """All seven mounts at ``default`` score, with per-mount overrides."""
    return {name: build_mount(name, scores.get(name, default)) for name in MOUNT_REGIONS}


def make_keypoints(points, detection_id: str = "det-1", confidence: float = 0.9) -> KeypointSet:
    return KeypointSet.from_points(points, detection_id=detection_id, confidence=confidence)


def prediction_record(points, detection_id: str = "det-1", confidence: float = 0.9) -> dict:
    """Detector-shaped record, including the box metadata the engine ignores."""
    return {
        "x": 200.0,
        "y": 300.0,
        "width": 400.0,
        "height": 600.0,
        "confidence": confidence,
        "class": "palm",
        "class_id": 0,
        "detection_id": detection_id,
        "points": [{"x": x, "y": y} for x, y in points],
    }


@pytest.fixture
def scenario_keypoints() -> KeypointSet:
    return make_keypoints(uniform_palm_grid() + life_line_cluster())


@pytest.fixture
def three_point_keypoints() -> KeypointSet:
    return make_keypoints(THREE_POINTS)


@pytest.fixture
def corner_keypoints() -> KeypointSet:
    return make_keypoints(CORNER_POINTS)
