"""Tests for mount and finger analysis."""

from __future__ import annotations

import pytest

from palmsight.engine.fingers import analyze_fingers, classify_finger
from palmsight.engine.mounts import (
    PLANETARY_RULERS,
    PROMINENT_TRAIT,
    analyze_mounts,
    classify_development,
    mount_score,
)
from palmsight.engine.regions import finger_tip_ys, mount_counts
from palmsight.engine.spatial_constants import MOUNT_REGIONS
from palmsight.utils.geometry import as_points, bbox

# Corners open a 100×100 frame; (0, 0) sits in no mount, (100, 100) in mercury and moon.
CORNERS = [(0.0, 0.0), (100.0, 100.0)]


class TestMounts:
    def test_all_seven_mounts_in_order(self):
        pts = as_points(CORNERS)
        mounts = analyze_mounts(pts, bbox(pts))
        assert list(mounts) == ["venus", "mars", "jupiter", "saturn", "mercury", "moon", "sun"]
        assert list(mounts) == list(MOUNT_REGIONS)
        for name, mount in mounts.items():
            assert mount.planetary_ruler == PLANETARY_RULERS[name]

    def test_dense_venus_is_overdeveloped_and_prominent(self):
        pts = as_points(CORNERS + [(10.0, 80.0)] * 8)
        mounts = analyze_mounts(pts, bbox(pts))
        venus = mounts["venus"]
        assert venus.score == 96
        assert venus.development == "overdeveloped"
        assert venus.characteristics == ["Artistic", "Affectionate", PROMINENT_TRAIT]

    def test_sparse_mounts_floor_at_min_score(self):
        pts = as_points(CORNERS + [(10.0, 80.0)] * 8)
        mounts = analyze_mounts(pts, bbox(pts))
        assert mounts["jupiter"].score == 8
        assert mounts["jupiter"].development == "underdeveloped"
        # 1 of 10 points × 160 = 16
        assert mounts["mercury"].score == 16
        assert PROMINENT_TRAIT not in mounts["mercury"].characteristics

    def test_counts_use_inclusive_bounds(self):
        pts = as_points(CORNERS + [(28.0, 60.0)])
        counts = mount_counts(pts, bbox(pts))
        assert counts["venus"] == 1
        assert counts["mercury"] == 1
        assert counts["moon"] == 1

    def test_development_thresholds_are_strict(self):
        assert classify_development(78.0) == "balanced"
        assert classify_development(78.1) == "overdeveloped"
        assert classify_development(60.0) == "underdeveloped"
        assert classify_development(60.1) == "balanced"

    def test_score_clamped(self):
        assert mount_score(0, 100) == 8
        assert mount_score(100, 100) == 96
        assert mount_score(5, 0) == 96

    def test_scores_within_bounds(self, scenario_keypoints):
        box = bbox(scenario_keypoints.points)
        for mount in analyze_mounts(scenario_keypoints.points, box).values():
            assert 0 <= mount.score <= 100


def _finger_palm(tip_ys):
    """Tips centred in each of the five 100px finger columns of a 600px-wide frame."""
    tips = [(50.0 + 100.0 * i, y) for i, y in enumerate(tip_ys)]
    return as_points(tips + [(0.0, 600.0), (600.0, 600.0)])


class TestFingers:
    def test_equal_fingers_are_average(self):
        pts = _finger_palm([100.0] * 5)
        fingers = analyze_fingers(pts, bbox(pts))
        assert list(fingers) == ["thumb", "index", "middle", "ring", "pinky"]
        for finger in fingers.values():
            assert finger.length_px == pytest.approx(500.0)
            assert finger.length_ratio == 1.0
            assert finger.type == "average"
            assert finger.score == 70

    def test_long_middle_finger(self):
        pts = _finger_palm([250.0, 250.0, 0.0, 250.0, 250.0])
        fingers = analyze_fingers(pts, bbox(pts))
        middle = fingers["middle"]
        assert middle.type == "long"
        assert middle.length_ratio == 1.5
        assert middle.score == 98
        assert middle.significance == "Middle finger: long. Shows responsibility."

        ring = fingers["ring"]
        assert ring.type == "short"
        # 350 / 400 = 0.875 → rounds half up
        assert ring.length_ratio == 0.88
        assert ring.score == 61

    def test_tips_found_per_column(self):
        pts = _finger_palm([100.0, 80.0, 60.0, 90.0, 120.0])
        tips = finger_tip_ys(pts, bbox(pts))
        assert tips == {"thumb": 100.0, "index": 80.0, "middle": 60.0, "ring": 90.0, "pinky": 120.0}

    def test_empty_column_falls_back_to_palm_bottom(self):
        pts = as_points([(0.0, 0.0), (600.0, 600.0)])
        tips = finger_tip_ys(pts, bbox(pts))
        assert tips["middle"] == 600.0
        fingers = analyze_fingers(pts, bbox(pts))
        assert fingers["middle"].length_px == 0.0

    @pytest.mark.parametrize("ratio,expected", [(1.11, "long"), (1.1, "average"), (0.9, "average"), (0.89, "short")])
    def test_classify_finger(self, ratio, expected):
        assert classify_finger(ratio) == expected
