"""Tests for the line analyzer and line region selection."""

from __future__ import annotations

import numpy as np
import pytest

from palmsight.engine.config import EngineConfig
from palmsight.engine.lines import (
    NO_LINE_INTERPRETATION,
    analyze_heart_line,
    analyze_life_line,
    analyze_line,
    classify_strength,
    count_breaks,
    empty_line,
)
from palmsight.engine.regions import fate_line_region, heart_line_region, life_line_region, select_band
from palmsight.engine.spatial_constants import MERCURY_BAND
from palmsight.utils.geometry import as_points, bbox
from tests.conftest import THREE_POINTS, life_line_cluster, uniform_palm_grid

# 300×300 frame shared by the synthetic line tests
FRAME = bbox([(0.0, 0.0), (300.0, 300.0)])


def _horizontal(xs, y=150.0):
    return as_points([(float(x), y) for x in xs])


def test_empty_region_returns_sentinel():
    result = analyze_line(np.empty((0, 2)), FRAME, "horizontal")
    assert result == empty_line()
    assert result.strength == "weak"
    assert result.score == 30
    assert result.interpretation == NO_LINE_INTERPRETATION
    assert result.raw_points_count == 0


class TestBreakCounting:
    def test_single_large_gap_is_one_break(self):
        pts = _horizontal(list(range(0, 101, 5)) + list(range(200, 301, 5)))
        assert analyze_line(pts, FRAME, "horizontal").breaks == 1

    def test_no_gap_no_breaks(self):
        pts = _horizontal(range(0, 301, 5))
        result = analyze_line(pts, FRAME, "horizontal")
        assert result.breaks == 0
        assert result.islands == 0

    def test_vertical_break_uses_height(self):
        pts = as_points([(150.0, float(y)) for y in list(range(0, 101, 5)) + list(range(200, 301, 5))])
        result = analyze_line(pts, FRAME, "vertical")
        assert result.breaks == 1
        assert result.islands == 1

    def test_count_breaks_threshold_is_strict(self):
        pts = _horizontal([0, 18, 36])
        assert count_breaks(pts, 0, 18.0) == 0
        assert count_breaks(pts, 0, 17.9) == 2


def test_straight_line_metrics():
    pts = _horizontal(range(0, 301, 5))
    result = analyze_line(pts, FRAME, "horizontal")
    assert result.length_px == pytest.approx(300.0)
    assert result.normalized_length == pytest.approx(1.0)
    # Midpoint sits exactly on the chord
    assert result.curvature == pytest.approx(0.95)
    # 61 points over 300px → density 0.203 × 6 → clamped at 0.99
    assert result.clarity == pytest.approx(0.99)
    assert result.forks == 0
    assert result.score == round(100 * (0.45 + 0.95 * 0.30 + 0.99 * 0.25))
    assert result.strength == "strong"


def test_bowed_line_lowers_curvature():
    xs = np.arange(0, 301, 10, dtype=float)
    ys = 150.0 + 60.0 * np.sin(np.pi * xs / 300.0)
    result = analyze_line(np.column_stack([xs, ys]), FRAME, "horizontal")
    assert result.curvature == pytest.approx(0.1)


def test_scattered_secondary_axis_sets_fork():
    xs = np.arange(0, 301, 10, dtype=float)
    ys = np.where(np.arange(len(xs)) % 2 == 0, 100.0, 200.0)
    assert analyze_line(np.column_stack([xs, ys]), FRAME, "horizontal").forks == 1


def test_fewer_than_three_points_neutral_curvature():
    result = analyze_line(_horizontal([10, 200]), FRAME, "horizontal")
    assert result.curvature == 0.5


def test_clarity_monotonic_in_density():
    """More points over the same length never lowers clarity."""
    previous = 0.0
    for n in (3, 6, 12, 24, 48, 96):
        pts = _horizontal(np.linspace(0, 300, n))
        clarity = analyze_line(pts, FRAME, "horizontal").clarity
        assert clarity >= previous
        previous = clarity


@pytest.mark.parametrize(
    "score,expected",
    [(100, "strong"), (75, "strong"), (74, "moderate"), (55, "moderate"), (54, "weak"), (0, "weak")],
)
def test_strength_thresholds(score, expected):
    assert classify_strength(score) == expected


def test_bounds_hold_for_random_clouds():
    rng = np.random.default_rng(42)
    for size in (1, 2, 5, 40, 300):
        pts = rng.uniform(0, 300, size=(size, 2))
        for orientation in ("horizontal", "vertical"):
            r = analyze_line(pts, FRAME, orientation)
            assert 0 <= r.score <= 100
            assert 0.1 <= r.curvature <= 0.95
            assert 0.12 <= r.clarity <= 0.99
            assert r.strength == classify_strength(r.score)


def test_custom_config_changes_break_threshold():
    pts = _horizontal(list(range(0, 101, 5)) + list(range(130, 301, 5)))
    assert analyze_line(pts, FRAME, "horizontal").breaks == 1
    loose = EngineConfig(break_gap_pct=0.2)
    assert analyze_line(pts, FRAME, "horizontal", loose).breaks == 0


class TestLineRegions:
    def test_life_line_region_on_scenario(self):
        pts = as_points(uniform_palm_grid() + life_line_cluster())
        box = bbox(pts)
        region = life_line_region(pts, box)
        # 5 grid columns × 6 grid rows in band, plus the whole cluster
        assert len(region) == 50
        assert np.all(region[:, 0] < box.center_x)

    def test_life_line_scenario_is_at_least_moderate(self):
        pts = as_points(uniform_palm_grid() + life_line_cluster())
        result = analyze_life_line(pts, bbox(pts))
        assert result.strength in ("moderate", "strong")
        assert result.raw_points_count >= 15

    def test_three_points_miss_heart_band(self):
        pts = as_points(THREE_POINTS)
        box = bbox(pts)
        assert len(heart_line_region(pts, box)) == 0
        result = analyze_heart_line(pts, box)
        assert result.strength == "weak"
        assert result.score == 30


def test_analyze_line_accepts_plain_point_lists():
    result = analyze_line([(0.0, 150.0), (100.0, 150.0), (200.0, 150.0)], FRAME, "horizontal")
    assert result.raw_points_count == 3
    assert result.length_px == pytest.approx(200.0)
    assert analyze_line([], FRAME, "vertical") == empty_line()


def test_select_band_accepts_plain_point_lists():
    box = bbox([(0.0, 0.0), (300.0, 300.0)])
    region = heart_line_region([(150.0, 80.0), (150.0, 250.0)], box)
    assert region.tolist() == [[150.0, 80.0]]


class TestDegenerateBox:
    """A palm one pixel wide: every point shares x, so width is clamped to 1."""

    @staticmethod
    def _column():
        pts = as_points([(100.0, 600.0 * i / 39) for i in range(40)])
        return pts, bbox(pts)

    def test_column_is_fate_band_not_life_band(self):
        pts, box = self._column()
        assert box.width == 1.0
        assert len(life_line_region(pts, box)) == 0
        assert len(fate_line_region(pts, box)) == 33

    def test_column_falls_in_mercury_band(self):
        pts, box = self._column()
        assert len(select_band(pts, box, MERCURY_BAND)) == 28

    def test_life_line_is_sentinel(self):
        pts, box = self._column()
        assert analyze_life_line(pts, box) == empty_line()
