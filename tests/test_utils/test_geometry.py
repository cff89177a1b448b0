"""Tests for geometry and math helpers."""

from __future__ import annotations

import numpy as np
import pytest

from palmsight.utils.geometry import EmptyInputError, as_points, bbox, distance, sort_along
from palmsight.utils.math_helpers import clamp, mean, round_half_up, variance


def test_bbox_basic():
    box = bbox(np.array([[10.0, 20.0], [110.0, 220.0], [60.0, 50.0]]))
    assert box.min_x == 10.0
    assert box.max_x == 110.0
    assert box.width == 100.0
    assert box.height == 200.0
    assert box.center_x == 60.0
    assert box.center_y == 120.0


def test_bbox_empty_raises():
    with pytest.raises(EmptyInputError, match="No points provided"):
        bbox(np.empty((0, 2)))


def test_bbox_degenerate_clamps_to_one():
    box = bbox([(5.0, 5.0)])
    assert box.width == 1.0
    assert box.height == 1.0


def test_bbox_to_dict_keys():
    d = bbox([(0, 0), (4, 2)]).to_dict()
    assert set(d) == {"minX", "maxX", "minY", "maxY", "width", "height", "centerX", "centerY"}


def test_empty_input_error_is_value_error():
    assert issubclass(EmptyInputError, ValueError)


def test_clamp_defaults_to_unit_interval():
    assert clamp(1.7) == 1.0
    assert clamp(-0.3) == 0.0
    assert clamp(0.4) == 0.4
    assert clamp(150, 0, 100) == 100


def test_mean_variance_empty_are_zero():
    assert mean([]) == 0.0
    assert variance([]) == 0.0


def test_mean_variance_values():
    assert mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert variance([1, 2, 3, 4]) == pytest.approx(1.25)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(54.7) == 55


def test_as_points_and_sort_along():
    pts = as_points([(3, 1), (1, 2), (2, 0)])
    assert pts.shape == (3, 2)
    assert sort_along(pts, 0)[:, 0].tolist() == [1, 2, 3]
    assert sort_along(pts, 1)[:, 1].tolist() == [0, 1, 2]
    assert as_points([]).shape == (0, 2)


def test_distance():
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)
    assert distance((1.5, 2.0), (1.5, 2.0)) == 0.0
