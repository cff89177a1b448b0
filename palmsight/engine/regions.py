"""Region selector — partitions the keypoint cloud into anatomical sub-regions."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palmsight.engine.spatial_constants import (
    FATE_BAND,
    FINGER_NAMES,
    FINGER_SLICES,
    FINGER_WINDOW_DIVISOR,
    HEAD_BAND,
    HEART_BAND,
    LIFE_BAND,
    MOUNT_REGIONS,
    Band,
    Rect,
)
from palmsight.utils.geometry import BoundingBox, as_points


def select_band(points: NDArray[np.float64], box: BoundingBox, band: Band) -> NDArray[np.float64]:
    """Points strictly inside a band. May return an empty (0, 2) array."""
    points = as_points(points)
    if len(points) == 0:
        return points
    x = points[:, 0]
    y = points[:, 1]
    mask = np.ones(len(points), dtype=bool)

    if band.left is not None:
        mask &= x > box.min_x + box.width * band.left
    if band.right is not None:
        mask &= x < box.max_x - box.width * band.right
    if band.outer is not None:
        mask &= x > box.max_x - box.width * band.outer
    if band.top is not None:
        mask &= y > box.min_y + box.height * band.top
    if band.bottom is not None:
        mask &= y < box.max_y - box.height * band.bottom

    if band.thumb_side:
        mask &= x < box.center_x
    if band.mid_x is not None:
        mask &= np.abs(x - box.center_x) < box.width * band.mid_x
    if band.line_y is not None:
        line = box.min_y + box.height * band.line_y
        mask &= np.abs(y - line) < box.height * band.line_tolerance

    return points[mask]


def select_rect(points: NDArray[np.float64], box: BoundingBox, rect: Rect) -> NDArray[np.float64]:
    """Points inside a closed rectangle."""
    points = as_points(points)
    if len(points) == 0:
        return points
    x0 = box.min_x + box.width * rect.x0
    x1 = box.min_x + box.width * rect.x1
    y0 = box.min_y + box.height * rect.y0
    y1 = box.min_y + box.height * rect.y1
    x = points[:, 0]
    y = points[:, 1]
    mask = (x >= x0) & (x <= x1) & (y >= y0) & (y <= y1)
    return points[mask]


def life_line_region(points: NDArray[np.float64], box: BoundingBox) -> NDArray[np.float64]:
    return select_band(points, box, LIFE_BAND)


def head_line_region(points: NDArray[np.float64], box: BoundingBox) -> NDArray[np.float64]:
    return select_band(points, box, HEAD_BAND)


def heart_line_region(points: NDArray[np.float64], box: BoundingBox) -> NDArray[np.float64]:
    return select_band(points, box, HEART_BAND)


def fate_line_region(points: NDArray[np.float64], box: BoundingBox) -> NDArray[np.float64]:
    return select_band(points, box, FATE_BAND)


def mount_counts(points: NDArray[np.float64], box: BoundingBox) -> dict[str, int]:
    """Points per mount rectangle, in reporting order."""
    return {name: len(select_rect(points, box, rect)) for name, rect in MOUNT_REGIONS.items()}


def finger_tip_ys(points: NDArray[np.float64], box: BoundingBox) -> dict[str, float]:
    """Topmost (minimum) y in each finger column; ``max_y`` when a column is empty."""
    points = as_points(points)
    slice_w = box.width / FINGER_SLICES
    half_window = slice_w / FINGER_WINDOW_DIVISOR
    tips: dict[str, float] = {}
    for i, name in enumerate(FINGER_NAMES):
        x0 = box.min_x + slice_w * (i + 0.5)
        if len(points):
            in_col = points[(points[:, 0] >= x0 - half_window) & (points[:, 0] <= x0 + half_window)]
        else:
            in_col = points
        tips[name] = float(np.min(in_col[:, 1])) if len(in_col) else box.max_y
    return tips


def grid_counts(points: NDArray[np.float64], box: BoundingBox, size: int) -> NDArray[np.int64]:
    """size×size occupancy grid over the box, indexed [row(y), col(x)]."""
    points = as_points(points)
    grid = np.zeros((size, size), dtype=np.int64)
    if len(points) == 0:
        return grid
    cell_w = box.width / size
    cell_h = box.height / size
    gx = np.clip(np.floor((points[:, 0] - box.min_x) / cell_w).astype(np.int64), 0, size - 1)
    gy = np.clip(np.floor((points[:, 1] - box.min_y) / cell_h).astype(np.int64), 0, size - 1)
    np.add.at(grid, (gy, gx), 1)
    return grid
