"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


class EmptyInputError(ValueError):
    """Raised when a keypoint set has no points to analyze."""


@dataclass(frozen=True)
class BoundingBox:
    """Normalization frame for every palm measurement.

    ``width`` and ``height`` are clamped to ≥ 1.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    width: float
    height: float
    center_x: float
    center_y: float

    def to_dict(self) -> dict[str, float]:
        return {
            "minX": self.min_x,
            "maxX": self.max_x,
            "minY": self.min_y,
            "maxY": self.max_y,
            "width": self.width,
            "height": self.height,
            "centerX": self.center_x,
            "centerY": self.center_y,
        }


def as_points(points) -> NDArray[np.float64]:
    """Coerce any (x, y) sequence into an Nx2 float array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> BoundingBox:
    """Compute the bounding box of a point set."""
    points = as_points(points)
    if len(points) == 0:
        raise EmptyInputError("No points provided")

    min_x = float(np.min(points[:, 0]))
    max_x = float(np.max(points[:, 0]))
    min_y = float(np.min(points[:, 1]))
    max_y = float(np.max(points[:, 1]))
    return BoundingBox(
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        width=max(1.0, max_x - min_x),
        height=max(1.0, max_y - min_y),
        center_x=(min_x + max_x) / 2,
        center_y=(min_y + max_y) / 2,
    )


def axis_extent(points: NDArray[np.float64], axis: int) -> float:
    """max − min along one axis (0 = x, 1 = y). Empty → 0."""
    if len(points) == 0:
        return 0.0
    return float(np.max(points[:, axis]) - np.min(points[:, axis]))


def sort_along(points: NDArray[np.float64], axis: int) -> NDArray[np.float64]:
    """Stable sort of points along one axis."""
    order = np.argsort(points[:, axis], kind="stable")
    return points[order]


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))
