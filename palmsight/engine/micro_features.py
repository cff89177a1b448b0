"""Micro-feature detector — islands, stars, crosses and branches from grid density."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import MicroFeatures
from palmsight.engine.regions import grid_counts
from palmsight.utils.geometry import BoundingBox
from palmsight.utils.math_helpers import round_half_up

_DEFAULT_CONFIG = EngineConfig()


def detect_micro_features(
    points: NDArray,
    box: BoundingBox,
    config: EngineConfig | None = None,
) -> MicroFeatures:
    cfg = config or _DEFAULT_CONFIG
    grid = grid_counts(points, box, cfg.micro_grid)

    dense = int(np.count_nonzero(grid >= cfg.micro_dense_count))
    isolated = int(np.count_nonzero((grid > 0) & (grid <= cfg.micro_isolated_max)))

    return MicroFeatures(
        islands=round_half_up(isolated / 2),
        stars=min(4, dense) if dense >= 2 else 0,
        crosses=round_half_up(dense / 3),
        branches=round_half_up(dense / 2),
        dense_cells=dense,
        isolated_cells=isolated,
    )
