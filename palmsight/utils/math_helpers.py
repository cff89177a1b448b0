"""Math helpers — clamp, mean/variance, rounding. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Bound ``value`` to [lo, hi]."""
    return max(lo, min(hi, value))


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean. Empty input → 0.0."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def variance(values: Iterable[float]) -> float:
    """Population variance. Empty input → 0.0."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.var(arr))


def round_half_up(value: float) -> int:
    """Round to the nearest int with .5 going up: 0.5 → 1, 2.5 → 3."""
    return int(math.floor(value + 0.5))
