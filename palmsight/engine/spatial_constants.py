"""Anatomical region geometry as fractions of the palm bounding box.

Every region is a ratio of box width/height, so the same table scales to any
photo resolution or palm size. Each band edge is anchored on the box side it
faces (``min_*`` for near edges, ``max_*`` for far edges, ``center_x`` for the
mid-palm split), which keeps the regions apart even when a side is clamped
to 1px. Line bands use strict (open) bounds; mount rectangles use inclusive
bounds measured from ``min_x``/``min_y``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Band:
    """Open-interval filter. ``None`` leaves that edge unbounded.

    left         x > min_x + left·w
    right        x < max_x − right·w
    outer        x > max_x − outer·w    (strip along the far x edge)
    top          y > min_y + top·h
    bottom       y < max_y − bottom·h
    thumb_side   x < center_x
    mid_x        |x − center_x| < mid_x·w
    line_y       |y − (min_y + line_y·h)| < line_tolerance·h
    """

    left: float | None = None
    right: float | None = None
    outer: float | None = None
    top: float | None = None
    bottom: float | None = None
    thumb_side: bool = False
    mid_x: float | None = None
    line_y: float | None = None
    line_tolerance: float = 0.0


@dataclass(frozen=True)
class Rect:
    """Closed rectangle [x0, x1] × [y0, y1] in box fractions."""

    x0: float
    x1: float
    y0: float
    y1: float


# ── Principal lines ──
# Life: thumb half of the palm, vertical sweep.
LIFE_BAND = Band(thumb_side=True, top=0.12, bottom=0.04)
# Head: horizontal band at mid-palm.
HEAD_BAND = Band(left=0.12, right=0.12, line_y=0.45, line_tolerance=0.07)
# Heart: horizontal band nearer the finger roots.
HEART_BAND = Band(left=0.08, right=0.08, line_y=0.27, line_tolerance=0.07)
# Fate: vertical band down the palm centre.
FATE_BAND = Band(mid_x=0.12, top=0.12, bottom=0.05)

# ── Minor lines ──
SUN_BAND = Band(left=0.48, right=0.06, top=0.28, bottom=0.15)
MERCURY_BAND = Band(outer=0.26, top=0.20, bottom=0.08)
MARRIAGE_BAND = Band(outer=0.28, line_y=0.20, line_tolerance=0.06)

# ── Mounts ── (insertion order is the reporting order)
MOUNT_REGIONS: dict[str, Rect] = {
    "venus": Rect(0.00, 0.28, 0.60, 1.00),
    "mars": Rect(0.25, 0.45, 0.50, 0.85),
    "jupiter": Rect(0.08, 0.32, 0.00, 0.35),
    "saturn": Rect(0.32, 0.52, 0.00, 0.40),
    "mercury": Rect(0.70, 1.00, 0.56, 1.00),
    "moon": Rect(0.56, 1.00, 0.48, 1.00),
    "sun": Rect(0.52, 0.74, 0.00, 0.40),
}

# ── Fingers ──
# Box width split into 6 slices; finger i samples around slice centre (i + 0.5)
# with a half-window of slice / 1.1, so neighbouring windows overlap.
FINGER_SLICES = 6
FINGER_WINDOW_DIVISOR = 1.1
FINGER_NAMES = ("thumb", "index", "middle", "ring", "pinky")
