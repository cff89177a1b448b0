"""Finger analyzer — relative finger length from column tip heights."""

from __future__ import annotations

from numpy.typing import NDArray

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import FingerAnalysis, FingerType
from palmsight.engine.regions import finger_tip_ys
from palmsight.utils.geometry import BoundingBox
from palmsight.utils.math_helpers import clamp, mean, round_half_up

_DEFAULT_CONFIG = EngineConfig()

# Not measurable from a flat keypoint cloud; reported as fixed nominal values.
NOMINAL_FLEXIBILITY = 0.7
NOMINAL_ALIGNMENT = 0.85

FINGER_MEANINGS: dict[str, tuple[str, str]] = {
    "thumb": ("Thumb", "Associated with willpower."),
    "index": ("Index", "Linked to leadership."),
    "middle": ("Middle", "Shows responsibility."),
    "ring": ("Ring", "Shows creative / relational leanings."),
    "pinky": ("Pinky", "Shows communication ability."),
}


def classify_finger(ratio: float, config: EngineConfig | None = None) -> FingerType:
    cfg = config or _DEFAULT_CONFIG
    if ratio > cfg.finger_long_ratio:
        return "long"
    if ratio < cfg.finger_short_ratio:
        return "short"
    return "average"


def analyze_fingers(
    points: NDArray,
    box: BoundingBox,
    config: EngineConfig | None = None,
) -> dict[str, FingerAnalysis]:
    cfg = config or _DEFAULT_CONFIG
    tips = finger_tip_ys(points, box)
    lengths = {name: max(0.0, box.max_y - tip) for name, tip in tips.items()}
    mean_len = max(1.0, mean(lengths.values()))

    fingers: dict[str, FingerAnalysis] = {}
    for name, length in lengths.items():
        ratio = length / mean_len
        finger_type = classify_finger(ratio, cfg)
        label, meaning = FINGER_MEANINGS[name]
        fingers[name] = FingerAnalysis(
            length_px=length,
            length_ratio=round_half_up(ratio * 100) / 100,
            flexibility=NOMINAL_FLEXIBILITY,
            alignment=NOMINAL_ALIGNMENT,
            type=finger_type,
            significance=f"{label} finger: {finger_type}. {meaning}",
            score=round_half_up(clamp(ratio, 0.2, 1.4) * cfg.finger_score_gain),
        )
    return fingers
