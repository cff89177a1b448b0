"""Vedic correlations — dominant guna, chakra profile and planetary insights."""

from __future__ import annotations

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import ChakraProfile, Guna, LineAnalysis, MountAnalysis, VedicInsights
from palmsight.utils.math_helpers import clamp, round_half_up

_DEFAULT_CONFIG = EngineConfig()

# Guna weights. Sattva and rajas rows sum to 1.0; tamas sums to 0.90.
SATTVA_WEIGHTS = {
    "jupiter": 0.32,
    "sun": 0.18,
    "moon": 0.14,
    "heart_clarity": 0.18,
    "head_clarity": 0.08,
    "life_unbroken": 0.10,
}
RAJAS_WEIGHTS = {
    "mars": 0.33,
    "mercury": 0.22,
    "sun": 0.12,
    "head_clarity": 0.13,
    "life_strength": 0.10,
    "heart_unclear": 0.10,
}
TAMAS_WEIGHTS = {
    "saturn": 0.36,
    "moon_low": 0.18,
    "life_breaks": 0.18,
    "heart_unclear": 0.12,
    "head_unclear": 0.06,
}

# Each life-line break adds this much to the break penalty (capped at 1).
LIFE_BREAK_PENALTY = 0.15


def _norm(mounts: dict[str, MountAnalysis], name: str) -> float:
    mount = mounts.get(name)
    return clamp((mount.score if mount else 0) / 100, 0, 1)


def guna_scores(
    mounts: dict[str, MountAnalysis],
    life: LineAnalysis,
    head: LineAnalysis,
    heart: LineAnalysis,
) -> dict[Guna, float]:
    """Weighted sattva/rajas/tamas totals from mounts and line clarity."""
    head_clr = clamp(head.clarity, 0, 1)
    heart_clr = clamp(heart.clarity, 0, 1)
    break_penalty = min(1.0, life.breaks * LIFE_BREAK_PENALTY)

    features = {
        "jupiter": _norm(mounts, "jupiter"),
        "sun": _norm(mounts, "sun"),
        "moon": _norm(mounts, "moon"),
        "mars": _norm(mounts, "mars"),
        "mercury": _norm(mounts, "mercury"),
        "saturn": _norm(mounts, "saturn"),
        "moon_low": 1 - _norm(mounts, "moon"),
        "heart_clarity": heart_clr,
        "heart_unclear": 1 - heart_clr,
        "head_clarity": head_clr,
        "head_unclear": 1 - head_clr,
        "life_strength": clamp(life.score / 100, 0, 1),
        "life_breaks": break_penalty,
        "life_unbroken": 1 - break_penalty,
    }

    def total(weights: dict[str, float]) -> float:
        return sum(features[key] * w for key, w in weights.items())

    return {
        "sattva": total(SATTVA_WEIGHTS),
        "rajas": total(RAJAS_WEIGHTS),
        "tamas": total(TAMAS_WEIGHTS),
    }


def dominant_guna(
    mounts: dict[str, MountAnalysis],
    life: LineAnalysis,
    head: LineAnalysis,
    heart: LineAnalysis,
) -> Guna:
    """Highest weighted guna. Ties resolve sattva, then rajas, then tamas."""
    scores = guna_scores(mounts, life, head, heart)
    if scores["sattva"] >= scores["rajas"] and scores["sattva"] >= scores["tamas"]:
        return "sattva"
    if scores["rajas"] >= scores["tamas"]:
        return "rajas"
    return "tamas"


def chakra_profile(
    mounts: dict[str, MountAnalysis],
    life: LineAnalysis,
    head: LineAnalysis,
    heart: LineAnalysis,
    config: EngineConfig | None = None,
) -> ChakraProfile:
    cfg = config or _DEFAULT_CONFIG
    root = round_half_up(life.score)
    sacral = round_half_up((mounts["venus"].score + mounts["moon"].score) / 2)
    solar = round_half_up(mounts["sun"].score)
    heart_val = round_half_up(heart.score)
    throat = round_half_up(mounts["mercury"].score)
    third_eye = round_half_up(head.score)
    crown = round_half_up((mounts["jupiter"].score + mounts["saturn"].score) / 2)

    values = {
        "root": root,
        "sacral": sacral,
        "solar": solar,
        "heart": heart_val,
        "throat": throat,
        "thirdEye": third_eye,
        "crown": crown,
    }
    low = [name for name, v in values.items() if v < cfg.insight_low_score]
    summary = f"Consider focusing on: {', '.join(low)}" if low else "All chakras balanced"

    return ChakraProfile(
        root=root,
        sacral=sacral,
        solar=solar,
        heart=heart_val,
        throat=throat,
        third_eye=third_eye,
        crown=crown,
        summary=summary,
    )


def vedic_insights(
    mounts: dict[str, MountAnalysis],
    life_score: int,
    head_score: int,
    heart_score: int,
    config: EngineConfig | None = None,
) -> VedicInsights:
    cfg = config or _DEFAULT_CONFIG
    high = cfg.insight_high_score
    ruling_planet = "Jupiter" if mounts["jupiter"].score >= mounts["saturn"].score else "Saturn"

    if life_score > high:
        element = "fire"
    elif heart_score > high:
        element = "water"
    else:
        element = "air"

    if life_score > high:
        dosha = "kapha"
    elif head_score > high:
        dosha = "vata"
    else:
        dosha = "pitta"

    chakra_alignment = "Heart" if heart_score > head_score else "Third Eye"
    if mounts["saturn"].score > cfg.insight_peak_score:
        karmic_lessons = ["Discipline, responsibility and lessons of duty"]
    else:
        karmic_lessons = ["Focus on steady growth and service"]

    return VedicInsights(
        ruling_planet=ruling_planet,
        element=element,
        dosha=dosha,
        chakra_alignment=chakra_alignment,
        karmic_lessons=karmic_lessons,
    )
