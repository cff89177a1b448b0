"""Remedies — time-bucketed recommendations keyed on weak lines and low mounts."""

from __future__ import annotations

import random

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import LineAnalysis, LinePresence, MountAnalysis, Recommendations

_DEFAULT_CONFIG = EngineConfig()

BASE_IMMEDIATE = [
    "Short breathing (5-10 min)",
    "Hydration and short walks",
    "Mindful 5-minute break daily",
]
BASE_SHORT_TERM = [
    "21-day gratitude journaling",
    "Start 10-minute daily meditation",
    "Simple sleep routine",
]
BASE_LONG_TERM = [
    "Mentorship & structured study",
    "Quarterly retreat or reset",
    "Skill building plan (3-6 months)",
]
BASE_SPIRITUAL = [
    "Daily 5-minute reflection",
    "Weekly longer practice or reading",
]

# One of these opens the spiritual bucket, picked uniformly.
SPIRITUAL_PRACTICES = [
    "Daily mantra recitation",
    "Regular puja practice",
    "Study sacred texts",
    "Sunrise gratitude practice",
]


def pick_practice(rng: random.Random | None = None) -> str:
    """Uniform choice from SPIRITUAL_PRACTICES. Pass a seeded ``rng`` for repeatable output."""
    return (rng or random).choice(SPIRITUAL_PRACTICES)


def build_recommendations(
    life: LineAnalysis,
    head: LineAnalysis,
    heart: LineAnalysis,
    fate: LinePresence,
    mounts: dict[str, MountAnalysis],
    rng: random.Random | None = None,
    config: EngineConfig | None = None,
) -> Recommendations:
    cfg = config or _DEFAULT_CONFIG
    immediate: list[str] = []
    short_term: list[str] = []
    long_term: list[str] = []
    spiritual: list[str] = [pick_practice(rng)]

    if life.strength == "weak":
        immediate.append("Start daily pranayama practice")
        short_term.append("Consult Ayurvedic practitioner")
    if heart.strength == "weak":
        immediate.append("Practice heart chakra meditation")
        short_term.append("Journal emotional patterns")
    if head.strength == "weak":
        immediate.append("Begin meditation practice")
        short_term.append("Study Vedic philosophy")

    if not fate.presence:
        long_term.append("Align career with life purpose")
    if mounts["mercury"].score < cfg.insight_low_score:
        short_term.append("Practice one honest conversation each week")
    if mounts["jupiter"].score < cfg.insight_low_score:
        long_term.append("Find a teacher or mentor for structured guidance")
    if mounts["moon"].score < cfg.insight_low_score:
        spiritual.append("Monday evening moon meditation")

    return Recommendations(
        immediate=immediate + BASE_IMMEDIATE,
        short_term=short_term + BASE_SHORT_TERM,
        long_term=long_term + BASE_LONG_TERM,
        spiritual=spiritual + BASE_SPIRITUAL,
    )
