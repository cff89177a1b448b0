"""Palm interpreter — composes line, mount and finger analyses into reading insights.

This is the only stage that reads several analyses together. Everything here
is deterministic except the spiritual-practice pick, which draws from the
``rng`` passed in.
"""

from __future__ import annotations

import dataclasses
import random

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import (
    CareerInsights,
    ChakraProfile,
    HealthInsights,
    Insights,
    LineAnalysis,
    LinePresence,
    MountAnalysis,
    PalmAnalyses,
    Personality,
    Recommendations,
    RelationshipInsights,
    SpiritualProfile,
    VedicInsights,
)
from palmsight.engine.narrative import (
    LINE_SIGNIFICANCE,
    career_text,
    fate_line_message,
    guidance_text,
    health_text,
    line_message,
    personality_text,
    relationships_text,
    spirituality_text,
)
from palmsight.engine.remedies import build_recommendations
from palmsight.engine.timeline import build_timeline
from palmsight.engine.vedic import chakra_profile, dominant_guna, vedic_insights
from palmsight.utils.math_helpers import round_half_up

_DEFAULT_CONFIG = EngineConfig()


def annotate_line(
    name: str,
    label: str,
    analysis: LineAnalysis,
    config: EngineConfig | None = None,
) -> LineAnalysis:
    """Swap the analyzer's short interpretation for the full line message."""
    return dataclasses.replace(
        analysis,
        interpretation=line_message(label, analysis, config),
        vedic_significance=LINE_SIGNIFICANCE[name],
    )


def annotate_fate(fate: LineAnalysis) -> LinePresence:
    if fate.raw_points_count == 0:
        return LinePresence(presence=False, analysis=None)
    analysis = dataclasses.replace(
        fate,
        interpretation=fate_line_message(fate),
        vedic_significance=LINE_SIGNIFICANCE["fate"],
    )
    return LinePresence(presence=True, analysis=analysis)


def compose_personality(
    a: PalmAnalyses,
    fate: LinePresence,
    config: EngineConfig,
) -> Personality:
    guna = dominant_guna(a.mounts, a.life, a.head, a.heart)

    strengths: list[str] = []
    weaknesses: list[str] = []
    for line, strength_word, growth_word in (
        (a.life, "vitality", "physical health"),
        (a.heart, "emotional depth", "emotional balance"),
        (a.head, "intellectual capacity", "mental clarity"),
    ):
        if line.strength == "strong":
            strengths.append(strength_word)
        else:
            weaknesses.append(growth_word)
    if fate.presence:
        strengths.append("life purpose")
    else:
        weaknesses.append("direction")

    # Traits from the two most developed mounts (stable on ties)
    ranked = sorted(a.mounts.values(), key=lambda m: -m.score)
    traits: list[str] = []
    for mount in ranked[:2]:
        for trait in mount.characteristics:
            if trait not in traits:
                traits.append(trait)

    return Personality(
        overall=personality_text(a.life, a.heart, a.head, a.mounts, guna, config),
        traits=traits,
        dominant_guna=guna,
        strengths=strengths,
        weaknesses=weaknesses,
    )


def compose_health(a: PalmAnalyses, remedies: Recommendations, config: EngineConfig) -> HealthInsights:
    overall = round_half_up((a.life.score + a.mounts["moon"].score + a.mounts["saturn"].score) / 3)
    if a.life.strength == "strong":
        physical = ["Good stamina", "Quick recovery"]
    else:
        physical = ["Monitor energy", "Prioritize sleep and nutrition"]
    mental = ["Clear thinker"] if a.head.clarity > config.mental_clarity_cutoff else ["Try daily micro-meditation"]
    return HealthInsights(
        overall=overall,
        physical=physical,
        mental=mental,
        recommendations=list(remedies.immediate),
        detailed=health_text(a.life, a.head, a.mounts, config),
    )


def compose_career(a: PalmAnalyses, fate: LinePresence, config: EngineConfig) -> CareerInsights:
    mounts = a.mounts
    suitable: list[str] = []
    if mounts["sun"].score > config.insight_high_score:
        suitable.append("Leadership, creative roles")
    if mounts["mercury"].score > config.insight_high_score:
        suitable.append("Communication, business, writing")
    if mounts["jupiter"].score > config.insight_high_score:
        suitable.append("Teaching, counseling, strategy")
    if a.head.strength == "strong":
        suitable.append("Research, education, consulting")
    suitable.append("Roles combining structure with creative problem solving")

    strengths = ["Reliable", "Consistent", "Strategic"]
    if fate.presence:
        strengths.append("Clear life direction")

    challenges: list[str] = []
    if a.fate.breaks > 0:
        challenges.append("Times of transition requiring reskilling")
    if not fate.presence:
        challenges.append("Need for self-direction")

    return CareerInsights(
        suitable_careers=suitable,
        strengths=strengths,
        challenges=challenges,
        planetary_influences=f"{mounts['sun'].planetary_ruler} & {mounts['mercury'].planetary_ruler}",
        detailed=career_text(mounts, a.fate, config),
    )


def compose_relationships(a: PalmAnalyses, config: EngineConfig) -> RelationshipInsights:
    weak = a.heart.strength == "weak"
    if weak:
        recommendations = ["Practice small daily vulnerability steps", "Weekly check-ins with partner"]
    else:
        recommendations = ["Maintain clear communication"]
    return RelationshipInsights(
        compatibility=round_half_up((a.heart.score + a.mounts["venus"].score) / 2),
        relationship_style="Open & caring" if a.heart.strength == "strong" else "Reserved but loyal",
        challenges=["Sharing feelings early"] if weak else [],
        recommendations=recommendations,
        detailed=relationships_text(a.heart, a.mounts, config),
    )


def compose_spirituality(
    mounts: dict[str, MountAnalysis],
    chakras: ChakraProfile,
    vedic: VedicInsights,
    remedies: Recommendations,
    config: EngineConfig,
) -> SpiritualProfile:
    return SpiritualProfile(
        kundalini=chakras.crown,
        chakra_balance=chakras,
        spiritual_path=vedic.chakra_alignment,
        practices=list(remedies.spiritual),
        detailed=spirituality_text(chakras, mounts, config),
    )


def interpret(
    analyses: PalmAnalyses,
    age_now: int | None = None,
    rng: random.Random | None = None,
    config: EngineConfig | None = None,
) -> Insights:
    """Compose all reading insights from the raw analyses."""
    cfg = config or _DEFAULT_CONFIG
    a = analyses

    fate = annotate_fate(a.fate)
    chakras = chakra_profile(a.mounts, a.life, a.head, a.heart, cfg)
    vedic = vedic_insights(a.mounts, a.life.score, a.head.score, a.heart.score, cfg)
    remedies = build_recommendations(a.life, a.head, a.heart, fate, a.mounts, rng, cfg)

    return Insights(
        life_line=annotate_line("life", "Life Line", a.life, cfg),
        head_line=annotate_line("head", "Head Line", a.head, cfg),
        heart_line=annotate_line("heart", "Heart Line", a.heart, cfg),
        fate_line=fate,
        personality=compose_personality(a, fate, cfg),
        health=compose_health(a, remedies, cfg),
        career=compose_career(a, fate, cfg),
        relationships=compose_relationships(a, cfg),
        spirituality=compose_spirituality(a.mounts, chakras, vedic, remedies, cfg),
        vedic_insights=vedic,
        recommendations=remedies,
        guidance=guidance_text(remedies, cfg),
        timeline=build_timeline(a.life, a.fate, a.mounts, age_now, cfg),
    )
