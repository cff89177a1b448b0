"""Mount analyzer — point density per planetary mount."""

from __future__ import annotations

from numpy.typing import NDArray

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import Development, MountAnalysis
from palmsight.engine.regions import mount_counts
from palmsight.utils.geometry import BoundingBox
from palmsight.utils.math_helpers import clamp, round_half_up

_DEFAULT_CONFIG = EngineConfig()

PLANETARY_RULERS: dict[str, str] = {
    "venus": "Venus (Shukra)",
    "mars": "Mars (Mangal)",
    "jupiter": "Jupiter (Guru)",
    "saturn": "Saturn (Shani)",
    "mercury": "Mercury (Budha)",
    "moon": "Moon (Chandra)",
    "sun": "Sun (Surya)",
}

MOUNT_TRAITS: dict[str, tuple[str, str]] = {
    "venus": ("Artistic", "Affectionate"),
    "mars": ("Courageous", "Energetic"),
    "jupiter": ("Leadership", "Optimistic"),
    "saturn": ("Disciplined", "Patient"),
    "mercury": ("Communicative", "Adaptable"),
    "moon": ("Intuitive", "Imaginative"),
    "sun": ("Expressive", "Creative"),
}

PROMINENT_TRAIT = "Prominent influence"


def classify_development(score: float, config: EngineConfig | None = None) -> Development:
    cfg = config or _DEFAULT_CONFIG
    if score > cfg.mount_overdeveloped:
        return "overdeveloped"
    if score > cfg.mount_balanced:
        return "balanced"
    return "underdeveloped"


def mount_score(count: int, total: int, config: EngineConfig | None = None) -> float:
    """Share of all keypoints × gain, clamped. Unrounded."""
    cfg = config or _DEFAULT_CONFIG
    return clamp(count / max(1, total) * cfg.mount_gain, cfg.mount_min_score, cfg.mount_max_score)


def build_mount(name: str, score: float, config: EngineConfig | None = None) -> MountAnalysis:
    cfg = config or _DEFAULT_CONFIG
    characteristics = list(MOUNT_TRAITS[name])
    if score > cfg.mount_prominent:
        characteristics.append(PROMINENT_TRAIT)
    return MountAnalysis(
        development=classify_development(score, cfg),
        score=round_half_up(score),
        characteristics=characteristics,
        planetary_ruler=PLANETARY_RULERS[name],
    )


def analyze_mounts(
    points: NDArray,
    box: BoundingBox,
    config: EngineConfig | None = None,
) -> dict[str, MountAnalysis]:
    """All seven mounts keyed by planet name, in reporting order."""
    total = len(points)
    return {
        name: build_mount(name, mount_score(count, total, config), config)
        for name, count in mount_counts(points, box).items()
    }
