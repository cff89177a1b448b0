"""Palm data model — the keypoint input and every analysis record derived from it.

All records are frozen dataclasses. ``to_dict()`` renders the JSON output
contract (camelCase keys, plain Python scalars).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from palmsight.utils.geometry import as_points

Strength = Literal["weak", "moderate", "strong"]
Development = Literal["underdeveloped", "balanced", "overdeveloped"]
FingerType = Literal["short", "average", "long"]
Guna = Literal["sattva", "rajas", "tamas"]
Orientation = Literal["horizontal", "vertical"]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _serialize(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {_camel(f.name): _serialize(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if isinstance(value, np.generic):
        return value.item()
    return value


class _Serializable:
    def to_dict(self) -> dict[str, Any]:
        return _serialize(self)


@dataclass(frozen=True, eq=False)
class KeypointSet:
    """One palm detection: Nx2 keypoints plus detector identity/confidence.

    ``points`` is stored as a read-only copy. Equality and hashing are by identity.
    """

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    detection_id: str = ""
    confidence: float = 0.0

    def __post_init__(self) -> None:
        points = as_points(self.points).copy()
        points.setflags(write=False)
        object.__setattr__(self, "points", points)

    @classmethod
    def from_points(cls, points, detection_id: str = "", confidence: float = 0.0) -> KeypointSet:
        """Accept ``[{"x": .., "y": ..}, ...]`` or ``[(x, y), ...]``."""
        rows = [(p["x"], p["y"]) if isinstance(p, dict) else p for p in points or []]
        return cls(points=as_points(rows), detection_id=detection_id, confidence=float(confidence))

    @classmethod
    def from_prediction(cls, prediction: dict[str, Any]) -> KeypointSet:
        """Build from a detector record. Box metadata (x, y, width, class...) is ignored."""
        return cls.from_points(
            prediction.get("points") or [],
            detection_id=str(prediction.get("detection_id", "")),
            confidence=float(prediction.get("confidence", 0.0)),
        )

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class LineAnalysis(_Serializable):
    strength: Strength
    length_px: float
    normalized_length: float
    curvature: float
    clarity: float
    breaks: int
    forks: int
    islands: int
    score: int
    interpretation: str
    raw_points_count: int
    vedic_significance: str | None = None


@dataclass(frozen=True)
class LinePresence(_Serializable):
    """Optional line (fate, sun, mercury): present flag plus analysis when measurable."""

    presence: bool
    analysis: LineAnalysis | None = None


@dataclass(frozen=True)
class MarriageLines(_Serializable):
    count: int
    quality: str
    interpretation: str


@dataclass(frozen=True)
class MountAnalysis(_Serializable):
    development: Development
    score: int
    characteristics: list[str]
    planetary_ruler: str


@dataclass(frozen=True)
class FingerAnalysis(_Serializable):
    length_px: float
    length_ratio: float
    flexibility: float
    alignment: float
    type: FingerType
    significance: str
    score: int


@dataclass(frozen=True)
class MicroFeatures(_Serializable):
    islands: int
    stars: int
    crosses: int
    branches: int
    dense_cells: int
    isolated_cells: int


@dataclass(frozen=True)
class ChakraProfile(_Serializable):
    root: int
    sacral: int
    solar: int
    heart: int
    throat: int
    third_eye: int
    crown: int
    summary: str


@dataclass(frozen=True)
class VedicInsights(_Serializable):
    ruling_planet: str
    element: str
    dosha: str
    chakra_alignment: str
    karmic_lessons: list[str]


@dataclass(frozen=True)
class Personality(_Serializable):
    overall: str
    traits: list[str]
    dominant_guna: Guna
    strengths: list[str]
    weaknesses: list[str]


@dataclass(frozen=True)
class HealthInsights(_Serializable):
    overall: int
    physical: list[str]
    mental: list[str]
    recommendations: list[str]
    detailed: str


@dataclass(frozen=True)
class CareerInsights(_Serializable):
    suitable_careers: list[str]
    strengths: list[str]
    challenges: list[str]
    planetary_influences: str
    detailed: str


@dataclass(frozen=True)
class RelationshipInsights(_Serializable):
    compatibility: int
    relationship_style: str
    challenges: list[str]
    recommendations: list[str]
    detailed: str


@dataclass(frozen=True)
class SpiritualProfile(_Serializable):
    kundalini: int
    chakra_balance: ChakraProfile
    spiritual_path: str
    practices: list[str]
    detailed: str


@dataclass(frozen=True)
class Recommendations(_Serializable):
    immediate: list[str]
    short_term: list[str]
    long_term: list[str]
    spiritual: list[str]


@dataclass(frozen=True)
class PalmAnalyses:
    """Raw per-region analyses, before any composition."""

    life: LineAnalysis
    head: LineAnalysis
    heart: LineAnalysis
    fate: LineAnalysis
    sun: LinePresence
    mercury: LinePresence
    marriage: MarriageLines
    mounts: dict[str, MountAnalysis]
    fingers: dict[str, FingerAnalysis]
    micro: MicroFeatures


@dataclass(frozen=True)
class Insights:
    """Everything the composer derives from a PalmAnalyses bundle."""

    life_line: LineAnalysis
    head_line: LineAnalysis
    heart_line: LineAnalysis
    fate_line: LinePresence
    personality: Personality
    health: HealthInsights
    career: CareerInsights
    relationships: RelationshipInsights
    spirituality: SpiritualProfile
    vedic_insights: VedicInsights
    recommendations: Recommendations
    guidance: str
    timeline: dict[str, str]


@dataclass(frozen=True)
class PalmReadingResult(_Serializable):
    """Terminal aggregate returned to the caller for rendering."""

    analysis_id: str
    timestamp: str
    confidence: float
    hand_shape: str
    hand_size: str
    skin_texture: str

    life_line: LineAnalysis
    head_line: LineAnalysis
    heart_line: LineAnalysis
    fate_line: LinePresence
    marriage_line: MarriageLines
    sun_line: LinePresence
    mercury_line: LinePresence

    mounts: dict[str, MountAnalysis]
    micro: MicroFeatures
    fingers: dict[str, FingerAnalysis]

    personality: Personality
    health: HealthInsights
    career: CareerInsights
    relationships: RelationshipInsights
    spirituality: SpiritualProfile
    vedic_insights: VedicInsights
    recommendations: Recommendations
    guidance: str
    timeline: dict[str, str]

    version: str
    model_used: str
    processing_time: int
