"""Age-keyed life timeline."""

from __future__ import annotations

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import LineAnalysis, MountAnalysis

_DEFAULT_CONFIG = EngineConfig()

# Every timeline covers exactly this many consecutive years.
TIMELINE_YEARS = 20

STEADY_PROGRESS = "Steady progress with manageable changes."

REASSESSMENT = "Short reassessment—possible health or work check."
NEW_DIRECTION = "Opportunity for new direction in study or career."
RECOGNITION = "Increased visibility and possible recognition."
RELATIONSHIP_DEEPENING = "Personal relationship deepening."
CONSOLIDATION = "Consolidation and long-term stability."


def build_timeline(
    life: LineAnalysis,
    fate: LineAnalysis,
    mounts: dict[str, MountAnalysis],
    age_now: int | None = None,
    config: EngineConfig | None = None,
) -> dict[str, str]:
    """``{"age<N>": text}`` for N in age_now .. age_now + 19."""
    cfg = config or _DEFAULT_CONFIG
    start = cfg.default_age_now if age_now is None else age_now

    # year offset → (trigger, text)
    milestones = {
        2: (life.breaks > 0, REASSESSMENT),
        4: (fate.forks > 0, NEW_DIRECTION),
        7: (mounts["sun"].score > cfg.insight_peak_score, RECOGNITION),
        10: (mounts["moon"].score > cfg.insight_high_score, RELATIONSHIP_DEEPENING),
        15: (life.score > cfg.insight_high_score, CONSOLIDATION),
    }

    timeline: dict[str, str] = {}
    for offset in range(TIMELINE_YEARS):
        triggered, text = milestones.get(offset, (False, ""))
        timeline[f"age{start + offset}"] = text if triggered else STEADY_PROGRESS
    return timeline
