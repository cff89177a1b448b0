"""Engine configuration — scoring weights and classification thresholds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Tunable constants for every analysis stage.

    Region geometry lives in ``spatial_constants``; this holds the scoring side.
    """

    # Line composite score weights (sum of positives = 1.0)
    line_length_weight: float = 0.45
    line_curvature_weight: float = 0.30
    line_clarity_weight: float = 0.25
    line_break_penalty: float = 0.02

    # Strength classification (shared by all line-shaped analyses)
    strong_score: int = 75
    moderate_score: int = 55

    # Line geometry thresholds, as fractions of the relevant box dimension
    break_gap_pct: float = 0.06
    fork_variance_pct: float = 0.02
    curvature_tolerance_pct: float = 0.03
    clarity_density_gain: float = 6.0

    # Mount scoring: share of all points × gain, clamped
    mount_gain: float = 160.0
    mount_min_score: float = 8.0
    mount_max_score: float = 96.0
    mount_overdeveloped: float = 78.0
    mount_balanced: float = 60.0
    mount_prominent: float = 82.0

    # Finger classification by ratio to the five-finger mean
    finger_long_ratio: float = 1.1
    finger_short_ratio: float = 0.9
    finger_score_gain: float = 70.0

    # Minor line detection
    sun_min_points: int = 5
    sun_slope_threshold: float = 0.2
    mercury_min_points: int = 4
    mercury_continuity_pct: float = 0.03
    mercury_continuity_share: float = 0.4
    marriage_max_lines: int = 4

    # Micro-feature grid
    micro_grid: int = 6
    micro_dense_count: int = 6
    micro_isolated_max: int = 2

    # Narrative paragraph length (sentences)
    paragraph_min_sentences: int = 10
    paragraph_max_sentences: int = 14

    # Insight thresholds on 0-100 line/mount scores
    insight_high_score: int = 70
    insight_low_score: int = 50
    insight_peak_score: int = 75
    mental_clarity_cutoff: float = 0.6

    # Timeline
    default_age_now: int = 25

    # Hand size by bounding-box height (px)
    hand_large_px: float = 600.0
    hand_medium_px: float = 350.0
