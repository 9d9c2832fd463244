"""
Heuristic motive evolution.

Forward-looking direction per motive:
- scores at the ceiling (>= 90) tend to regress toward the mean
- shadow motives and poles of suppressed conflicts tend to surface
- with high maturity, mid-range motives tend to strengthen
"""
from typing import Dict, List

from core.scores import ConflictScore, HiddenMotiveProfile, MaturityScore, MotiveScore

CEILING = 90.0
SHADOW_MIN = 50.0
INTEGRATED_LEVEL = 3
MID_RANGE = (40.0, 70.0)


def _surfacing_motives(hidden: HiddenMotiveProfile, conflicts: List[ConflictScore]) -> set:
    surfacing = {label for label, score in hidden.shadow.items() if score >= SHADOW_MIN}
    for c in conflicts:
        if c.resolution == "suppressed":
            surfacing.update(c.pair)
    return surfacing


def motive_evolution(
    motives: List[MotiveScore],
    maturity: MaturityScore,
    hidden: HiddenMotiveProfile,
    conflicts: List[ConflictScore],
) -> Dict:
    surfacing = _surfacing_motives(hidden, conflicts)
    low, high = MID_RANGE

    predictions: Dict[str, dict] = {}
    for m in motives:
        if m.score >= CEILING:
            direction, reason = "decline", "Very high scores tend to settle back toward the mean"
        elif m.motive in surfacing:
            direction, reason = "grow", "Suppressed or shadow motive likely to surface"
        elif maturity.level >= INTEGRATED_LEVEL and low <= m.score < high:
            direction, reason = "grow", "High maturity supports strengthening mid-range motives"
        else:
            direction, reason = "stable", "No strong pressure to change"
        predictions[m.motive] = {"direction": direction, "reason": reason}

    growing = sum(1 for p in predictions.values() if p["direction"] == "grow")
    declining = sum(1 for p in predictions.values() if p["direction"] == "decline")

    if growing > declining:
        trajectory = "expanding"
    elif declining > growing:
        trajectory = "consolidating"
    else:
        trajectory = "stable"

    return {"predictions": predictions, "trajectory": trajectory}
