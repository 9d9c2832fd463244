"""
Theoretical motive tension map.
Rule-based: independent of the answer-derived conflict pairs, this checks
how strongly two motives known to pull against each other are both present.
"""
from statistics import mean
from typing import Dict, List

from core.scores import MotiveScore
from core.standardisation import round1

# (motive a, motive b, base conflict weight)
CONFLICT_PAIRS = [
    ("freedom", "security", 0.90),
    ("adventure", "security", 0.85),
    ("achievement", "connection", 0.60),
    ("recognition", "freedom", 0.50),
    ("creation", "security", 0.50),
    ("mastery", "adventure", 0.40),
]

# (upper bound, band)
TENSION_BANDS = (
    (20.0, "complementary"),
    (40.0, "neutral"),
    (60.0, "tension"),
)

INTERPRETATIONS = {
    "complementary": "Your motives pull in compatible directions and reinforce each other.",
    "neutral": "Some motives compete for attention, but the pull is manageable.",
    "tension": "Several strong motives compete; expect to feel torn when both are at stake.",
    "conflict": "Strong opposing motives are both active, which can cause stalls and second-guessing.",
}


def tension_band(tension: float) -> str:
    for upper, band in TENSION_BANDS:
        if tension < upper:
            return band
    return "conflict"


def conflict_map(motives: List[MotiveScore]) -> Dict:
    """
    Tension for each fixed pair is base weight x min(score a, score b).

    Returns the per-pair entries, the overall average tension with its band
    and interpretation, and the single highest-tension pair.
    """
    scores = {m.motive: m.score for m in motives}
    pairs: List[dict] = []

    for a, b, base in CONFLICT_PAIRS:
        score_a = scores.get(a, 0.0)
        score_b = scores.get(b, 0.0)
        tension = round1(base * min(score_a, score_b))
        pairs.append({
            "pair": [a, b],
            "base_weight": base,
            "scores": {a: score_a, b: score_b},
            "tension": tension,
            "band": tension_band(tension),
        })

    overall = round1(mean(p["tension"] for p in pairs))
    overall_band = tension_band(overall)

    # max() keeps the first pair on ties
    highest = max(pairs, key=lambda p: p["tension"])

    return {
        "pairs": pairs,
        "overall_tension": overall,
        "overall_band": overall_band,
        "highest": highest,
        "interpretation": INTERPRETATIONS[overall_band],
    }
