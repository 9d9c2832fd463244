"""
Archetype condition rules.

A weighted sum alone cannot say "this archetype requires a strong defining
motive" or "is ruled out by a conflicting one", so each archetype carries
threshold rules that add to or subtract from its weighted score.
"""
from typing import Dict

PRIMARY_MET_BONUS = 10.0
PRIMARY_UNMET_PENALTY = -15.0
SECONDARY_MET_BONUS = 5.0
EXCLUSION_PENALTY = -15.0


def weighted_score(motives: Dict[str, float], weights: Dict[str, float]) -> float:
    """Sum of (motive / 100) x weight x 100 over the archetype's weight vector."""
    score = 0.0
    for motive, weight in weights.items():
        score += (motives.get(motive, 0.0) / 100) * weight * 100
    return score


def condition_adjustment(motives: Dict[str, float], conditions: Dict[str, tuple]) -> float:
    """
    Rules:
    - primary motive at or above its minimum: +10, otherwise -15
    - secondary motive at or above its minimum: +5
    - excluded motive above its ceiling: -15
    """
    adjustment = 0.0

    primary = conditions.get("primary")
    if primary:
        motive, minimum = primary
        if motives.get(motive, 0.0) >= minimum:
            adjustment += PRIMARY_MET_BONUS
        else:
            adjustment += PRIMARY_UNMET_PENALTY

    secondary = conditions.get("secondary")
    if secondary:
        motive, minimum = secondary
        if motives.get(motive, 0.0) >= minimum:
            adjustment += SECONDARY_MET_BONUS

    exclude = conditions.get("exclude")
    if exclude:
        motive, ceiling = exclude
        if motives.get(motive, 0.0) > ceiling:
            adjustment += EXCLUSION_PENALTY

    return adjustment
