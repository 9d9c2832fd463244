from dataclasses import asdict, dataclass, replace
from typing import Dict, List

from core.standardisation import assign_ranks, clamp, round1
from fixtures.archetype_profiles import ARCHETYPE_PROFILES, ARCHETYPES
from matching.aggregate import condition_adjustment, weighted_score


@dataclass(frozen=True)
class ArchetypeMatch:
    archetype: str
    name: str
    emoji: str
    score: float
    base_score: float
    adjustment: float
    rank: int = 0

    def with_rank(self, rank: int) -> "ArchetypeMatch":
        return replace(self, rank=rank)

    def to_dict(self) -> dict:
        return asdict(self)


def match_archetypes(motives: Dict[str, float]) -> List[ArchetypeMatch]:
    """
    Score every archetype against a 0-100 motive vector.

    Unmeasured motives count as 0 in the weighted sum. Scores are clamped
    to [0, 100]; ties keep the fixed archetype order.
    """
    matches: List[ArchetypeMatch] = []
    for archetype in ARCHETYPES:
        profile = ARCHETYPE_PROFILES[archetype]
        base = weighted_score(motives, profile["weights"])
        adjustment = condition_adjustment(motives, profile["conditions"])

        matches.append(
            ArchetypeMatch(
                archetype=archetype,
                name=profile["name"],
                emoji=profile["emoji"],
                score=round1(clamp(base + adjustment)),
                base_score=round1(base),
                adjustment=adjustment,
            )
        )
    return assign_ranks(matches)
