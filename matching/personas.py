from dataclasses import asdict, dataclass, replace
from typing import Dict, List

from core.motive_components import MOTIVE_SOURCES
from core.standardisation import assign_ranks, round1
from fixtures.archetype_profiles import PERSONA_PROFILES

SIMILARITY_FLOOR = 30.0
SIMILARITY_SPAN = 70.0
# A motive the user was never scored on is assumed to sit mid-scale
MISSING_MOTIVE = 50.0


@dataclass(frozen=True)
class PersonaMatch:
    persona: str
    name: str
    origin: str
    archetype: str
    similarity: float
    rank: int = 0

    def with_rank(self, rank: int) -> "PersonaMatch":
        return replace(self, rank=rank)

    def to_dict(self) -> dict:
        return asdict(self)


def persona_similarity(motives: Dict[str, float], persona_vector: Dict[str, float]) -> float:
    """
    Normalised L1 similarity on a 30-100 scale.

    The user vector is on 0-100, the persona vector on 0-1. An exact match
    scores 100 and the worst possible match 30.
    """
    total_diff = 0.0
    for motive in MOTIVE_SOURCES:
        user_value = motives.get(motive)
        if user_value is None:
            user_value = MISSING_MOTIVE
        total_diff += abs(user_value - persona_vector.get(motive, 0.0) * 100)

    raw = 1 - total_diff / (len(MOTIVE_SOURCES) * 100)
    return SIMILARITY_FLOOR + SIMILARITY_SPAN * raw


def match_personas(motives: Dict[str, float], archetype: str, top_n: int = 3) -> List[PersonaMatch]:
    if archetype not in PERSONA_PROFILES:
        raise ValueError(f"Invalid archetype: {archetype}")

    matches = [
        PersonaMatch(
            persona=key,
            name=name,
            origin=origin,
            archetype=archetype,
            similarity=round1(persona_similarity(motives, vector)),
        )
        for key, name, origin, vector in PERSONA_PROFILES[archetype]
    ]
    ranked = assign_ranks(matches, key="similarity")
    return ranked[:top_n]
