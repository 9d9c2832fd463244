from dataclasses import dataclass, field
from typing import Dict, List

from core.scores import MotiveScore
from matching.archetypes import ArchetypeMatch, match_archetypes
from matching.personas import PersonaMatch, match_personas

"""
Matching orchestration layer.

This module coordinates the archetype and persona matchers.
It does not contain scoring logic itself.
"""


@dataclass(frozen=True)
class ProfileMatch:
    primary: ArchetypeMatch
    secondary: ArchetypeMatch
    archetypes: List[ArchetypeMatch] = field(default_factory=list)
    personas: List[PersonaMatch] = field(default_factory=list)

    @property
    def primary_persona(self) -> PersonaMatch | None:
        return self.personas[0] if self.personas else None

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "archetypes": [a.to_dict() for a in self.archetypes],
            "personas": [p.to_dict() for p in self.personas],
        }


def motive_vector(motives: List[MotiveScore]) -> Dict[str, float]:
    return {m.motive: m.score for m in motives}


def match_profile(motives: List[MotiveScore], top_personas: int = 3) -> ProfileMatch:
    """
    Entry point for matching.
    Ranks all archetypes, then ranks the personas of the winning archetype.
    """
    vector = motive_vector(motives)
    archetypes = match_archetypes(vector)
    primary, secondary = archetypes[0], archetypes[1]

    return ProfileMatch(
        primary=primary,
        secondary=secondary,
        archetypes=archetypes,
        personas=match_personas(vector, primary.archetype, top_n=top_personas),
    )
