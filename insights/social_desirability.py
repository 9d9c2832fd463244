"""
Social desirability check.

Flags a bias level from indicator heuristics and, only for moderate or
severe bias, nudges the motives most prone to social editing and re-ranks.
"""
from dataclasses import dataclass, field, replace
from typing import List

from core.scores import MotiveScore, ValidationScore
from core.standardisation import assign_ranks, clamp, round1
from quality.reliability import ReliabilityScore

HIGH_CONNECTION = 85.0
LOW_RECOGNITION = 25.0
LOW_CONSISTENCY = 50.0
HIGH_VALIDATION_DESIRABILITY = 60.0

BIAS_LEVELS = ["none", "mild", "moderate", "severe"]
CORRECTED_LEVELS = {"moderate", "severe"}

# Relative corrections for motives people tend to over- or under-report
CORRECTIONS = {
    "connection": -0.10,
    "recognition": 0.10,
    "achievement": 0.05,
}


@dataclass(frozen=True)
class SocialDesirabilityCheck:
    bias_level: str
    indicators: List[str] = field(default_factory=list)
    corrected: bool = False
    adjusted_motives: List[MotiveScore] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "bias_level": self.bias_level,
            "indicators": list(self.indicators),
            "corrected": self.corrected,
            "adjusted_motives": [m.to_dict() for m in self.adjusted_motives],
        }


def _indicators(motives: List[MotiveScore], reliability: ReliabilityScore,
                validation: ValidationScore | None) -> List[str]:
    scores = {m.motive: m.score for m in motives}
    found: List[str] = []

    if scores.get("connection", 0.0) >= HIGH_CONNECTION and scores.get("recognition", 100.0) <= LOW_RECOGNITION:
        found.append("Very high connection with very low recognition")
    if reliability.flags != ["no_answers"] and reliability.consistency < LOW_CONSISTENCY:
        found.append("Low response consistency")
    if validation is not None and validation.social_desirability > HIGH_VALIDATION_DESIRABILITY:
        found.append("Validation items answered in a socially desirable way")
    return found


def analyse_social_desirability(
    motives: List[MotiveScore],
    reliability: ReliabilityScore,
    validation: ValidationScore | None = None,
) -> SocialDesirabilityCheck:
    indicators = _indicators(motives, reliability, validation)
    level = BIAS_LEVELS[min(len(indicators), len(BIAS_LEVELS) - 1)]

    if level not in CORRECTED_LEVELS:
        return SocialDesirabilityCheck(bias_level=level, indicators=indicators,
                                       adjusted_motives=list(motives))

    adjusted = []
    for m in motives:
        factor = CORRECTIONS.get(m.motive)
        if factor is None:
            adjusted.append(m)
        else:
            adjusted.append(replace(m, score=round1(clamp(m.score * (1 + factor)))))

    return SocialDesirabilityCheck(
        bias_level=level,
        indicators=indicators,
        corrected=True,
        adjusted_motives=assign_ranks(adjusted),
    )
