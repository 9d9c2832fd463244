from dataclasses import dataclass, field
from typing import Dict, List

from core.scores import (
    ConflictScore,
    ContextProfile,
    DirectionScore,
    EnergyProfile,
    HiddenMotiveProfile,
    IgnitionScore,
    MaturityScore,
    MotiveScore,
    OperatingScore,
    ValidationScore,
)
from insights.social_desirability import SocialDesirabilityCheck
from insights.stages import MotiveStage
from insights.sync import SyncSummary
from insights.uncertainty import UncertaintyBand
from matching.engine import ProfileMatch
from quality.consistency import ItemConsistency
from quality.reliability import ReliabilityScore
from quality.response_time import ResponseTimeProfile


@dataclass(frozen=True)
class DimensionScores:
    motives: List[MotiveScore]
    ignition: List[IgnitionScore]
    direction: List[DirectionScore]
    operating: List[OperatingScore]
    energy: EnergyProfile
    conflicts: List[ConflictScore]
    context: ContextProfile
    hidden: HiddenMotiveProfile
    maturity: MaturityScore
    validation: ValidationScore

    def motive_scores(self) -> Dict[str, float]:
        return {m.motive: m.score for m in self.motives}

    def to_dict(self) -> dict:
        return {
            "motives": [m.to_dict() for m in self.motives],
            "ignition": [i.to_dict() for i in self.ignition],
            "direction": [d.to_dict() for d in self.direction],
            "operating": [o.to_dict() for o in self.operating],
            "energy": self.energy.to_dict(),
            "conflicts": [c.to_dict() for c in self.conflicts],
            "context": self.context.to_dict(),
            "hidden": self.hidden.to_dict(),
            "maturity": self.maturity.to_dict(),
            "validation": self.validation.to_dict(),
        }


@dataclass(frozen=True)
class DerivedInsights:
    stages: List[MotiveStage]
    conflict_map: dict
    uncertainty: List[UncertaintyBand]
    evolution: dict
    suggestions: List[dict]
    social_desirability: SocialDesirabilityCheck
    item_consistency: ItemConsistency
    sync: SyncSummary

    def to_dict(self) -> dict:
        return {
            "stages": [s.to_dict() for s in self.stages],
            "conflict_map": self.conflict_map,
            "uncertainty": [u.to_dict() for u in self.uncertainty],
            "evolution": self.evolution,
            "suggestions": self.suggestions,
            "social_desirability": self.social_desirability.to_dict(),
            "item_consistency": self.item_consistency.to_dict(),
            "sync": self.sync.to_dict(),
        }


@dataclass(frozen=True)
class AssessmentResult:
    """
    Everything one scoring call produces. Built fresh per call and never
    mutated afterwards.
    """
    question_count: int
    resolved_count: int
    total_time_ms: float
    chronological: bool
    scores: DimensionScores
    response_time: ResponseTimeProfile
    reliability: ReliabilityScore
    insights: DerivedInsights
    match: ProfileMatch
    skipped: List[str] = field(default_factory=list)

    @property
    def primary_archetype(self):
        return self.match.primary

    @property
    def is_valid(self) -> bool:
        return self.reliability.is_valid

    def to_dict(self) -> dict:
        return {
            "question_count": self.question_count,
            "resolved_count": self.resolved_count,
            "skipped": list(self.skipped),
            "total_time_ms": self.total_time_ms,
            "chronological": self.chronological,
            "scores": self.scores.to_dict(),
            "response_time": self.response_time.to_dict(),
            "reliability": self.reliability.to_dict(),
            "insights": self.insights.to_dict(),
            "match": self.match.to_dict(),
        }
