"""
Dimension score records.

Every calculator returns these immutable records. Records that are ranked
among siblings carry a `rank` field and are numbered with
`core.standardisation.assign_ranks`.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Dict, List, Optional, Tuple


class _Record:
    def with_rank(self, rank: int):
        return replace(self, rank=rank)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MotiveScore(_Record):
    motive: str
    score: float
    rank: int = 0
    samples: int = 0


@dataclass(frozen=True)
class IgnitionScore(_Record):
    condition: str
    score: float
    rank: int = 0
    samples: int = 0


@dataclass(frozen=True)
class DirectionScore(_Record):
    motive: str
    approach: float
    avoidance: float
    dominant: str
    balance: float


@dataclass(frozen=True)
class OperatingScore(_Record):
    axis: str
    score: float          # 0 = fully left pole, 100 = fully right pole
    tendency: str         # left | balanced | right
    dominant_pole: str | None
    samples: int = 0


@dataclass(frozen=True)
class EnergyProfile(_Record):
    charge: Dict[str, float]
    drain: Dict[str, float]
    flow_patterns: Dict[str, float]
    sustainability: float
    burnout_risk: float
    recovery_speed: float
    energy_balance: float


@dataclass(frozen=True)
class ConflictScore(_Record):
    pair: Tuple[str, str]
    balance_ratio: float   # share of mass on the first motive of the pair
    dominant_pole: str
    polarization: float
    intensity: float
    avg_latency_ms: float
    oscillation_rate: float
    resolution: str
    samples: int = 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["pair"] = list(self.pair)
        return data


@dataclass(frozen=True)
class ContextScore(_Record):
    context: str
    motive_scores: Dict[str, float]
    dominant_motive: str | None
    shifts: Dict[str, float]
    samples: int = 0


@dataclass(frozen=True)
class ContextProfile(_Record):
    contexts: List[ContextScore] = field(default_factory=list)
    stress_response: Optional[str] = None

    def get(self, context: str) -> ContextScore | None:
        for c in self.contexts:
            if c.context == context:
                return c
        return None


@dataclass(frozen=True)
class HiddenMotiveProfile(_Record):
    shadow: Dict[str, float] = field(default_factory=dict)
    projection: Dict[str, float] = field(default_factory=dict)
    compensation: Dict[str, float] = field(default_factory=dict)
    latency_ratios: Dict[str, float] = field(default_factory=dict)
    indicators: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MaturityScore(_Record):
    awareness: float
    integration: float
    growth: float
    overall: float
    level: int
    level_name: str
    description: str


@dataclass(frozen=True)
class ValidationScore(_Record):
    consistency: float
    honesty: float
    social_desirability: float
    is_valid: bool
    flags: List[str] = field(default_factory=list)
