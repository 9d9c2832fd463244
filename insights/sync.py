from dataclasses import asdict, dataclass, field
from typing import Dict, List

from core.scores import MaturityScore, MotiveScore, ValidationScore
from fixtures.archetype_profiles import LEVEL_NAMES, NEXT_LEVEL_HINTS, TOP_LEVEL_HINT
from matching.engine import ProfileMatch

SIGNAL_THRESHOLD = 70.0
STRONG_MOTIVE = 80.0

# Relative thresholds
STRENGTH_PERCENTILE = 0.80
GAP_PERCENTILE = 0.20

# Absolute thresholds, on the 0-100 scale
ABSOLUTE_STRENGTH_FLOOR = 65.0
ABSOLUTE_GAP_CEILING = 45.0

MAX_STRENGTHS = 3
MAX_GAPS = 3


@dataclass
class MotiveSignal:
    motive: str
    score: float
    percentile: float
    description: str


@dataclass(frozen=True)
class SyncSummary:
    archetype: str
    overall_sync: float
    level: int
    level_name: str
    next_level_hint: str
    confidence: float
    signals: List[str] = field(default_factory=list)
    strengths: List[dict] = field(default_factory=list)
    gaps: List[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _compute_percentiles(scores: Dict[str, float]) -> Dict[str, float]:
    """
    Percentile rank for each motive.
    If all scores are equal, return an empty dict (no signal).
    """
    values = list(scores.values())

    if len(values) <= 1:
        return {}

    if max(values) == min(values):
        return {}

    sorted_items = sorted(scores.items(), key=lambda x: x[1])
    n = len(sorted_items)

    return {motive: rank / (n - 1) for rank, (motive, _) in enumerate(sorted_items)}


def motive_strengths_and_gaps(motives: List[MotiveScore]) -> Dict[str, List[dict]]:
    """
    Strengths and gaps need both a relative position (percentile) and an
    absolute score, so a flat profile yields neither.
    """
    scores = {m.motive: m.score for m in motives}
    percentiles = _compute_percentiles(scores)

    strengths: List[MotiveSignal] = []
    gaps: List[MotiveSignal] = []

    for motive, pct in percentiles.items():
        score = scores[motive]
        if pct >= STRENGTH_PERCENTILE and score >= ABSOLUTE_STRENGTH_FLOOR:
            strengths.append(MotiveSignal(motive, score, round(pct, 2),
                                          "Strong relative signal compared to other motives"))
        elif pct <= GAP_PERCENTILE and score <= ABSOLUTE_GAP_CEILING:
            gaps.append(MotiveSignal(motive, score, round(pct, 2),
                                     "Weaker relative signal compared to other motives"))

    strengths.sort(key=lambda s: s.percentile, reverse=True)
    gaps.sort(key=lambda g: g.percentile)

    return {
        "strengths": [asdict(s) for s in strengths[:MAX_STRENGTHS]],
        "gaps": [asdict(g) for g in gaps[:MAX_GAPS]],
    }


def signal_matches(motives: List[MotiveScore], maturity: MaturityScore,
                   validation: ValidationScore) -> List[str]:
    signals: List[str] = []

    if maturity.awareness >= SIGNAL_THRESHOLD:
        signals.append("High self-awareness")
    if maturity.integration >= SIGNAL_THRESHOLD:
        signals.append("Integrates competing motives")
    if maturity.growth >= SIGNAL_THRESHOLD:
        signals.append("Growth-oriented")

    if validation.is_valid:
        signals.append("Consistent responses confirmed")

    top = min(motives, key=lambda m: m.rank) if motives else None
    if top is not None and top.score >= STRONG_MOTIVE:
        signals.append(f"Strong {top.motive} motive")

    return signals or ["Analysis in progress"]


def sync_summary(
    match: ProfileMatch,
    motives: List[MotiveScore],
    maturity: MaturityScore,
    validation: ValidationScore,
) -> SyncSummary:
    archetype = match.primary.archetype
    level = maturity.level
    level_name = LEVEL_NAMES.get(archetype, {}).get(level, f"Level {level}")
    split = motive_strengths_and_gaps(motives)

    return SyncSummary(
        archetype=archetype,
        overall_sync=match.primary.score,
        level=level,
        level_name=level_name,
        next_level_hint=NEXT_LEVEL_HINTS.get(level, TOP_LEVEL_HINT),
        confidence=maturity.overall,
        signals=signal_matches(motives, maturity, validation),
        strengths=split["strengths"],
        gaps=split["gaps"],
    )
