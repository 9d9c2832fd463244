from dataclasses import asdict, dataclass
from typing import List

from core.scores import MotiveScore
from core.standardisation import clamp, round1

# Presentation label only; the margin is a heuristic, not a sampled interval
BAND_LABEL = "95%"
EXTREMITY_INFLATION = 0.5


@dataclass(frozen=True)
class UncertaintyBand:
    motive: str
    score: float
    margin: float
    lower: float
    upper: float
    label: str = BAND_LABEL

    def to_dict(self) -> dict:
        return asdict(self)


def uncertainty_margin(score: float, reliability: float) -> float:
    """
    Base margin (100 - reliability) / 10, widened for scores far from the
    midpoint: x1 at 50, x1.5 at 0 or 100.
    """
    base = (100 - clamp(reliability)) / 10
    return base * (1 + EXTREMITY_INFLATION * abs(score - 50) / 50)


def uncertainty_bands(motives: List[MotiveScore], reliability: float) -> List[UncertaintyBand]:
    bands: List[UncertaintyBand] = []
    for m in motives:
        margin = uncertainty_margin(m.score, reliability)
        bands.append(
            UncertaintyBand(
                motive=m.motive,
                score=m.score,
                margin=round1(margin),
                lower=round1(clamp(m.score - margin)),
                upper=round1(clamp(m.score + margin)),
            )
        )
    return bands
