"""
Energy charge / drain scoring.

Charge is measured per motive source, drain per named stressor and flow per
flow pattern. The derived figures only average what was actually measured:
an unmeasured stressor does not pull burnout risk toward the neutral score.
"""
from statistics import mean
from typing import List

from core.accumulator import NEUTRAL_MEAN, ScoreAccumulator
from core.motive_components import DRAIN_SOURCES, FLOW_PATTERNS, MOTIVE_SOURCES
from core.scores import EnergyProfile
from core.standardisation import clamp, rescale, round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

SUSTAINABILITY_DRAIN_FACTOR = 0.8
BURNOUT_DRAIN_FACTOR = 1.2
RECOVERY_CHARGE_SHARE = 0.6


def _flow_key(label: str | None) -> str | None:
    if label is None:
        return None
    if label in FLOW_PATTERNS:
        return FLOW_PATTERNS[label]
    if label in FLOW_PATTERNS.values():
        return label
    return None


def _measured_average(accumulators: dict) -> float:
    measured = [acc.score() for acc in accumulators.values() if acc.count > 0]
    if not measured:
        return rescale(NEUTRAL_MEAN)
    return mean(measured)


def calculate_energy_profile(answers: List[ResolvedAnswer]) -> EnergyProfile:
    charge = {motive: ScoreAccumulator() for motive in MOTIVE_SOURCES}
    drain = {stressor: ScoreAccumulator() for stressor in DRAIN_SOURCES}
    flow = {key: ScoreAccumulator() for key in FLOW_PATTERNS.values()}

    for answer in in_category(answers, Category.ENERGY):
        tag = answer.tag

        charge_source = tag.charge
        if charge_source is None and tag.drain is None and tag.flow is None:
            charge_source = answer.subcategory
        if charge_source in charge:
            feed(charge[charge_source], answer)

        if tag.drain in drain:
            feed(drain[tag.drain], answer)

        flow_key = _flow_key(tag.flow)
        if flow_key is not None:
            feed(flow[flow_key], answer)

    avg_charge = _measured_average(charge)
    avg_drain = _measured_average(drain)

    return EnergyProfile(
        charge={m: round1(acc.score()) for m, acc in charge.items()},
        drain={s: round1(acc.score()) for s, acc in drain.items()},
        flow_patterns={k: round1(acc.score()) for k, acc in flow.items()},
        sustainability=round1(clamp(100 - SUSTAINABILITY_DRAIN_FACTOR * avg_drain)),
        burnout_risk=round1(min(100.0, BURNOUT_DRAIN_FACTOR * avg_drain)),
        recovery_speed=round1(clamp(
            RECOVERY_CHARGE_SHARE * avg_charge
            + (1 - RECOVERY_CHARGE_SHARE) * (100 - avg_drain)
        )),
        energy_balance=round1(avg_charge - avg_drain),
    )
