"""
Hidden motive scoring.

Shadow, projection and compensation labels are scored independently. For
shadow labels the average response latency is also compared with the
respondent's overall average: hesitating on a motive you say you don't
hold is read as a sign of denial.
"""
from statistics import mean
from typing import Dict, List

from core.accumulator import ScoreAccumulator
from core.scores import HiddenMotiveProfile
from core.standardisation import round1, valid_latency
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

DENIAL_LATENCY_RATIO = 1.3

_LABEL_FIELDS = ("shadow", "projection", "compensation")


def _mean_latency(answers: List[ResolvedAnswer]) -> float | None:
    latencies = [t for t in (valid_latency(a.response_time_ms) for a in answers) if t is not None]
    return mean(latencies) if latencies else None


def calculate_hidden_profile(answers: List[ResolvedAnswer]) -> HiddenMotiveProfile:
    """
    `answers` is the full resolved answer set: the overall latency baseline
    is taken across every category, not only hidden items.
    """
    accumulators: Dict[str, Dict[str, ScoreAccumulator]] = {f: {} for f in _LABEL_FIELDS}
    shadow_answers: Dict[str, List[ResolvedAnswer]] = {}

    for answer in in_category(answers, Category.HIDDEN):
        for field_name in _LABEL_FIELDS:
            label = getattr(answer.tag, field_name)
            if not label:
                continue
            acc = accumulators[field_name].setdefault(label, ScoreAccumulator())
            feed(acc, answer)
            if field_name == "shadow":
                shadow_answers.setdefault(label, []).append(answer)

    overall_latency = _mean_latency(answers)
    latency_ratios: Dict[str, float] = {}
    indicators: List[str] = []

    if overall_latency:
        for label, label_answers in shadow_answers.items():
            label_latency = _mean_latency(label_answers)
            if label_latency is None:
                continue
            ratio = round(label_latency / overall_latency, 2)
            latency_ratios[label] = ratio
            if ratio > DENIAL_LATENCY_RATIO:
                indicators.append(
                    f"Responses about {label} took {ratio:.2f}x your average time, "
                    f"which can point to an unacknowledged {label} motive"
                )

    return HiddenMotiveProfile(
        shadow={k: round1(acc.score()) for k, acc in accumulators["shadow"].items()},
        projection={k: round1(acc.score()) for k, acc in accumulators["projection"].items()},
        compensation={k: round1(acc.score()) for k, acc in accumulators["compensation"].items()},
        latency_ratios=latency_ratios,
        indicators=indicators,
    )
