"""
Situational context shifts.

Answers are bucketed by context label, scored per motive and compared with
the respondent's baseline motive scores. Only shifts larger than the
configured threshold are reported.
"""
from typing import Dict, List

import config
from core.accumulator import ScoreAccumulator
from core.motive_components import CONTEXTS, MOTIVE_SOURCES, STRESS_CONTEXTS
from core.scores import ContextProfile, ContextScore, MotiveScore
from core.standardisation import round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

DEFAULT_CONTEXT = "normal"

STRESS_RESPONSES = {
    "achievement": "fight",
    "recognition": "fight",
    "freedom": "flight",
    "adventure": "flight",
    "security": "freeze",
    "connection": "freeze",
    "mastery": "flow",
    "creation": "flow",
}


def _new_bucket() -> Dict[str, ScoreAccumulator]:
    return {motive: ScoreAccumulator() for motive in MOTIVE_SOURCES}


def _dominant(bucket: Dict[str, ScoreAccumulator]) -> str | None:
    best, best_score = None, None
    for motive, acc in bucket.items():
        if acc.count == 0:
            continue
        score = acc.score()
        if best_score is None or score > best_score:
            best, best_score = motive, score
    return best


def calculate_context_profile(
    answers: List[ResolvedAnswer],
    baseline: List[MotiveScore],
    shift_threshold: float | None = None,
) -> ContextProfile:
    threshold = config.CONTEXT_SHIFT_THRESHOLD if shift_threshold is None else shift_threshold
    baseline_scores = {m.motive: m.score for m in baseline}

    buckets: Dict[str, Dict[str, ScoreAccumulator]] = {}
    stress = _new_bucket()

    for answer in in_category(answers, Category.CONTEXT):
        context = answer.tag.context or answer.subcategory or DEFAULT_CONTEXT
        bucket = buckets.setdefault(context, _new_bucket())

        motive = answer.tag.motive
        if motive not in bucket:
            continue
        feed(bucket[motive], answer)
        if context in STRESS_CONTEXTS:
            feed(stress[motive], answer)

    # Known contexts first in their usual order, then any custom labels
    ordered = [c for c in CONTEXTS if c in buckets] + [c for c in buckets if c not in CONTEXTS]

    contexts: List[ContextScore] = []
    for context in ordered:
        bucket = buckets[context]
        motive_scores = {
            motive: round1(acc.score()) for motive, acc in bucket.items() if acc.count > 0
        }

        shifts = {}
        for motive, score in motive_scores.items():
            delta = score - baseline_scores.get(motive, score)
            if abs(delta) > threshold:
                shifts[motive] = round1(delta)

        contexts.append(
            ContextScore(
                context=context,
                motive_scores=motive_scores,
                dominant_motive=_dominant(bucket),
                shifts=shifts,
                samples=sum(acc.count for acc in bucket.values()),
            )
        )

    stress_motive = _dominant(stress)
    return ContextProfile(
        contexts=contexts,
        stress_response=STRESS_RESPONSES.get(stress_motive) if stress_motive else None,
    )
