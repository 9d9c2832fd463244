from typing import List

from core.accumulator import ScoreAccumulator
from core.motive_components import MOTIVE_SOURCES
from core.scores import MotiveScore
from core.standardisation import assign_ranks, round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category


def calculate_motive_scores(answers: List[ResolvedAnswer]) -> List[MotiveScore]:
    """
    Score the eight motive sources.

    The option's motive tag decides the target; choice items without one
    fall back to the question subcategory.
    """
    accumulators = {motive: ScoreAccumulator() for motive in MOTIVE_SOURCES}

    for answer in in_category(answers, Category.MOTIVE_SOURCE):
        motive = answer.tag.motive or answer.subcategory
        if motive not in accumulators:
            continue
        feed(accumulators[motive], answer)

    records = [
        MotiveScore(motive=motive, score=round1(acc.score()), samples=acc.count)
        for motive, acc in accumulators.items()
    ]
    return assign_ranks(records)
