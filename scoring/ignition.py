from typing import List

from core.accumulator import ScoreAccumulator
from core.motive_components import IGNITION_CONDITIONS
from core.scores import IgnitionScore
from core.standardisation import assign_ranks, round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category


def calculate_ignition_scores(answers: List[ResolvedAnswer]) -> List[IgnitionScore]:
    accumulators = {condition: ScoreAccumulator() for condition in IGNITION_CONDITIONS}

    for answer in in_category(answers, Category.IGNITION):
        condition = answer.tag.ignition or answer.subcategory
        if condition not in accumulators:
            continue
        feed(accumulators[condition], answer)

    records = [
        IgnitionScore(condition=condition, score=round1(acc.score()), samples=acc.count)
        for condition, acc in accumulators.items()
    ]
    return assign_ranks(records)
