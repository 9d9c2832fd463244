from typing import List

from core.accumulator import ScoreAccumulator
from core.motive_components import DIRECTIONS, MOTIVE_SOURCES
from core.scores import DirectionScore
from core.standardisation import round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category


def calculate_direction_scores(answers: List[ResolvedAnswer]) -> List[DirectionScore]:
    """
    Approach vs avoidance split per motive.

    Both poles reduce to a 1-5 mean (neutral when unmeasured) and are
    reported as shares of their sum, so approach + avoidance is always 100.
    Ties go to approach.
    """
    accumulators = {
        motive: {direction: ScoreAccumulator() for direction in DIRECTIONS}
        for motive in MOTIVE_SOURCES
    }

    for answer in in_category(answers, Category.DIRECTION):
        motive = answer.tag.motive or answer.subcategory
        direction = answer.tag.direction
        if motive not in accumulators or direction not in DIRECTIONS:
            continue
        feed(accumulators[motive][direction], answer)

    results: List[DirectionScore] = []
    for motive in MOTIVE_SOURCES:
        approach_mean = accumulators[motive]["approach"].mean()
        avoidance_mean = accumulators[motive]["avoidance"].mean()
        total = approach_mean + avoidance_mean

        approach = round1(approach_mean / total * 100) if total > 0 else 50.0
        avoidance = round1(100.0 - approach)

        results.append(
            DirectionScore(
                motive=motive,
                approach=approach,
                avoidance=avoidance,
                dominant="approach" if approach >= avoidance else "avoidance",
                balance=round1(abs(approach - avoidance)),
            )
        )
    return results
