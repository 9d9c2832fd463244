from typing import List

from core.accumulator import ScoreAccumulator
from core.scores import ValidationScore
from core.standardisation import rescale, round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

# Unmeasured validation checks sit on the scale midpoint (3 -> 50)
VALIDATION_DEFAULT_MEAN = 3.0

HIGH_SOCIAL_DESIRABILITY = 60.0
LOW_HONESTY = 40.0
MAX_SOCIAL_DESIRABILITY = 80.0
MIN_HONESTY = 30.0


def calculate_validation_score(answers: List[ResolvedAnswer]) -> ValidationScore:
    consistency_acc = ScoreAccumulator()
    honesty_acc = ScoreAccumulator()
    flagged = 0
    flagged_high = 0

    for answer in in_category(answers, Category.VALIDATION):
        if answer.tag.check:
            feed(consistency_acc, answer)
        if answer.tag.honesty:
            feed(honesty_acc, answer)
            if answer.question.social_desirability:
                flagged += 1
                if answer.value >= 4:
                    flagged_high += 1

    consistency = round1(rescale(consistency_acc.mean(VALIDATION_DEFAULT_MEAN)))
    honesty = round1(rescale(honesty_acc.mean(VALIDATION_DEFAULT_MEAN)))
    social_desirability = round1(flagged_high / flagged * 100) if flagged else 0.0

    flags: List[str] = []
    if social_desirability > HIGH_SOCIAL_DESIRABILITY:
        flags.append("HIGH_SOCIAL_DESIRABILITY")
    if honesty < LOW_HONESTY:
        flags.append("LOW_HONESTY_SCORE")

    is_valid = (
        social_desirability <= MAX_SOCIAL_DESIRABILITY
        and honesty >= MIN_HONESTY
        and len(flags) <= 1
    )

    return ValidationScore(
        consistency=consistency,
        honesty=honesty,
        social_desirability=social_desirability,
        is_valid=is_valid,
        flags=flags,
    )
