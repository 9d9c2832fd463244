from statistics import mean
from typing import List

from core.accumulator import ScoreAccumulator
from core.motive_components import MATURITY_SUBSCALES
from core.scores import MaturityScore
from core.standardisation import round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

# Keywords in the option's maturity tag that count toward each subscale
SUBSCALE_KEYWORDS = {
    "awareness": ("awareness", "emotional", "reflection"),
    "integration": ("balance", "harmony", "synthesis"),
    "growth": ("growth", "learning", "resilience"),
}

# (minimum overall score, level)
LEVEL_THRESHOLDS = ((80.0, 4), (60.0, 3), (40.0, 2))

MATURITY_LEVELS = {
    1: ("Reactive", "Motives drive you more than you steer them; reactions come before reflection."),
    2: ("Developing", "You recognise your motives and are starting to use them on purpose."),
    3: ("Integrated", "Your motives work together and you can shift between them when the situation calls for it."),
    4: ("Transcendent", "You direct your motives deliberately and turn setbacks into growth."),
}


def _subscales_for(answer: ResolvedAnswer) -> List[str]:
    label = (answer.tag.maturity or "").lower()
    matched = []
    for subscale in MATURITY_SUBSCALES:
        if answer.subcategory == subscale or any(k in label for k in SUBSCALE_KEYWORDS[subscale]):
            matched.append(subscale)
    return matched


def maturity_level(overall: float) -> int:
    for threshold, level in LEVEL_THRESHOLDS:
        if overall >= threshold:
            return level
    return 1


def calculate_maturity_score(answers: List[ResolvedAnswer]) -> MaturityScore:
    accumulators = {subscale: ScoreAccumulator() for subscale in MATURITY_SUBSCALES}

    for answer in in_category(answers, Category.MATURITY):
        for subscale in _subscales_for(answer):
            feed(accumulators[subscale], answer)

    subscores = {s: acc.score() for s, acc in accumulators.items()}
    overall = round1(mean(subscores.values()))
    level = maturity_level(overall)
    name, description = MATURITY_LEVELS[level]

    return MaturityScore(
        awareness=round1(subscores["awareness"]),
        integration=round1(subscores["integration"]),
        growth=round1(subscores["growth"]),
        overall=overall,
        level=level,
        level_name=name,
        description=description,
    )
