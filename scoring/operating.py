from typing import List

from core.accumulator import ScoreAccumulator
from core.motive_components import OPERATING_AXES, OPERATING_AXIS_ALIASES
from core.scores import OperatingScore
from core.standardisation import round1
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category
from scoring.common import feed, in_category

# Score at or below LEFT_TENDENCY leans to the left pole, at or above
# RIGHT_TENDENCY to the right pole
LEFT_TENDENCY = 35.0
RIGHT_TENDENCY = 65.0


def _resolve_axis(answer: ResolvedAnswer) -> str | None:
    axis = answer.tag.axis or answer.subcategory
    if axis is None:
        return None
    return OPERATING_AXIS_ALIASES.get(axis, axis)


def calculate_operating_scores(answers: List[ResolvedAnswer]) -> List[OperatingScore]:
    """
    Each axis has a left and a right pole. The score is the right pole's
    share of the weighted answer mass on that axis, 50 when nothing landed.
    """
    poles = {
        axis: {pole: ScoreAccumulator() for pole in pair}
        for axis, pair in OPERATING_AXES.items()
    }

    for answer in in_category(answers, Category.OPERATING):
        axis = _resolve_axis(answer)
        if axis not in poles:
            continue
        pole = answer.tag.pole
        if pole not in poles[axis]:
            continue
        feed(poles[axis][pole], answer)

    results: List[OperatingScore] = []
    for axis, (left, right) in OPERATING_AXES.items():
        left_mass = poles[axis][left].mass
        right_mass = poles[axis][right].mass
        total = left_mass + right_mass
        score = round1(right_mass / total * 100) if total > 0 else 50.0

        if score <= LEFT_TENDENCY:
            tendency = "left"
        elif score >= RIGHT_TENDENCY:
            tendency = "right"
        else:
            tendency = "balanced"

        if score > 50:
            dominant = right
        elif score < 50:
            dominant = left
        else:
            dominant = None

        results.append(
            OperatingScore(
                axis=axis,
                score=score,
                tendency=tendency,
                dominant_pole=dominant,
                samples=poles[axis][left].count + poles[axis][right].count,
            )
        )
    return results
