from typing import Iterable, List

from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category


def in_category(answers: Iterable[ResolvedAnswer], category: Category) -> List[ResolvedAnswer]:
    return [a for a in answers if a.category == category]


def feed(accumulator, answer: ResolvedAnswer) -> None:
    """Add one resolved answer to an accumulator with its weights."""
    accumulator.add(answer.value, answer.weight, answer.response_time_ms)
