from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from questionnaires.questions import Category, Option, Question


@dataclass(frozen=True)
class Answer:
    """One submitted response, as produced by the interaction layer."""
    question_id: str
    option_id: str
    value: int
    response_time_ms: float | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True)
class ResolvedAnswer:
    """An answer joined with the question and option it refers to."""
    answer: Answer
    question: Question
    option: Option

    @property
    def category(self) -> Category:
        return self.question.category

    @property
    def subcategory(self) -> str | None:
        return self.question.subcategory

    @property
    def tag(self):
        return self.option.tag

    @property
    def value(self) -> int:
        return self.option.value

    @property
    def weight(self) -> float:
        return self.question.weight

    @property
    def response_time_ms(self) -> float | None:
        return self.answer.response_time_ms
