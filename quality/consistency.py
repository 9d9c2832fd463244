from dataclasses import asdict, dataclass, field
from statistics import mean
from typing import Dict, List

from core.standardisation import clamp, round1, variance
from questionnaires.answers import ResolvedAnswer
from questionnaires.questions import Category

# Largest possible variance on a 1-5 scale (half 1s, half 5s)
MAX_VARIANCE = 4.0
MIN_ITEMS = 2


@dataclass(frozen=True)
class ItemConsistency:
    categories: Dict[str, dict] = field(default_factory=dict)
    overall: float = 0.0
    weakest: str | None = None
    strongest: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def analyse_item_consistency(answers: List[ResolvedAnswer]) -> ItemConsistency:
    """
    Per-category agreement between items. Low variance of the chosen
    values within a category reads as high consistency. Categories with
    fewer than two answers are left out.
    """
    values: Dict[str, List[int]] = {}
    for answer in answers:
        values.setdefault(answer.category.value, []).append(answer.value)

    categories: Dict[str, dict] = {}
    for category in Category:
        category_values = values.get(category.value, [])
        if len(category_values) < MIN_ITEMS:
            continue
        var = variance(category_values)
        categories[category.value] = {
            "consistency": round1(clamp(100 - var / MAX_VARIANCE * 100)),
            "variance": round(var, 3),
            "samples": len(category_values),
        }

    if not categories:
        return ItemConsistency()

    ordered = sorted(categories, key=lambda c: categories[c]["consistency"])
    return ItemConsistency(
        categories=categories,
        overall=round1(mean(c["consistency"] for c in categories.values())),
        weakest=ordered[0],
        strongest=ordered[-1],
    )
